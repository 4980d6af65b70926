from django.contrib import admin
from apps.users.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('name', 'shop_name', 'phone', 'email', 'created_at')
    search_fields = ('name', 'shop_name', 'phone', 'email')
    readonly_fields = ('id', 'created_at', 'updated_at')
