from django.contrib import admin
from apps.bills.models import Bill, BillItem


class BillItemInline(admin.TabularInline):
    model = BillItem
    extra = 0
    fields = ('product', 'name', 'price', 'mrp', 'quantity')
    raw_id_fields = ('product',)


@admin.register(Bill)
class BillAdmin(admin.ModelAdmin):
    list_display = ('id', 'total_amount', 'total_mrp', 'total_savings', 'created_by', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('created_by',)
    readonly_fields = ('created_at',)
    inlines = [BillItemInline]
