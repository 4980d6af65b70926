import uuid
from django.db import models


class User(models.Model):
    """Shop owner profile. Not tied to Django authentication."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    shop_name = models.CharField(max_length=255, blank=True, null=True)
    shop_address = models.TextField(blank=True, null=True)
    phone = models.CharField(max_length=32, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    gst = models.CharField(max_length=32, blank=True, null=True)
    avatar_url = models.URLField(max_length=500, blank=True, null=True)
    settings = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.name} ({self.shop_name or '-'})"
