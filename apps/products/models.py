from django.db import models


class Product(models.Model):
    """Catalog product. SKU is optional but unique (case-insensitive) when set."""
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    mrp = models.DecimalField(max_digits=12, decimal_places=2)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    sku = models.CharField(max_length=255, blank=True, null=True, db_index=True)
    category = models.CharField(max_length=100, blank=True, null=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.sku or '-'} - {self.name}"
