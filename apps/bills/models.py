from django.db import models


class Bill(models.Model):
    """A recorded sale. Created once together with all of its items, never edited."""
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total_mrp = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total_savings = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    created_by = models.CharField(max_length=255, blank=True, null=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'bills'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Bill #{self.pk} - {self.total_amount}"


class BillItem(models.Model):
    """
    A line of a bill. Name, price and MRP are snapshots taken at sale time;
    product is a soft reference and may point at a deleted product.
    """
    bill = models.ForeignKey(Bill, related_name='items', on_delete=models.CASCADE)
    product = models.ForeignKey(
        'products.Product',
        related_name='bill_items',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        blank=True,
        null=True,
    )
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    mrp = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.PositiveIntegerField()

    class Meta:
        db_table = 'bill_items'
        ordering = ['id']

    def __str__(self):
        return f"{self.name} x{self.quantity}"
