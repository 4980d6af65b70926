"""
Services for Bill write operations.
"""
import logging
from django.db import transaction
from apps.bills.models import Bill, BillItem
from apps.bills.selectors import get_bill_with_items

logger = logging.getLogger(__name__)

ITEMS_REQUIRED = 'Items array is required'


def create_bill(items, total_amount=0, total_mrp=0, total_savings=0, created_by=None):
    """
    Record a bill and all of its items atomically.
    
    The bill row is inserted first so its ID can be used by every item row.
    Items are inserted one by one in input order inside the same transaction;
    any failure rolls back the bill and every item already written.
    
    Args:
        items: non-empty list of dicts with product_id, name, price, mrp, quantity
        total_amount: amount charged
        total_mrp: sum of list prices
        total_savings: total_mrp - total_amount as computed by the client
        created_by: opaque identifier of the user who rang up the sale
    
    Returns:
        Bill with its items prefetched, re-read after commit
    
    Raises:
        ValueError: If items is empty (nothing is written)
        django.db.DatabaseError: If the store rejects any insert
    """
    if not items:
        raise ValueError(ITEMS_REQUIRED)
    
    with transaction.atomic():
        bill = Bill.objects.create(
            total_amount=total_amount,
            total_mrp=total_mrp,
            total_savings=total_savings,
            created_by=created_by,
        )
        
        for item in items:
            BillItem.objects.create(
                bill=bill,
                product_id=item.get('product_id'),
                name=item['name'],
                price=item['price'],
                mrp=item['mrp'],
                quantity=item['quantity'],
            )
    
    logger.info(f"Created bill {bill.id} with {len(items)} items")
    
    return get_bill_with_items(bill.id)
