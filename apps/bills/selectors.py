"""
Selectors for Bill read operations.
"""
from django.db.models import Prefetch, Q
from apps.bills.models import Bill, BillItem


def bill_date_filter(start=None, end=None, prefix=''):
    """
    Build the bill creation-date predicate shared by listings and reports.
    
    Both bounds are inclusive and compare the calendar date of created_at,
    ignoring time of day. Missing bounds leave that side open.
    
    Args:
        start: datetime.date lower bound or None
        end: datetime.date upper bound or None
        prefix: lookup path to the bill, e.g. 'bill__' when filtering items
    
    Returns:
        Q
    """
    condition = Q()
    if start:
        condition &= Q(**{f'{prefix}created_at__date__gte': start})
    if end:
        condition &= Q(**{f'{prefix}created_at__date__lte': end})
    return condition


def bills_with_items():
    """Bills with their items prefetched in insertion order."""
    return Bill.objects.prefetch_related(
        Prefetch('items', queryset=BillItem.objects.order_by('id'))
    )


def get_bill_with_items(bill_id):
    """Get a bill and its items, or None."""
    try:
        return bills_with_items().get(id=bill_id)
    except Bill.DoesNotExist:
        return None


def list_bills(start=None, end=None, offset=0, limit=None):
    """
    List bills newest first, restricted to a creation-date range.
    
    Returns:
        tuple: (queryset, total_count)
    """
    condition = bill_date_filter(start, end)
    total_count = Bill.objects.filter(condition).count()
    
    queryset = bills_with_items().filter(condition).order_by('-created_at', '-id')
    if limit:
        queryset = queryset[offset:offset + limit]
    
    return queryset, total_count
