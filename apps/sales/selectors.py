"""
Selectors for sales reporting.

Every aggregate is computed over the same set of bills, selected by
creation date with the shared bill date predicate.
"""
from django.db.models import Count, DecimalField, ExpressionWrapper, F, Sum
from apps.bills.models import Bill, BillItem
from apps.bills.selectors import bill_date_filter

TOP_PRODUCTS_LIMIT = 10

LINE_TOTAL = DecimalField(max_digits=14, decimal_places=2)


def get_bill_totals(start=None, end=None):
    """Bill count plus summed amount, savings and MRP (zero when nothing matches)."""
    return Bill.objects.filter(bill_date_filter(start, end)).aggregate(
        total_bills=Count('id'),
        total_sales=Sum('total_amount', default=0),
        total_savings=Sum('total_savings', default=0),
        total_mrp=Sum('total_mrp', default=0),
    )


def get_total_items_sold(start=None, end=None):
    """Units sold across all items of the matching bills."""
    totals = BillItem.objects.filter(bill_date_filter(start, end, prefix='bill__')).aggregate(
        total_items_sold=Sum('quantity', default=0),
    )
    return totals['total_items_sold']


def get_top_products(start=None, end=None, limit=TOP_PRODUCTS_LIMIT):
    """
    Rank sold products by revenue.
    
    Items are grouped by their snapshot name and product ID, so a product that
    was renamed between sales shows up once per name. Ties on revenue are
    broken by product name, then product ID.
    
    Returns:
        list of dicts: product_id, product_name, total_quantity,
        total_revenue, total_mrp_value
    """
    queryset = (
        BillItem.objects
        .filter(bill_date_filter(start, end, prefix='bill__'))
        .values('product_id', product_name=F('name'))
        .annotate(
            total_quantity=Sum('quantity'),
            total_revenue=Sum(ExpressionWrapper(F('price') * F('quantity'), output_field=LINE_TOTAL)),
            total_mrp_value=Sum(ExpressionWrapper(F('mrp') * F('quantity'), output_field=LINE_TOTAL)),
        )
        .order_by('-total_revenue', 'product_name', 'product_id')
    )
    return list(queryset[:limit])


def get_sales_summary(start=None, end=None):
    """
    Summarise sales between two dates (inclusive, either may be None).
    
    The three queries are not run under one transaction; any failure
    propagates so callers never see a partially computed summary.
    """
    summary = get_bill_totals(start, end)
    summary['total_items_sold'] = get_total_items_sold(start, end)
    summary['top_products'] = get_top_products(start, end)
    return summary
