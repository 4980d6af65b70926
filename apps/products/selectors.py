"""
Selectors for Product read operations.
All database read queries should be placed here.
"""
from django.db.models import Q
from apps.products.models import Product


def get_product_by_id(product_id):
    """Get a single product by ID."""
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        return None


def get_product_by_sku(sku):
    """Get a product by SKU (case-insensitive)."""
    if not sku:
        return None
    return Product.objects.filter(sku__iexact=sku).first()


def list_products(search=None, offset=0, limit=None):
    """
    List products newest first, optionally matching a search term.
    
    Args:
        search: case-insensitive substring matched against name or SKU
        offset: number of rows to skip
        limit: page size (None for all rows)
    
    Returns:
        tuple: (queryset, total_count)
    """
    queryset = Product.objects.all()
    
    if search:
        queryset = queryset.filter(Q(name__icontains=search) | Q(sku__icontains=search))
    
    total_count = queryset.count()
    
    if limit:
        queryset = queryset[offset:offset + limit]
    
    return queryset, total_count
