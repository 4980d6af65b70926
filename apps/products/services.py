"""
Services for Product write operations.
All database write operations should be placed here.
Services can call selectors for read operations.
"""
from django.db import IntegrityError, transaction
from apps.core.updates import build_setters, apply_updates
from apps.products.models import Product
from apps.products.selectors import get_product_by_sku, get_product_by_id

SKU_EXISTS = 'SKU already exists'


def _normalize_sku(sku):
    sku = (sku or '').strip()
    return sku or None


def _set_sku(product, value):
    product.sku = _normalize_sku(value)


PRODUCT_UPDATE_SETTERS = build_setters(
    ['name', 'price', 'mrp', 'image_url', 'category'],
    sku=_set_sku,
)


def create_product(name, price, mrp, image_url=None, sku=None, category=None):
    """
    Create a new product.
    
    Raises:
        ValueError: If another product already uses the SKU (case-insensitive)
    """
    sku = _normalize_sku(sku)
    if get_product_by_sku(sku):
        raise ValueError(SKU_EXISTS)
    
    try:
        with transaction.atomic():
            return Product.objects.create(
                name=name,
                price=price,
                mrp=mrp,
                image_url=image_url,
                sku=sku,
                category=category,
            )
    except IntegrityError:
        # Lost a race with a concurrent insert of the same SKU
        raise ValueError(SKU_EXISTS)


def update_product(product_id, **updates):
    """
    Update an existing product from allowlisted fields.
    
    Returns:
        Product instance or None if not found
    
    Raises:
        ValueError: If no allowlisted field is given or the SKU is taken
    """
    product = get_product_by_id(product_id)
    if not product:
        return None
    
    if 'sku' in updates:
        existing = get_product_by_sku(_normalize_sku(updates['sku']))
        if existing and existing.id != product.id:
            raise ValueError(SKU_EXISTS)
    
    try:
        with transaction.atomic():
            return apply_updates(product, updates, PRODUCT_UPDATE_SETTERS)
    except IntegrityError:
        raise ValueError(SKU_EXISTS)


def delete_product(product_id):
    """
    Delete a product by ID. Bill items that reference it keep the dangling ID.
    
    Returns:
        bool: True if deleted, False if not found
    """
    product = get_product_by_id(product_id)
    if not product:
        return False
    
    product.delete()
    return True
