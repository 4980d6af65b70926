from decimal import Decimal


def line(name, price, mrp, quantity, product_id=None):
    """A bill line as the service receives it after validation."""
    return {
        'product_id': product_id,
        'name': name,
        'price': Decimal(str(price)),
        'mrp': Decimal(str(mrp)),
        'quantity': quantity,
    }
