"""
Serializer fields shared across apps.
"""
from decimal import Decimal, ROUND_HALF_UP
from rest_framework import serializers

CENT = Decimal('0.01')


class MoneyField(serializers.DecimalField):
    """
    Non-negative amount with two decimal places.

    Clients that add up prices in floating point send values such as
    30.299999999999997; these are rounded half-up to the cent before the
    digit count is checked, as a numeric column would store them.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', 12)
        kwargs.setdefault('decimal_places', 2)
        kwargs.setdefault('min_value', Decimal('0'))
        super().__init__(**kwargs)

    def validate_precision(self, value):
        value = value.quantize(CENT, rounding=ROUND_HALF_UP)
        return super().validate_precision(value)
