from decimal import Decimal

import pytest
from rest_framework import serializers

from apps.core.fields import MoneyField


@pytest.mark.parametrize('value,expected', [
    (30.299999999999997, Decimal('30.30')),
    ('10.005', Decimal('10.01')),
    (5, Decimal('5.00')),
])
def test_money_field_rounds_to_cents(value, expected):
    assert MoneyField().to_internal_value(value) == expected


def test_money_field_still_limits_digits():
    with pytest.raises(serializers.ValidationError):
        MoneyField().to_internal_value('12345678901.00')


def test_money_field_rejects_negative_amounts():
    with pytest.raises(serializers.ValidationError):
        MoneyField().run_validation('-0.01')
