from decimal import Decimal
from unittest import mock

import pytest
from django.db import DatabaseError, connection

from apps.bills.models import Bill, BillItem
from apps.bills.selectors import get_bill_with_items
from apps.bills.services import create_bill
from apps.bills.tests.helpers import line


def _fail_on_item(number):
    """Patch BillItem.save so that the n-th insert raises."""
    original_save = BillItem.save
    calls = []

    def flaky_save(self, *args, **kwargs):
        calls.append(self)
        if len(calls) == number:
            raise DatabaseError('disk full')
        return original_save(self, *args, **kwargs)

    return mock.patch.object(BillItem, 'save', flaky_save)


@pytest.mark.django_db
def test_create_bill_writes_one_bill_and_every_item():
    items = [line('Soap', 10, 12, 2), line('Rice', 5, 6, 1), line('Salt', 1, 1, 4)]

    bill = create_bill(items, total_amount=Decimal('29'), total_mrp=Decimal('34'), total_savings=Decimal('5'), created_by='u1')

    assert Bill.objects.count() == 1
    assert BillItem.objects.filter(bill=bill).count() == 3
    assert bill.created_by == 'u1'
    assert bill.created_at is not None


@pytest.mark.django_db
def test_created_items_match_input_in_order():
    items = [line('Soap', 10, 12, 2, product_id=7), line('Rice', 5, 6, 1)]

    bill = create_bill(items, total_amount=Decimal('25'), total_mrp=Decimal('30'), total_savings=Decimal('5'))

    stored = list(bill.items.all())
    assert len(stored) == len(items)
    for item, row in zip(items, stored):
        assert row.product_id == item['product_id']
        assert row.name == item['name']
        assert row.price == item['price']
        assert row.mrp == item['mrp']
        assert row.quantity == item['quantity']


@pytest.mark.django_db
def test_create_bill_rejects_empty_items_without_writing():
    with pytest.raises(ValueError):
        create_bill([], total_amount=0, total_mrp=0, total_savings=0)

    assert Bill.objects.count() == 0
    assert BillItem.objects.count() == 0


@pytest.mark.django_db
def test_product_reference_may_dangle():
    bill = create_bill([line('Discontinued', 3, 4, 1, product_id=424242)])

    assert bill.items.get().product_id == 424242


@pytest.mark.django_db(transaction=True)
def test_failed_item_insert_rolls_back_whole_bill():
    items = [line('Soap', 10, 12, 2), line('Rice', 5, 6, 1), line('Salt', 1, 1, 4)]

    with _fail_on_item(2):
        with pytest.raises(DatabaseError):
            create_bill(items, total_amount=Decimal('29'), total_mrp=Decimal('34'), total_savings=Decimal('5'))

    assert Bill.objects.count() == 0
    assert BillItem.objects.count() == 0


@pytest.mark.django_db(transaction=True)
def test_connection_is_usable_after_rollback():
    with _fail_on_item(1):
        with pytest.raises(DatabaseError):
            create_bill([line('Soap', 10, 12, 1)])

    assert not connection.in_atomic_block
    assert not connection.needs_rollback

    bill = create_bill([line('Soap', 10, 12, 1)])
    assert get_bill_with_items(bill.id).items.count() == 1
