from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_bill():
    """Record a bill through the service, optionally backdating it."""
    from apps.bills.models import Bill
    from apps.bills.services import create_bill

    def _make_bill(items, created_at=None, created_by='u1'):
        total_amount = sum(item['price'] * item['quantity'] for item in items)
        total_mrp = sum(item['mrp'] * item['quantity'] for item in items)
        bill = create_bill(
            items=items,
            total_amount=total_amount,
            total_mrp=total_mrp,
            total_savings=total_mrp - total_amount,
            created_by=created_by,
        )
        if created_at is not None:
            if isinstance(created_at, str):
                created_at = datetime.fromisoformat(created_at).replace(tzinfo=timezone.utc)
            Bill.objects.filter(id=bill.id).update(created_at=created_at)
            bill.refresh_from_db()
        return bill
    return _make_bill
