from unittest import mock

import pytest
from django.db import DatabaseError

from apps.bills.tests.helpers import line

pytestmark = pytest.mark.django_db


def test_summary_endpoint(api_client, make_bill):
    make_bill([line('Soap', 10, 12, 2, product_id=1)], created_at='2024-05-10T09:00:00')
    make_bill([line('Rice', 5, 6, 1, product_id=2)], created_at='2024-05-20T09:00:00')

    response = api_client.get('/api/sales/summary', {'start': '2024-05-10', 'end': '2024-05-10'})

    assert response.status_code == 200
    body = response.json()
    assert body['total_bills'] == 1
    assert body['total_sales'] == 20
    assert body['total_savings'] == 4
    assert body['total_mrp'] == 24
    assert body['total_items_sold'] == 2
    assert body['top_products'] == [{
        'product_id': 1,
        'product_name': 'Soap',
        'total_quantity': 2,
        'total_revenue': 20,
        'total_mrp_value': 24,
    }]


def test_group_by_is_ignored(api_client, make_bill):
    make_bill([line('Soap', 10, 12, 2)])

    plain = api_client.get('/api/sales/summary').json()
    grouped = api_client.get('/api/sales/summary', {'groupBy': 'day'}).json()

    assert grouped == plain


def test_malformed_date_is_rejected(api_client):
    response = api_client.get('/api/sales/summary', {'end': '2024-02-30'})

    assert response.status_code == 400
    assert 'end' in response.json()['error']


def test_failing_query_fails_whole_summary(api_client, make_bill):
    make_bill([line('Soap', 10, 12, 2)])

    with mock.patch('apps.sales.selectors.get_top_products', side_effect=DatabaseError('query timed out')):
        response = api_client.get('/api/sales/summary')

    assert response.status_code == 500
    assert response.json() == {'error': 'query timed out'}
