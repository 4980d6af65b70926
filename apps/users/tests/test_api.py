import uuid
from unittest import mock

import pytest
from django.conf import settings
from django.db import DatabaseError

from apps.users.models import User

pytestmark = pytest.mark.django_db


@pytest.fixture
def shop_owner():
    return User.objects.create(
        id=uuid.UUID(settings.DEFAULT_USER_ID),
        name='Asha',
        shop_name='Corner Store',
        settings={'currency': 'INR'},
    )


def test_get_user(api_client, shop_owner):
    response = api_client.get(f'/api/users/{shop_owner.id}')

    assert response.status_code == 200
    assert response.json()['shop_name'] == 'Corner Store'


def test_get_missing_user(api_client):
    response = api_client.get(f'/api/users/{uuid.uuid4()}')

    assert response.status_code == 404
    assert response.json() == {'error': 'User not found'}


def test_update_user(api_client, shop_owner):
    response = api_client.put(f'/api/users/{shop_owner.id}', {
        'phone': '+91 98450 00000',
        'settings': {'currency': 'INR', 'printer': 'bt-58'},
        'is_admin': True,
    }, format='json')

    assert response.status_code == 200
    shop_owner.refresh_from_db()
    assert shop_owner.phone == '+91 98450 00000'
    assert shop_owner.settings['printer'] == 'bt-58'


def test_update_user_without_allowed_fields(api_client, shop_owner):
    response = api_client.put(f'/api/users/{shop_owner.id}', {'is_admin': True}, format='json')

    assert response.status_code == 400
    assert response.json() == {'error': 'No valid fields to update'}


def test_update_user_validates_values(api_client, shop_owner):
    response = api_client.put(f'/api/users/{shop_owner.id}', {'email': 'not-an-email'}, format='json')

    assert response.status_code == 400
    assert 'email' in response.json()


def test_update_missing_user(api_client):
    response = api_client.put(f'/api/users/{uuid.uuid4()}', {'name': 'X'}, format='json')

    assert response.status_code == 404


def test_profile_serves_default_user(api_client, shop_owner):
    response = api_client.get('/api/users/profile')

    assert response.status_code == 200
    assert response.json()['id'] == str(shop_owner.id)


def test_profile_without_default_user(api_client):
    response = api_client.get('/api/users/profile')

    assert response.status_code == 404


def test_legacy_user_list(api_client, shop_owner):
    User.objects.create(name='Ravi')

    response = api_client.get('/users')

    assert response.status_code == 200
    assert [user['name'] for user in response.json()] == ['Asha', 'Ravi']


def test_update_user_rejects_array_body(api_client, shop_owner):
    response = api_client.put(f'/api/users/{shop_owner.id}', [{'name': 'X'}], format='json')

    assert response.status_code == 400
    assert response.json() == {'error': 'No valid fields to update'}


@pytest.mark.parametrize('method,path,target', [
    ('get', f'/api/users/{uuid.uuid4()}', 'apps.users.api.get_user_by_id'),
    ('put', f'/api/users/{uuid.uuid4()}', 'apps.users.api.update_user'),
    ('get', '/api/users/profile', 'apps.users.api.get_user_by_id'),
])
def test_user_store_failure_returns_json_error(api_client, method, path, target):
    with mock.patch(target, side_effect=DatabaseError('too many connections')):
        response = getattr(api_client, method)(path, {'name': 'X'}, format='json')

    assert response.status_code == 500
    assert response.json() == {'error': 'too many connections'}
