"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_cache():
    """Tracking projections and throttle counters must not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, django_user_model):
    """An API client logged in as a regular (non-staff) user."""
    user = django_user_model.objects.create_user(
        username='customer',
        email='customer@example.com',
        password='testpass123',
    )
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def staff_client(django_user_model):
    """An API client logged in as a staff user."""
    from rest_framework.test import APIClient
    user = django_user_model.objects.create_user(
        username='staff',
        email='staff@example.com',
        password='testpass123',
        is_staff=True,
    )
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def make_product(db):
    """Factory for catalog products."""
    from apps.catalog.infrastructure.models import ProductModel

    def _make(name='Product', price='100.00', stock=100, is_active=True, image_url=''):
        return ProductModel.objects.create(
            name=name,
            price=Decimal(price),
            stock_quantity=stock,
            is_active=is_active,
            image_url=image_url,
        )

    return _make


@pytest.fixture
def shirt(make_product):
    return make_product(name='Printed T-Shirt', price='500.00', stock=20, image_url='https://cdn.example.com/shirt.jpg')


@pytest.fixture
def mug(make_product):
    return make_product(name='Photo Mug', price='300.00', stock=10)


@pytest.fixture
def customer_payload():
    """Valid customer, delivery and payment fields for checkout requests."""
    return {
        'customer_name': 'Rahim Uddin',
        'phone': '+880 1712-345678',
        'district': 'Dhaka',
        'thana': 'Dhanmondi',
        'address': 'House 12, Road 5',
        'payment_method': 'bkash',
        'transaction_id': 'TRX123456',
    }


@pytest.fixture
def add_to_cart(api_client):
    """Add a product to a cart through the API and return the cart payload."""
    def _add(owner_id, product, quantity=1, customization=None):
        payload = {'product_id': str(product.id), 'quantity': quantity}
        if customization is not None:
            payload['customization'] = customization
        response = api_client.post(f'/api/v1/carts/{owner_id}/', payload, format='json')
        assert response.status_code == 200, response.data
        return response.data

    return _add


@pytest.fixture
def place_order(api_client, add_to_cart, shirt, mug, customer_payload):
    """Check out a two-product cart (shirt x2, mug x1) and return the response data."""
    def _place(owner_id='session-1', **overrides):
        add_to_cart(owner_id, shirt, quantity=2)
        add_to_cart(owner_id, mug, quantity=1)
        payload = {'owner_id': owner_id, **customer_payload, **overrides}
        response = api_client.post('/api/v1/orders/', payload, format='json')
        assert response.status_code == 201, response.data
        return response.data

    return _place
