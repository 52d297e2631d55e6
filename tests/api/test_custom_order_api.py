"""
Custom order API tests.
"""
from uuid import uuid4

import pytest

from apps.orders.infrastructure.models import CartModel, CustomOrderModel

pytestmark = pytest.mark.django_db

CUSTOM_ORDERS_URL = '/api/v1/custom-orders/'


@pytest.fixture
def cushion(make_product):
    return make_product(name='Custom Cushion', price='200.00', stock=5)


@pytest.fixture
def custom_payload(cushion, customer_payload):
    return {
        **customer_payload,
        'product_id': str(cushion.id),
        'quantity': 3,
        'customization_instructions': 'Print our wedding photo with the date',
        'customization_images': ['uploads/b.jpg', 'uploads/a.jpg'],
        'customization_cost': '150.00',
    }


class TestPlaceCustomOrder:

    def test_total_is_base_times_quantity_plus_cost(self, api_client, custom_payload):
        response = api_client.post(CUSTOM_ORDERS_URL, custom_payload, format='json')

        assert response.status_code == 201
        assert response.data['total_price'] == '750.00'
        assert response.data['tracking_id'].startswith('CO')

        record = CustomOrderModel.objects.get(tracking_id=response.data['tracking_id'])
        assert record.status == 'pending'
        assert record.product_name == 'Custom Cushion'
        assert record.customization_images == ['uploads/b.jpg', 'uploads/a.jpg']
        assert record.payment_info['amount'] == '750.00'

    def test_does_not_touch_carts(self, api_client, custom_payload):
        api_client.post(CUSTOM_ORDERS_URL, custom_payload, format='json')

        assert CartModel.objects.count() == 0

    def test_unknown_product_is_a_field_error(self, api_client, custom_payload):
        response = api_client.post(
            CUSTOM_ORDERS_URL, {**custom_payload, 'product_id': str(uuid4())}, format='json'
        )

        assert response.status_code == 400
        assert response.data['field'] == 'product_id'
        assert CustomOrderModel.objects.count() == 0

    def test_collects_every_invalid_field(self, api_client, custom_payload):
        response = api_client.post(
            CUSTOM_ORDERS_URL,
            {
                **custom_payload,
                'phone': 'not-a-phone',
                'customization_instructions': '',
                'customization_cost': '-5.00',
            },
            format='json',
        )

        assert response.status_code == 400
        assert {
            'phone', 'customization_instructions', 'customization_cost',
        } <= set(response.data['errors'])

    @pytest.mark.parametrize('quantity', [0, 1000, 10 ** 12])
    def test_out_of_range_quantity_is_a_field_error(self, api_client, custom_payload, quantity):
        response = api_client.post(CUSTOM_ORDERS_URL, {**custom_payload, 'quantity': quantity}, format='json')

        assert response.status_code == 400
        assert response.data['field'] == 'quantity'
        assert CustomOrderModel.objects.count() == 0

    def test_payment_amount_above_total_is_rejected(self, api_client, custom_payload):
        response = api_client.post(
            CUSTOM_ORDERS_URL, {**custom_payload, 'payment_amount': '750.01'}, format='json'
        )

        assert response.status_code == 400
        assert response.data['field'] == 'payment_amount'

    def test_too_many_reference_images(self, api_client, custom_payload):
        response = api_client.post(
            CUSTOM_ORDERS_URL,
            {**custom_payload, 'customization_images': [f'uploads/{i}.jpg' for i in range(6)]},
            format='json',
        )

        assert response.status_code == 400
        assert response.data['field'] == 'customization_images'
