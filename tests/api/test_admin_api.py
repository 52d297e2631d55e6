"""
Administrative order API tests.
"""
from uuid import uuid4

import pytest

from apps.orders.infrastructure.models import CustomOrderModel, OrderModel

pytestmark = pytest.mark.django_db

LIST_URL = '/api/v1/admin/orders/'
DETAIL_URL = '/api/v1/admin/orders/{order_id}/'
STATUS_URL = '/api/v1/admin/orders/{order_id}/status/'


@pytest.fixture
def placed_order(place_order):
    placed = place_order()
    return OrderModel.objects.get(tracking_id=placed['tracking_id'])


def change_status(client, order_id, status, **extra):
    return client.patch(STATUS_URL.format(order_id=order_id), {'status': status, **extra}, format='json')


class TestAdminAccess:

    def test_anonymous_is_rejected(self, api_client, placed_order):
        assert api_client.get(LIST_URL).status_code in (401, 403)
        assert change_status(api_client, placed_order.id, 'confirmed').status_code in (401, 403)

    def test_non_staff_is_forbidden(self, authenticated_client, placed_order):
        assert authenticated_client.get(LIST_URL).status_code == 403
        assert authenticated_client.get(DETAIL_URL.format(order_id=placed_order.id)).status_code == 403

    def test_jwt_login_for_staff(self, api_client, django_user_model, db):
        django_user_model.objects.create_user(username='ops', password='ops-pass-123', is_staff=True)

        token = api_client.post(
            '/api/v1/auth/token/', {'username': 'ops', 'password': 'ops-pass-123'}, format='json'
        )
        assert token.status_code == 200

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.data['access']}")
        assert api_client.get(LIST_URL).status_code == 200


class TestAdminListing:

    def test_lists_newest_first_with_full_records(self, staff_client, place_order):
        first = place_order(owner_id='session-1')
        second = place_order(owner_id='session-2')

        response = staff_client.get(LIST_URL)

        assert response.status_code == 200
        assert response.data['count'] == 2
        assert [row['tracking_id'] for row in response.data['results']] == [
            second['tracking_id'], first['tracking_id'],
        ]
        row = response.data['results'][0]
        assert row['phone'] == '01712345678'
        assert row['transaction_id'] == 'TRX123456'
        assert len(row['items']) == 2

    def test_filter_by_status(self, staff_client, place_order):
        place_order(owner_id='session-1')
        place_order(owner_id='session-2')
        order_id = staff_client.get(LIST_URL).data['results'][0]['id']
        change_status(staff_client, order_id, 'confirmed')

        response = staff_client.get(LIST_URL, {'status': 'confirmed'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == order_id

    def test_pagination(self, staff_client, place_order):
        for index in range(3):
            place_order(owner_id=f'session-{index}')

        response = staff_client.get(LIST_URL, {'page_size': 2})

        assert response.data['count'] == 3
        assert len(response.data['results']) == 2
        assert response.data['next'] is not None
        assert (response.data['page'], response.data['total_pages']) == (1, 2)

    def test_unknown_status_filter_is_rejected(self, staff_client, db):
        response = staff_client.get(LIST_URL, {'status': 'lost'})

        assert response.status_code == 400
        assert response.data['field'] == 'status'


class TestAdminDetail:

    def test_detail(self, staff_client, placed_order):
        response = staff_client.get(DETAIL_URL.format(order_id=placed_order.id))

        assert response.status_code == 200
        assert response.data['tracking_id'] == placed_order.tracking_id
        assert response.data['version'] == 1
        assert response.data['total'] == '1300.00'

    def test_unknown_order_returns_404(self, staff_client, db):
        response = staff_client.get(DETAIL_URL.format(order_id=uuid4()))

        assert response.status_code == 404
        assert response.data['code'] == 'ORDER_NOT_FOUND'


class TestStatusTransitions:

    def test_forward_path(self, staff_client, placed_order):
        for status in ('confirmed', 'processing', 'shipped', 'delivered'):
            response = change_status(staff_client, placed_order.id, status)
            assert response.status_code == 200, response.data
            assert response.data['status'] == status

        placed_order.refresh_from_db()
        assert placed_order.status == 'delivered'
        assert placed_order.version == 5

    def test_skipping_forward_is_allowed(self, staff_client, placed_order):
        response = change_status(staff_client, placed_order.id, 'delivered')

        assert response.status_code == 200
        assert response.data['version'] == 2

    def test_backward_move_is_rejected(self, staff_client, placed_order):
        change_status(staff_client, placed_order.id, 'delivered')

        response = change_status(staff_client, placed_order.id, 'pending')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_TRANSITION'
        assert response.data['current_status'] == 'delivered'
        assert response.data['requested_status'] == 'pending'
        placed_order.refresh_from_db()
        assert placed_order.status == 'delivered'

    def test_cancelled_is_final(self, staff_client, placed_order):
        change_status(staff_client, placed_order.id, 'cancelled')

        response = change_status(staff_client, placed_order.id, 'confirmed')

        assert response.status_code == 400
        assert response.data['current_status'] == 'cancelled'

    def test_shipped_cannot_be_cancelled(self, staff_client, placed_order):
        change_status(staff_client, placed_order.id, 'shipped')

        response = change_status(staff_client, placed_order.id, 'cancelled')

        assert response.status_code == 400

    def test_stale_expected_version_conflicts(self, staff_client, placed_order):
        change_status(staff_client, placed_order.id, 'confirmed', expected_version=1)

        response = change_status(staff_client, placed_order.id, 'cancelled', expected_version=1)

        assert response.status_code == 409
        assert response.data['code'] == 'CONCURRENT_MODIFICATION'
        placed_order.refresh_from_db()
        assert (placed_order.status, placed_order.version) == ('confirmed', 2)

    def test_unknown_status_value(self, staff_client, placed_order):
        response = change_status(staff_client, placed_order.id, 'teleported')

        assert response.status_code == 400
        assert response.data['code'] == 'VALIDATION_ERROR'
        assert response.data['field'] == 'status'

    def test_unknown_order(self, staff_client, db):
        response = change_status(staff_client, uuid4(), 'confirmed')

        assert response.status_code == 404


class TestAdminCustomOrders:

    @pytest.fixture
    def custom_order(self, api_client, make_product, customer_payload):
        product = make_product(name='Name Plate', price='400.00')
        placed = api_client.post(
            '/api/v1/custom-orders/',
            {
                **customer_payload,
                'product_id': str(product.id),
                'customization_instructions': 'Wooden plate, "Rahman Villa"',
            },
            format='json',
        ).data
        return CustomOrderModel.objects.get(tracking_id=placed['tracking_id'])

    def test_list_and_transition(self, staff_client, custom_order):
        listing = staff_client.get('/api/v1/admin/custom-orders/')
        assert listing.data['count'] == 1
        assert listing.data['results'][0]['total_price'] == '400.00'

        response = staff_client.patch(
            f'/api/v1/admin/custom-orders/{custom_order.id}/status/', {'status': 'confirmed'}, format='json'
        )

        assert response.status_code == 200
        assert response.data['status'] == 'confirmed'
        assert response.data['customization_instructions'] == 'Wooden plate, "Rahman Villa"'

    def test_order_ids_do_not_cross_kinds(self, staff_client, custom_order):
        response = staff_client.get(DETAIL_URL.format(order_id=custom_order.id))

        assert response.status_code == 404
