"""
Domain events are published only after the transaction commits.
"""
import pytest
from django.dispatch import receiver

from apps.orders.domain.events import OrderPlaced, OrderStatusChanged
from shared.application.event_dispatcher import domain_event_published

pytestmark = pytest.mark.django_db


@pytest.fixture
def published():
    events = []

    @receiver(domain_event_published)
    def collect(sender, event, **kwargs):
        events.append(event)

    yield events
    domain_event_published.disconnect(collect)


def test_checkout_publishes_order_placed(published, place_order, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        placed = place_order()

    [event] = [event for event in published if isinstance(event, OrderPlaced)]
    assert event.tracking_id == placed['tracking_id']
    assert str(event.total) == '1300.00'


def test_rejected_checkout_publishes_nothing(
    published, api_client, customer_payload, django_capture_on_commit_callbacks
):
    with django_capture_on_commit_callbacks(execute=True):
        response = api_client.post('/api/v1/orders/', {'owner_id': 'empty', **customer_payload}, format='json')

    assert response.status_code == 400
    assert published == []


def test_status_change_publishes_event(published, place_order, staff_client, django_capture_on_commit_callbacks):
    place_order()
    order_id = staff_client.get('/api/v1/admin/orders/').data['results'][0]['id']

    with django_capture_on_commit_callbacks(execute=True):
        staff_client.patch(f'/api/v1/admin/orders/{order_id}/status/', {'status': 'shipped'}, format='json')

    [event] = [event for event in published if isinstance(event, OrderStatusChanged)]
    assert (event.old_status, event.new_status, event.kind) == ('pending', 'shipped', 'order')
