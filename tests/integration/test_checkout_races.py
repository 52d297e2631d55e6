"""
Checkout submissions that overlap on the same cart.
"""
import pytest

from apps.catalog.infrastructure.repositories import DjangoProductCatalog
from apps.orders.application.dtos import PlaceOrderDTO
from apps.orders.application.use_cases import PlaceOrderUseCase
from apps.orders.domain.exceptions import IdempotencyKeyReusedError
from apps.orders.infrastructure.models import OrderModel
from apps.orders.infrastructure.repositories import DjangoCartRepository, DjangoOrderRepository
from shared.domain.exceptions import ValidationError
from tests.factories import build_order

pytestmark = pytest.mark.django_db


def make_use_case():
    return PlaceOrderUseCase(
        order_repository=DjangoOrderRepository(),
        cart_repository=DjangoCartRepository(),
        product_catalog=DjangoProductCatalog(),
    )


def checkout_dto(**overrides):
    fields = {
        'owner_id': 'session-1',
        'customer_name': 'Rahim Uddin',
        'phone': '01712345678',
        'district': 'Dhaka',
        'address': 'House 12, Road 5',
        'payment_method': 'cod',
    }
    fields.update(overrides)
    return PlaceOrderDTO(**fields)


def run_after_validation(monkeypatch, use_case, action):
    """Run ``action`` once validation has read the cart, before the order is written."""
    validate = use_case._validate

    def validate_then_act(input_dto):
        result = validate(input_dto)
        action()
        return result

    monkeypatch.setattr(use_case, '_validate', validate_then_act)


def test_overlapping_submission_creates_one_order(monkeypatch, add_to_cart, shirt):
    add_to_cart('session-1', shirt, quantity=2)
    first = make_use_case()
    run_after_validation(monkeypatch, first, lambda: make_use_case().execute(checkout_dto()))

    with pytest.raises(ValidationError) as exc_info:
        first.execute(checkout_dto())

    assert exc_info.value.field == 'items'
    assert exc_info.value.errors == {'items': ["Your cart is empty."]}
    assert OrderModel.objects.count() == 1
    assert DjangoCartRepository().find_by_owner('session-1').is_empty


def test_overlapping_retry_with_same_key_replays(monkeypatch, add_to_cart, shirt):
    add_to_cart('session-1', shirt)
    winner = {}

    def submit_retry():
        winner['result'] = make_use_case().execute(checkout_dto(idempotency_key='retry-1'))

    first = make_use_case()
    run_after_validation(monkeypatch, first, submit_retry)

    result = first.execute(checkout_dto(idempotency_key='retry-1'))

    assert winner['result'].created
    assert not result.created
    assert result.data.tracking_id == winner['result'].data.tracking_id
    assert OrderModel.objects.count() == 1


def test_cart_edited_after_validation_is_not_ordered(monkeypatch, add_to_cart, shirt, mug):
    add_to_cart('session-1', shirt)
    first = make_use_case()
    run_after_validation(monkeypatch, first, lambda: add_to_cart('session-1', mug))

    with pytest.raises(ValidationError) as exc_info:
        first.execute(checkout_dto())

    assert exc_info.value.field == 'items'
    assert OrderModel.objects.count() == 0
    assert len(DjangoCartRepository().find_by_owner('session-1').items) == 2


def test_key_taken_by_another_owner_mid_checkout_is_a_conflict(monkeypatch, add_to_cart, shirt):
    add_to_cart('bob', shirt)
    first = make_use_case()
    run_after_validation(
        monkeypatch,
        first,
        lambda: DjangoOrderRepository().add(build_order(owner_id='alice', idempotency_key='k1')),
    )

    with pytest.raises(IdempotencyKeyReusedError):
        first.execute(checkout_dto(owner_id='bob', idempotency_key='k1'))

    assert OrderModel.objects.get().owner_id == 'alice'
    assert not DjangoCartRepository().find_by_owner('bob').is_empty
