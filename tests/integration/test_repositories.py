"""
Django repository tests against the test database.
"""
from decimal import Decimal
from uuid import uuid4

import pytest
from django.db import transaction

from apps.orders.domain.entities import Cart
from apps.orders.domain.exceptions import ConcurrentModificationError, DuplicateCheckoutError, TrackingIdCollisionError
from apps.orders.domain.value_objects import Customization, OrderStatus
from apps.orders.infrastructure.models import CartModel, OrderModel
from apps.orders.infrastructure.repositories import (
    DjangoCartRepository,
    DjangoCustomOrderRepository,
    DjangoOrderRepository,
)
from shared.domain.exceptions import PersistenceError
from tests.factories import build_custom_order, build_order

pytestmark = pytest.mark.django_db


class TestCartRepository:

    def test_round_trip_keeps_lines_and_customization(self):
        repository = DjangoCartRepository()
        cart = Cart.create('session-1')
        line = cart.add_item(
            product_id=uuid4(),
            name='Printed T-Shirt',
            unit_price=Decimal('500.00'),
            quantity=2,
            customization=Customization(size='M', images=('a.png',)),
        )
        repository.save(cart)

        loaded = repository.find_by_owner('session-1')

        assert [item.id for item in loaded.items] == [line.id]
        assert loaded.items[0].customization == Customization(size='M', images=('a.png',))
        assert loaded.total_amount == Decimal('1000.00')

    def test_corrupt_line_is_dropped(self):
        repository = DjangoCartRepository()
        cart = Cart.create('session-1')
        cart.add_item(product_id=uuid4(), name='Photo Mug', unit_price=Decimal('300.00'))
        repository.save(cart)

        model = CartModel.objects.get(owner_id='session-1')
        model.items = model.items + [
            {'id': str(uuid4()), 'product_id': 'not-a-uuid', 'name': 'Broken', 'unit_price': '1', 'quantity': 1},
            {'id': str(uuid4()), 'product_id': str(uuid4()), 'name': 'Zero', 'unit_price': '1', 'quantity': 0},
            'garbage',
        ]
        model.save()

        loaded = repository.find_by_owner('session-1')

        assert [item.name for item in loaded.items] == ['Photo Mug']

    def test_save_replaces_previous_lines(self):
        repository = DjangoCartRepository()
        cart = Cart.create('session-1')
        cart.add_item(product_id=uuid4(), name='Photo Mug', unit_price=Decimal('300.00'))
        repository.save(cart)

        cart.clear()
        repository.save(cart)

        assert repository.find_by_owner('session-1').is_empty
        assert CartModel.objects.count() == 1

    def test_locked_read_matches_plain_read(self):
        repository = DjangoCartRepository()
        cart = Cart.create('session-1')
        cart.add_item(product_id=uuid4(), name='Photo Mug', unit_price=Decimal('300.00'), quantity=2)
        repository.save(cart)

        with transaction.atomic():
            locked = repository.find_by_owner_for_update('session-1')

        assert locked.snapshot() == repository.find_by_owner('session-1').snapshot()
        assert repository.find_by_owner_for_update('nobody').is_empty


class TestOrderRepository:

    def test_add_and_find(self):
        repository = DjangoOrderRepository()
        order = build_order()
        repository.add(order)

        loaded = repository.find_by_tracking_id(order.tracking_id.value)

        assert loaded.id == order.id
        assert loaded.total == Decimal('1300')
        assert loaded.customer.phone.value == '01712345678'
        assert repository.find_by_id(order.id).tracking_id == order.tracking_id

    def test_duplicate_tracking_id_never_overwrites(self):
        repository = DjangoOrderRepository()
        first = build_order(notes='first')
        repository.add(first)

        second = build_order(tracking_id=first.tracking_id, notes='second')
        with pytest.raises(TrackingIdCollisionError):
            repository.add(second)

        assert OrderModel.objects.count() == 1
        assert OrderModel.objects.get().notes == 'first'

    def test_duplicate_idempotency_key(self):
        repository = DjangoOrderRepository()
        repository.add(build_order(idempotency_key='checkout-1'))

        with pytest.raises(DuplicateCheckoutError):
            repository.add(build_order(idempotency_key='checkout-1'))

        assert repository.find_by_idempotency_key('checkout-1') is not None

    def test_idempotency_key_is_unique_across_owners(self):
        repository = DjangoOrderRepository()
        repository.add(build_order(owner_id='alice', idempotency_key='k1'))

        with pytest.raises(DuplicateCheckoutError):
            repository.add(build_order(owner_id='bob', idempotency_key='k1'))

        assert repository.find_by_idempotency_key('k1').owner_id == 'alice'

    def test_save_status_compare_and_set(self):
        repository = DjangoOrderRepository()
        order = build_order()
        repository.add(order)

        admin_a = repository.find_by_id(order.id)
        admin_b = repository.find_by_id(order.id)

        admin_a.change_status(OrderStatus.CONFIRMED)
        repository.save_status(admin_a, expected_version=1)

        admin_b.change_status(OrderStatus.CANCELLED)
        with pytest.raises(ConcurrentModificationError):
            repository.save_status(admin_b, expected_version=1)

        stored = repository.find_by_id(order.id)
        assert stored.status == OrderStatus.CONFIRMED
        assert stored.version == 2

    def test_corrupt_items_fail_the_read(self):
        repository = DjangoOrderRepository()
        order = build_order()
        repository.add(order)
        OrderModel.objects.filter(id=order.id).update(items=[{'name': 'half a record'}])

        with pytest.raises(PersistenceError):
            repository.find_by_id(order.id)

    def test_find_all_newest_first_and_filtered(self):
        repository = DjangoOrderRepository()
        orders = [build_order() for _ in range(3)]
        for order in orders:
            repository.add(order)
        orders[0].change_status(OrderStatus.CONFIRMED)
        repository.save_status(orders[0], expected_version=1)

        assert [o.id for o in repository.find_all()] == [o.id for o in reversed(orders)]
        assert [o.id for o in repository.find_all(status=OrderStatus.CONFIRMED)] == [orders[0].id]
        assert repository.count() == 3
        assert repository.count(status=OrderStatus.PENDING) == 2
        assert len(repository.find_all(offset=1, limit=5)) == 2


class TestCustomOrderRepository:

    def test_round_trip(self):
        repository = DjangoCustomOrderRepository()
        custom_order = build_custom_order()
        repository.add(custom_order)

        loaded = repository.find_by_tracking_id(custom_order.tracking_id.value)

        assert loaded.total_price == Decimal('750')
        assert loaded.brief.images == ('uploads/photo-2.jpg', 'uploads/photo-1.jpg')

    def test_order_tracking_ids_are_not_custom_orders(self):
        order = build_order()
        DjangoOrderRepository().add(order)

        assert DjangoCustomOrderRepository().find_by_tracking_id(order.tracking_id.value) is None
