"""
Cart aggregate tests.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.orders.domain.entities import Cart
from apps.orders.domain.entities.cart_item import MAX_LINE_QUANTITY
from apps.orders.domain.exceptions import CartLineNotFoundError, InvalidOwnerIdError, InvalidQuantityError
from apps.orders.domain.value_objects import Customization

SHIRT_ID = uuid4()
MUG_ID = uuid4()


def add(cart, product_id=SHIRT_ID, quantity=1, customization=None, price='500'):
    return cart.add_item(
        product_id=product_id,
        name='Printed T-Shirt' if product_id == SHIRT_ID else 'Photo Mug',
        unit_price=Decimal(price),
        quantity=quantity,
        customization=customization,
    )


@pytest.fixture
def cart():
    return Cart.create('session-1')


class TestAddItem:

    def test_different_customizations_make_separate_lines(self, cart):
        add(cart, customization=Customization(size='M', color='red'))
        add(cart, customization=Customization(size='L', color='red'))
        assert len(cart.items) == 2

    def test_identical_customization_merges_and_sums_quantity(self, cart):
        add(cart, quantity=2, customization=Customization(size='M', images=('b.png', 'a.png')))
        add(cart, quantity=3, customization=Customization(size=' M ', images=('a.png', 'b.png', 'a.png')))
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_plain_and_customized_lines_are_distinct(self, cart):
        add(cart)
        add(cart, customization=Customization(custom_text='Happy Eid'))
        assert len(cart.items) == 2

    def test_empty_customization_merges_with_plain_line(self, cart):
        add(cart)
        add(cart, customization=Customization.from_dict({'size': '', 'images': []}))
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_same_customization_on_different_products_is_distinct(self, cart):
        add(cart, SHIRT_ID, customization=Customization(color='blue'))
        add(cart, MUG_ID, customization=Customization(color='blue'))
        assert len(cart.items) == 2

    @pytest.mark.parametrize('quantity', [0, -1])
    def test_rejects_non_positive_quantity(self, cart, quantity):
        with pytest.raises(InvalidQuantityError):
            add(cart, quantity=quantity)
        assert cart.is_empty

    def test_merge_past_line_limit_leaves_line_unchanged(self, cart):
        add(cart, quantity=MAX_LINE_QUANTITY)
        with pytest.raises(InvalidQuantityError) as exc_info:
            add(cart, quantity=1)
        assert exc_info.value.field == 'quantity'
        assert cart.items[0].quantity == MAX_LINE_QUANTITY


class TestUpdateAndRemove:

    def test_update_to_zero_removes_line(self, cart):
        line = add(cart, quantity=2)
        cart.update_quantity(line.id, 0)
        assert cart.is_empty

    def test_update_below_zero_removes_line(self, cart):
        line = add(cart, quantity=2)
        add(cart, MUG_ID)
        cart.update_quantity(line.id, -4)
        assert [item.product_id for item in cart.items] == [MUG_ID]

    def test_update_replaces_quantity(self, cart):
        line = add(cart, quantity=2)
        cart.update_quantity(line.id, 7)
        assert cart.items[0].quantity == 7

    def test_update_above_line_limit_is_rejected(self, cart):
        line = add(cart, quantity=2)
        with pytest.raises(InvalidQuantityError):
            cart.update_quantity(line.id, MAX_LINE_QUANTITY + 1)
        assert cart.items[0].quantity == 2

    def test_unknown_line_raises_not_found(self, cart):
        add(cart)
        with pytest.raises(CartLineNotFoundError):
            cart.update_quantity(uuid4(), 3)
        with pytest.raises(CartLineNotFoundError):
            cart.remove_item(uuid4())

    def test_remove_and_clear(self, cart):
        line = add(cart)
        add(cart, MUG_ID)
        cart.remove_item(line.id)
        assert len(cart.items) == 1
        cart.clear()
        assert cart.is_empty

    def test_quantities_stay_positive_after_any_sequence(self, cart):
        first = add(cart, quantity=3)
        second = add(cart, MUG_ID, quantity=1)
        cart.update_quantity(first.id, 1)
        cart.update_quantity(second.id, 0)
        add(cart, quantity=2)
        assert all(item.quantity >= 1 for item in cart.items)


class TestTotals:

    def test_total_and_item_count(self, cart):
        add(cart, SHIRT_ID, quantity=2, price='500')
        add(cart, MUG_ID, quantity=1, price='300')
        assert cart.total_amount == Decimal('1300')
        assert cart.item_count == 3

    def test_empty_cart_total_is_zero(self, cart):
        assert cart.total_amount == Decimal('0')

    def test_quantities_by_product_sums_across_customizations(self, cart):
        add(cart, quantity=2, customization=Customization(size='M'))
        add(cart, quantity=1, customization=Customization(size='L'))
        assert cart.quantities_by_product() == {SHIRT_ID: 3}

    def test_snapshot_is_detached_from_cart(self, cart):
        line = add(cart, quantity=2)
        snapshot = cart.snapshot()
        cart.update_quantity(line.id, 9)
        assert snapshot[0].quantity == 2


class TestOwner:

    @pytest.mark.parametrize('owner_id', ['', 'a' * 65, 'has space', 'semi;colon', None])
    def test_rejects_invalid_owner_ids(self, owner_id):
        with pytest.raises(InvalidOwnerIdError):
            Cart.create(owner_id)

    def test_accepts_user_and_session_ids(self):
        assert Cart.create('user_42').owner_id == 'user_42'
        assert Cart.create('3f2a-b7c9').owner_id == '3f2a-b7c9'
