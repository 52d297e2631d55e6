"""
Django ORM implementation of CartRepository.
"""
from ...domain.entities.cart import Cart
from ...domain.repositories.cart_repository import CartRepository
from ..models.cart_model import CartModel
from ..schemas import cart_line_to_record, read_cart_lines


class DjangoCartRepository(CartRepository):
    """Django ORM based cart repository implementation."""

    def find_by_owner(self, owner_id: str) -> Cart:
        """Find a cart by owner id, or start a new one."""
        cart = Cart.create(owner_id)
        try:
            model = CartModel.objects.get(owner_id=owner_id)
        except CartModel.DoesNotExist:
            return cart
        return self._to_entity(model)

    def find_by_owner_for_update(self, owner_id: str) -> Cart:
        """Find a cart by owner id and hold its row lock. Call inside transaction.atomic()."""
        cart = Cart.create(owner_id)
        model = CartModel.objects.select_for_update().filter(owner_id=owner_id).first()
        if model is None:
            return cart
        return self._to_entity(model)

    def save(self, cart: Cart) -> Cart:
        """Save the whole cart, replacing whatever was stored for the owner."""
        model, _ = CartModel.objects.update_or_create(
            owner_id=cart.owner_id,
            defaults={
                'items': [cart_line_to_record(item) for item in cart.items],
            },
        )
        return self._to_entity(model)

    def _to_entity(self, model: CartModel) -> Cart:
        """Convert Django model to domain entity."""
        return Cart(
            id=model.id,
            owner_id=model.owner_id,
            items=read_cart_lines(model.items, model.owner_id),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
