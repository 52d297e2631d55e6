"""
Cart item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain import BaseEntity
from ..exceptions import InvalidQuantityError
from ..value_objects.customization import Customization, canonical_customization
from ..value_objects.order_item import OrderItem

MAX_LINE_QUANTITY = 999


@dataclass(eq=False)
class CartItem(BaseEntity):
    """Cart line. ``id`` is the line id clients use to edit or remove it."""
    product_id: UUID
    name: str
    unit_price: Decimal
    quantity: int = 1
    image_ref: str = ""
    customization: Optional[Customization] = None

    def __post_init__(self):
        check_quantity(self.quantity)

    @property
    def identity_key(self) -> str:
        """Lines with the same key are the same purchase and get merged."""
        return line_identity(self.product_id, self.customization)

    @property
    def subtotal(self) -> Decimal:
        """Calculate the item subtotal."""
        return self.unit_price * self.quantity

    def to_order_item(self) -> OrderItem:
        return OrderItem(
            product_id=self.product_id,
            name=self.name,
            unit_price=self.unit_price,
            quantity=self.quantity,
            image_ref=self.image_ref,
            customization=self.customization,
        )


def line_identity(product_id: UUID, customization: Optional[Customization]) -> str:
    return f"{product_id}|{canonical_customization(customization)}"


def check_quantity(quantity: int, field: str = "quantity") -> None:
    """Quantities run from one up to MAX_LINE_QUANTITY per line."""
    if quantity < 1:
        raise InvalidQuantityError(quantity, field)
    if quantity > MAX_LINE_QUANTITY:
        raise InvalidQuantityError(quantity, field, f"Quantity must be at most {MAX_LINE_QUANTITY}.")
