"""
Order item value object.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain import ValueObject
from .customization import Customization


@dataclass(frozen=True)
class OrderItem(ValueObject):
    """A cart line frozen at checkout.

    Name and price are copied from the line, so later catalog edits never
    change a placed order.
    """
    product_id: UUID
    name: str
    unit_price: Decimal
    quantity: int
    image_ref: str = ""
    customization: Optional[Customization] = None

    @property
    def subtotal(self) -> Decimal:
        """Calculate the item subtotal."""
        return self.unit_price * self.quantity
