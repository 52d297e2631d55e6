"""
Product entity as seen by the order engine.
"""
from dataclasses import dataclass
from decimal import Decimal

from shared.domain import BaseEntity
from ..value_objects.stock import Stock


@dataclass(eq=False)
class Product(BaseEntity):
    """A sellable catalog item. Read-only from the order engine's side."""
    name: str
    price: Decimal
    stock: Stock
    image_ref: str = ""
    is_active: bool = True

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))

    def has_stock_for(self, quantity: int) -> bool:
        """Check whether ``quantity`` units can be sold right now."""
        return self.is_active and self.stock.covers(quantity)

    @property
    def is_in_stock(self) -> bool:
        """Check if product is in stock."""
        return self.stock.is_available
