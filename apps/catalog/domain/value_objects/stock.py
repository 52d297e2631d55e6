"""
Stock value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject


@dataclass(frozen=True)
class Stock(ValueObject):
    """Stock quantity value object."""
    quantity: int

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError("Stock quantity cannot be negative")

    @property
    def is_available(self) -> bool:
        return self.quantity > 0

    def covers(self, requested: int) -> bool:
        """Check if ``requested`` units fit in the current stock."""
        return requested <= self.quantity
