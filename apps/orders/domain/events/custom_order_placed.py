"""
Custom order placed domain event.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class CustomOrderPlaced(DomainEvent):
    """Event raised when a new custom order is placed."""
    custom_order_id: UUID
    tracking_id: str
    total_price: Decimal
