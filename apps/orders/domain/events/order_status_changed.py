"""
Order status changed domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Event raised when an order or custom order changes status."""
    order_id: UUID
    tracking_id: str
    kind: str
    old_status: str
    new_status: str
