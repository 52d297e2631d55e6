"""
Timeline entry value object.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from shared.domain import ValueObject
from .order_status import OrderStatus


@dataclass(frozen=True)
class TimelineEntry(ValueObject):
    """One stage of an order's progress as shown to customers."""
    status: OrderStatus
    reached: bool
    at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.status.label
