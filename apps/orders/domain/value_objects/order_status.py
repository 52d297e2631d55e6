"""
Order status value object and its transition rules.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle states shared by orders and custom orders."""
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    PROCESSING = 'processing'
    SHIPPED = 'shipped'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def can_transition_to(self, target: 'OrderStatus') -> bool:
        """Forward moves along the success path, or cancellation before shipping."""
        if target == OrderStatus.CANCELLED:
            return self in CANCELLABLE
        if self not in SUCCESS_PATH or target not in SUCCESS_PATH:
            return False
        return SUCCESS_PATH.index(target) > SUCCESS_PATH.index(self)

    @classmethod
    def choices(cls):
        return [(status.value, status.label) for status in cls]


SUCCESS_PATH = (
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PROCESSING,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
)

CANCELLABLE = frozenset({
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PROCESSING,
})

_LABELS = {
    OrderStatus.PENDING: 'Order placed',
    OrderStatus.CONFIRMED: 'Confirmed',
    OrderStatus.PROCESSING: 'Being prepared',
    OrderStatus.SHIPPED: 'Shipped',
    OrderStatus.DELIVERED: 'Delivered',
    OrderStatus.CANCELLED: 'Cancelled',
}
