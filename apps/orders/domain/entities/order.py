"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence, Tuple

from ..events.order_placed import OrderPlaced
from ..value_objects.customer_info import CustomerInfo
from ..value_objects.order_item import OrderItem
from ..value_objects.payment_info import PaymentInfo
from ..value_objects.tracking_id import TrackingId
from .trackable_order import TrackableOrder


def items_total(items: Sequence[OrderItem]) -> Decimal:
    return sum((item.subtotal for item in items), Decimal('0'))


@dataclass(eq=False)
class Order(TrackableOrder):
    """Order placed from a cart snapshot."""
    kind = 'order'

    items: Tuple[OrderItem, ...]
    total: Decimal
    owner_id: Optional[str] = None
    idempotency_key: Optional[str] = None
    notes: str = ""

    @classmethod
    def create(
        cls,
        tracking_id: TrackingId,
        customer: CustomerInfo,
        payment: PaymentInfo,
        items: Sequence[OrderItem],
        owner_id: Optional[str] = None,
        idempotency_key: Optional[str] = None,
        notes: str = "",
    ) -> 'Order':
        """Factory method to create a new pending order."""
        items = tuple(items)
        order = cls(
            tracking_id=tracking_id,
            customer=customer,
            payment=payment,
            items=items,
            total=items_total(items),
            owner_id=owner_id,
            idempotency_key=idempotency_key,
            notes=notes,
        )
        order.add_domain_event(
            OrderPlaced(
                order_id=order.id,
                tracking_id=tracking_id.value,
                total=order.total,
            )
        )
        return order

    @property
    def amount_due(self) -> Decimal:
        return self.total

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)
