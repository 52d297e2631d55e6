"""
Lifecycle shared by orders and custom orders.
"""
from abc import abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, List

from shared.domain import AggregateRoot
from ..events.order_status_changed import OrderStatusChanged
from ..exceptions import InvalidTransitionError
from ..value_objects.customer_info import CustomerInfo
from ..value_objects.order_status import OrderStatus, SUCCESS_PATH
from ..value_objects.payment_info import PaymentInfo
from ..value_objects.timeline_entry import TimelineEntry
from ..value_objects.tracking_id import TrackingId


@dataclass(kw_only=True, eq=False)
class TrackableOrder(AggregateRoot):
    """A placed order that customers follow by tracking id.

    Everything except ``status``, ``version`` and ``updated_at`` is fixed at
    creation; those three change only through ``change_status``.
    """
    kind: ClassVar[str] = 'order'

    tracking_id: TrackingId
    customer: CustomerInfo
    payment: PaymentInfo
    status: OrderStatus = OrderStatus.PENDING
    version: int = 1

    @property
    @abstractmethod
    def amount_due(self) -> Decimal:
        """What the customer owes for this order."""

    def change_status(self, new_status: OrderStatus) -> None:
        """Apply a legal transition or raise without touching anything."""
        new_status = OrderStatus(new_status)
        if not self.status.can_transition_to(new_status):
            raise InvalidTransitionError(self.status.value, new_status.value)

        old_status = self.status
        self.status = new_status
        self.version += 1
        self.touch()
        self.add_domain_event(
            OrderStatusChanged(
                order_id=self.id,
                tracking_id=self.tracking_id.value,
                kind=self.kind,
                old_status=old_status.value,
                new_status=new_status.value,
            )
        )

    def timeline(self) -> List[TimelineEntry]:
        """Progress along the success path, plus a final entry if cancelled.

        Only two timestamps are known: placement (``created_at``) and the
        last transition (``updated_at``).
        """
        cancelled = self.status == OrderStatus.CANCELLED
        current_index = -1 if cancelled else SUCCESS_PATH.index(self.status)

        entries = []
        for index, stage in enumerate(SUCCESS_PATH):
            reached = index == 0 or index <= current_index
            at = None
            if stage == OrderStatus.PENDING:
                at = self.created_at
            elif stage == self.status:
                at = self.updated_at
            entries.append(TimelineEntry(status=stage, reached=reached, at=at))

        if cancelled:
            entries.append(TimelineEntry(status=OrderStatus.CANCELLED, reached=True, at=self.updated_at))
        return entries
