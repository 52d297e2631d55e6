"""
Tracking projection DTOs.

Projections hold only what a customer holding the tracking id may see:
phone numbers are masked and no internal ids are exposed.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ...domain.entities.custom_order import CustomOrder
from ...domain.entities.order import Order
from ...domain.entities.trackable_order import TrackableOrder
from ...domain.value_objects.timeline_entry import TimelineEntry


@dataclass
class TimelineEntryDTO:
    status: str
    label: str
    reached: bool
    at: Optional[datetime]

    @classmethod
    def from_value(cls, entry: TimelineEntry) -> 'TimelineEntryDTO':
        return cls(status=entry.status.value, label=entry.label, reached=entry.reached, at=entry.at)


@dataclass
class DeliverySummaryDTO:
    customer_name: str
    phone: str
    district: str
    thana: str
    address: str

    @classmethod
    def from_entity(cls, order: TrackableOrder) -> 'DeliverySummaryDTO':
        customer = order.customer
        return cls(
            customer_name=customer.name,
            phone=customer.masked_phone,
            district=customer.district,
            thana=customer.thana,
            address=customer.address,
        )


@dataclass
class TrackedItemDTO:
    name: str
    quantity: int
    unit_price: Decimal
    customization: Optional[Dict[str, Any]]
    line_total: Decimal


@dataclass
class TrackingDTO:
    """Customer-safe view of an order or custom order."""
    kind: str
    tracking_id: str
    status: str
    status_label: str
    delivery: DeliverySummaryDTO
    items: List[TrackedItemDTO]
    total: Decimal
    payment_method: str
    created_at: datetime
    updated_at: datetime
    timeline: List[TimelineEntryDTO]
    version: int

    @classmethod
    def from_order(cls, order: Order) -> 'TrackingDTO':
        items = [
            TrackedItemDTO(
                name=item.name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                customization=item.customization.to_dict() if item.customization else None,
                line_total=item.subtotal,
            )
            for item in order.items
        ]
        return cls._build(order, items)

    @classmethod
    def from_custom_order(cls, custom_order: CustomOrder) -> 'TrackingDTO':
        brief = custom_order.brief
        items = [
            TrackedItemDTO(
                name=custom_order.product_name,
                quantity=custom_order.quantity,
                unit_price=custom_order.base_price,
                customization={
                    'instructions': brief.instructions,
                    'images': list(brief.images),
                    'cost': str(brief.cost),
                },
                line_total=custom_order.total_price,
            )
        ]
        return cls._build(custom_order, items)

    @classmethod
    def _build(cls, order: TrackableOrder, items: List[TrackedItemDTO]) -> 'TrackingDTO':
        return cls(
            kind=order.kind,
            tracking_id=order.tracking_id.value,
            status=order.status.value,
            status_label=order.status.label,
            delivery=DeliverySummaryDTO.from_entity(order),
            items=items,
            total=order.amount_due,
            payment_method=order.payment.method.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            timeline=[TimelineEntryDTO.from_value(entry) for entry in order.timeline()],
            version=order.version,
        )
