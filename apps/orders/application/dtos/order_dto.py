"""
Order DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.value_objects.order_item import OrderItem


@dataclass
class PlaceOrderDTO:
    """DTO for checking out a cart."""
    owner_id: str
    customer_name: str
    phone: str
    district: str
    address: str
    payment_method: str
    thana: str = ""
    payment_amount: Optional[Decimal] = None
    transaction_id: str = ""
    notes: str = ""
    idempotency_key: Optional[str] = None


@dataclass
class OrderPlacedDTO:
    """What the customer needs after checkout."""
    tracking_id: str
    total: Decimal

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderPlacedDTO':
        return cls(tracking_id=order.tracking_id.value, total=order.total)


@dataclass
class OrderItemDTO:
    """DTO for order line output."""
    product_id: UUID
    name: str
    unit_price: Decimal
    quantity: int
    image_ref: str
    customization: Optional[Dict[str, Any]]
    subtotal: Decimal

    @classmethod
    def from_value(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            product_id=item.product_id,
            name=item.name,
            unit_price=item.unit_price,
            quantity=item.quantity,
            image_ref=item.image_ref,
            customization=item.customization.to_dict() if item.customization else None,
            subtotal=item.subtotal,
        )


@dataclass
class OrderDTO:
    """Full order record for administrators."""
    id: UUID
    tracking_id: str
    status: str
    status_label: str
    version: int
    owner_id: Optional[str]
    customer_name: str
    phone: str
    district: str
    thana: str
    address: str
    items: List[OrderItemDTO]
    item_count: int
    total: Decimal
    payment_method: str
    payment_amount: Decimal
    transaction_id: str
    notes: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        return cls(
            id=order.id,
            tracking_id=order.tracking_id.value,
            status=order.status.value,
            status_label=order.status.label,
            version=order.version,
            owner_id=order.owner_id,
            customer_name=order.customer.name,
            phone=order.customer.phone.value,
            district=order.customer.district,
            thana=order.customer.thana,
            address=order.customer.address,
            items=[OrderItemDTO.from_value(item) for item in order.items],
            item_count=order.item_count,
            total=order.total,
            payment_method=order.payment.method.value,
            payment_amount=order.payment.amount,
            transaction_id=order.payment.transaction_id,
            notes=order.notes,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
