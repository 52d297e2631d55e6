"""
Custom order DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.custom_order import CustomOrder


@dataclass
class PlaceCustomOrderDTO:
    """DTO for placing a custom order."""
    product_id: UUID
    quantity: int
    customer_name: str
    phone: str
    district: str
    address: str
    customization_instructions: str
    payment_method: str
    thana: str = ""
    customization_images: List[str] = field(default_factory=list)
    customization_cost: Decimal = Decimal('0')
    payment_amount: Optional[Decimal] = None
    transaction_id: str = ""


@dataclass
class CustomOrderPlacedDTO:
    tracking_id: str
    total_price: Decimal

    @classmethod
    def from_entity(cls, custom_order: CustomOrder) -> 'CustomOrderPlacedDTO':
        return cls(tracking_id=custom_order.tracking_id.value, total_price=custom_order.total_price)


@dataclass
class CustomOrderDTO:
    """Full custom order record for administrators."""
    id: UUID
    tracking_id: str
    status: str
    status_label: str
    version: int
    product_id: UUID
    product_name: str
    quantity: int
    customer_name: str
    phone: str
    district: str
    thana: str
    address: str
    customization_instructions: str
    customization_images: List[str]
    base_price: Decimal
    customization_cost: Decimal
    total_price: Decimal
    payment_method: str
    payment_amount: Decimal
    transaction_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, custom_order: CustomOrder) -> 'CustomOrderDTO':
        """Create DTO from entity."""
        return cls(
            id=custom_order.id,
            tracking_id=custom_order.tracking_id.value,
            status=custom_order.status.value,
            status_label=custom_order.status.label,
            version=custom_order.version,
            product_id=custom_order.product_id,
            product_name=custom_order.product_name,
            quantity=custom_order.quantity,
            customer_name=custom_order.customer.name,
            phone=custom_order.customer.phone.value,
            district=custom_order.customer.district,
            thana=custom_order.customer.thana,
            address=custom_order.customer.address,
            customization_instructions=custom_order.brief.instructions,
            customization_images=list(custom_order.brief.images),
            base_price=custom_order.base_price,
            customization_cost=custom_order.customization_cost,
            total_price=custom_order.total_price,
            payment_method=custom_order.payment.method.value,
            payment_amount=custom_order.payment.amount,
            transaction_id=custom_order.payment.transaction_id,
            created_at=custom_order.created_at,
            updated_at=custom_order.updated_at,
        )
