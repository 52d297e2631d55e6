"""
Cart DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem


@dataclass
class AddCartItemDTO:
    """DTO for adding a product to a cart."""
    owner_id: str
    product_id: UUID
    quantity: int = 1
    customization: Optional[Dict[str, Any]] = None


@dataclass
class UpdateCartItemDTO:
    """DTO for changing a line's quantity."""
    owner_id: str
    line_id: UUID
    quantity: int


@dataclass
class RemoveCartItemDTO:
    owner_id: str
    line_id: UUID


@dataclass
class CartItemDTO:
    """DTO for cart line output."""
    id: UUID
    product_id: UUID
    name: str
    unit_price: Decimal
    quantity: int
    image_ref: str
    customization: Optional[Dict[str, Any]]
    subtotal: Decimal

    @classmethod
    def from_entity(cls, item: CartItem) -> 'CartItemDTO':
        return cls(
            id=item.id,
            product_id=item.product_id,
            name=item.name,
            unit_price=item.unit_price,
            quantity=item.quantity,
            image_ref=item.image_ref,
            customization=item.customization.to_dict() if item.customization else None,
            subtotal=item.subtotal,
        )


@dataclass
class CartDTO:
    """DTO for cart output."""
    owner_id: str
    items: List[CartItemDTO]
    total_amount: Decimal
    item_count: int
    updated_at: datetime

    @classmethod
    def from_entity(cls, cart: Cart) -> 'CartDTO':
        """Create DTO from entity."""
        return cls(
            owner_id=cart.owner_id,
            items=[CartItemDTO.from_entity(item) for item in cart.items],
            total_amount=cart.total_amount,
            item_count=cart.item_count,
            updated_at=cart.updated_at,
        )
