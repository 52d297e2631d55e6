"""
Cart entity (Aggregate Root).
"""
import re
from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..exceptions import CartLineNotFoundError, InvalidOwnerIdError
from ..value_objects.customization import Customization
from ..value_objects.order_item import OrderItem
from .cart_item import CartItem, check_quantity, line_identity

OWNER_ID_PATTERN = re.compile(r'^[A-Za-z0-9_-]{1,64}$')


@dataclass(eq=False)
class Cart(AggregateRoot):
    """Shopping cart owned by a user id or an anonymous session id."""
    owner_id: str
    items: List[CartItem] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.owner_id, str) or not OWNER_ID_PATTERN.match(self.owner_id):
            raise InvalidOwnerIdError(self.owner_id)

    @classmethod
    def create(cls, owner_id: str) -> 'Cart':
        """Create a new, empty cart for an owner."""
        return cls(owner_id=owner_id)

    def add_item(
        self,
        product_id: UUID,
        name: str,
        unit_price: Decimal,
        quantity: int = 1,
        image_ref: str = "",
        customization: Optional[Customization] = None,
    ) -> CartItem:
        """Add a line, or grow the line that has the same product and customization."""
        check_quantity(quantity)

        existing = self._find_by_identity(line_identity(product_id, customization))
        if existing:
            check_quantity(existing.quantity + quantity)
            existing.quantity += quantity
            existing.touch()
            item = existing
        else:
            item = CartItem(
                product_id=product_id,
                name=name,
                unit_price=unit_price,
                quantity=quantity,
                image_ref=image_ref,
                customization=customization,
            )
            self.items.append(item)
        self.touch()
        return item

    def update_quantity(self, line_id: UUID, quantity: int) -> Optional[CartItem]:
        """Set a line's quantity. Anything below one removes the line."""
        item = self.find_item(line_id)
        if quantity < 1:
            self.remove_item(line_id)
            return None
        check_quantity(quantity)
        item.quantity = quantity
        item.touch()
        self.touch()
        return item

    def remove_item(self, line_id: UUID) -> None:
        """Remove a line from the cart."""
        item = self.find_item(line_id)
        self.items = [line for line in self.items if line.id != item.id]
        self.touch()

    def clear(self) -> None:
        """Clear all items from the cart."""
        self.items = []
        self.touch()

    def find_item(self, line_id: UUID) -> CartItem:
        for item in self.items:
            if item.id == line_id:
                return item
        raise CartLineNotFoundError()

    def _find_by_identity(self, identity_key: str) -> Optional[CartItem]:
        for item in self.items:
            if item.identity_key == identity_key:
                return item
        return None

    def snapshot(self) -> List[OrderItem]:
        """Immutable copies of the current lines, for checkout."""
        return [item.to_order_item() for item in self.items]

    def quantities_by_product(self) -> Dict[UUID, int]:
        """Units requested per product across all customizations."""
        totals = Counter()
        for item in self.items:
            totals[item.product_id] += item.quantity
        return dict(totals)

    @property
    def total_amount(self) -> Decimal:
        """Calculate the total cart amount."""
        return sum((item.subtotal for item in self.items), Decimal('0'))

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return len(self.items) == 0
