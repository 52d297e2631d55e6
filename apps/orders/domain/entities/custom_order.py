"""
Custom order entity (Aggregate Root).
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from ..events.custom_order_placed import CustomOrderPlaced
from ..value_objects.customer_info import CustomerInfo
from ..value_objects.customization_brief import CustomizationBrief
from ..value_objects.payment_info import PaymentInfo
from ..value_objects.tracking_id import TrackingId
from .cart_item import check_quantity
from .trackable_order import TrackableOrder


@dataclass(eq=False)
class CustomOrder(TrackableOrder):
    """A single product made to the customer's brief. Never built from a cart."""
    kind = 'custom_order'

    product_id: UUID
    product_name: str
    quantity: int
    base_price: Decimal
    brief: CustomizationBrief

    def __post_init__(self):
        check_quantity(self.quantity)

    @classmethod
    def create(
        cls,
        tracking_id: TrackingId,
        customer: CustomerInfo,
        payment: PaymentInfo,
        product_id: UUID,
        product_name: str,
        quantity: int,
        base_price: Decimal,
        brief: CustomizationBrief,
    ) -> 'CustomOrder':
        """Factory method to create a new pending custom order."""
        custom_order = cls(
            tracking_id=tracking_id,
            customer=customer,
            payment=payment,
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            base_price=base_price,
            brief=brief,
        )
        custom_order.add_domain_event(
            CustomOrderPlaced(
                custom_order_id=custom_order.id,
                tracking_id=tracking_id.value,
                total_price=custom_order.total_price,
            )
        )
        return custom_order

    @staticmethod
    def price_for(base_price: Decimal, quantity: int, customization_cost: Decimal) -> Decimal:
        return base_price * quantity + customization_cost

    @property
    def customization_cost(self) -> Decimal:
        return self.brief.cost

    @property
    def total_price(self) -> Decimal:
        return self.price_for(self.base_price, self.quantity, self.brief.cost)

    @property
    def amount_due(self) -> Decimal:
        return self.total_price
