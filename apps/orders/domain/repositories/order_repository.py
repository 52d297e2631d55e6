"""
Order repository interface.
"""
from abc import abstractmethod
from typing import Optional

from ..entities.order import Order
from .trackable_order_repository import TrackableOrderRepository


class OrderRepository(TrackableOrderRepository[Order]):
    """Abstract repository for Order aggregate.

    Idempotency keys are unique across all owners. ``add`` additionally
    raises DuplicateCheckoutError when another order already holds the key.
    """

    @abstractmethod
    def find_by_idempotency_key(self, idempotency_key: str) -> Optional[Order]:
        """Find the order created with an idempotency key."""
        pass
