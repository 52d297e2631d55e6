"""
Repository interface shared by orders and custom orders.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from ..entities.trackable_order import TrackableOrder
from ..value_objects.order_status import OrderStatus

T = TypeVar('T', bound=TrackableOrder)


class TrackableOrderRepository(ABC, Generic[T]):
    """Write-once storage with a version-guarded status column."""

    @abstractmethod
    def add(self, order: T) -> T:
        """Insert a new record.

        Raises TrackingIdCollisionError when the tracking id is taken.
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Optional[T]:
        """Find a record by ID."""
        pass

    @abstractmethod
    def find_by_tracking_id(self, tracking_id: str) -> Optional[T]:
        """Find a record by exact, case-sensitive tracking id."""
        pass

    @abstractmethod
    def find_all(
        self,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[T]:
        """Newest first, optionally filtered by status."""
        pass

    @abstractmethod
    def count(self, status: Optional[OrderStatus] = None) -> int:
        """Count records."""
        pass

    @abstractmethod
    def save_status(self, order: T, expected_version: int) -> T:
        """Write status, version and updated_at if the stored version still matches.

        Raises ConcurrentModificationError otherwise.
        """
        pass
