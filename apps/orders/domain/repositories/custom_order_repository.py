"""
Custom order repository interface.
"""
from ..entities.custom_order import CustomOrder
from .trackable_order_repository import TrackableOrderRepository


class CustomOrderRepository(TrackableOrderRepository[CustomOrder]):
    """Abstract repository for CustomOrder aggregate."""
