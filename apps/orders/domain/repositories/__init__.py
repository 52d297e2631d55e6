# Repository interfaces
from .cart_repository import CartRepository
from .trackable_order_repository import TrackableOrderRepository
from .order_repository import OrderRepository
from .custom_order_repository import CustomOrderRepository

__all__ = [
    'CartRepository',
    'TrackableOrderRepository',
    'OrderRepository',
    'CustomOrderRepository',
]
