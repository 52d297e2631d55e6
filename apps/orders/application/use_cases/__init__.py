# Use cases
from .manage_cart import (
    GetCartUseCase,
    AddCartItemUseCase,
    UpdateCartItemUseCase,
    RemoveCartItemUseCase,
    ClearCartUseCase,
)
from .place_order import PlaceOrderUseCase
from .place_custom_order import PlaceCustomOrderUseCase
from .change_order_status import ChangeOrderStatusUseCase
from .admin_queries import ListOrdersUseCase, GetOrderUseCase, OrderListing
from .track_order import TrackOrderUseCase

__all__ = [
    'GetCartUseCase',
    'AddCartItemUseCase',
    'UpdateCartItemUseCase',
    'RemoveCartItemUseCase',
    'ClearCartUseCase',
    'PlaceOrderUseCase',
    'PlaceCustomOrderUseCase',
    'ChangeOrderStatusUseCase',
    'ListOrdersUseCase',
    'GetOrderUseCase',
    'OrderListing',
    'TrackOrderUseCase',
]
