# DTOs
from .cart_dto import AddCartItemDTO, UpdateCartItemDTO, RemoveCartItemDTO, CartItemDTO, CartDTO
from .order_dto import PlaceOrderDTO, OrderPlacedDTO, OrderItemDTO, OrderDTO
from .custom_order_dto import PlaceCustomOrderDTO, CustomOrderPlacedDTO, CustomOrderDTO
from .admin_dto import ChangeStatusDTO, ListOrdersDTO
from .tracking_dto import TrackingDTO, TimelineEntryDTO, DeliverySummaryDTO, TrackedItemDTO

__all__ = [
    'AddCartItemDTO',
    'UpdateCartItemDTO',
    'RemoveCartItemDTO',
    'CartItemDTO',
    'CartDTO',
    'PlaceOrderDTO',
    'OrderPlacedDTO',
    'OrderItemDTO',
    'OrderDTO',
    'PlaceCustomOrderDTO',
    'CustomOrderPlacedDTO',
    'CustomOrderDTO',
    'ChangeStatusDTO',
    'ListOrdersDTO',
    'TrackingDTO',
    'TimelineEntryDTO',
    'DeliverySummaryDTO',
    'TrackedItemDTO',
]
