# Serializers
from .cart_serializer import (
    CustomizationSerializer,
    CartSerializer,
    CartItemSerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
)
from .order_serializer import (
    OrderCreateSerializer,
    OrderPlacedSerializer,
    OrderSerializer,
    OrderItemSerializer,
    StatusUpdateSerializer,
    OrderFilterSerializer,
)
from .custom_order_serializer import (
    CustomOrderCreateSerializer,
    CustomOrderPlacedSerializer,
    CustomOrderSerializer,
)
from .tracking_serializer import TrackingSerializer

__all__ = [
    'CustomizationSerializer',
    'CartSerializer',
    'CartItemSerializer',
    'CartItemCreateSerializer',
    'CartItemUpdateSerializer',
    'OrderCreateSerializer',
    'OrderPlacedSerializer',
    'OrderSerializer',
    'OrderItemSerializer',
    'StatusUpdateSerializer',
    'OrderFilterSerializer',
    'CustomOrderCreateSerializer',
    'CustomOrderPlacedSerializer',
    'CustomOrderSerializer',
    'TrackingSerializer',
]
