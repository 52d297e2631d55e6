# Domain entities
from .cart import Cart
from .cart_item import CartItem
from .trackable_order import TrackableOrder
from .order import Order
from .custom_order import CustomOrder

__all__ = ['Cart', 'CartItem', 'TrackableOrder', 'Order', 'CustomOrder']
