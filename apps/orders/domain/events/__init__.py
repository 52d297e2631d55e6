# Domain events
from .order_placed import OrderPlaced
from .custom_order_placed import CustomOrderPlaced
from .order_status_changed import OrderStatusChanged

__all__ = ['OrderPlaced', 'CustomOrderPlaced', 'OrderStatusChanged']
