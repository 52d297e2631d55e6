# Django models
from .cart_model import CartModel
from .order_model import OrderModel
from .custom_order_model import CustomOrderModel

__all__ = ['CartModel', 'OrderModel', 'CustomOrderModel']
