# Django model discovery
from .infrastructure.models import CartModel, OrderModel, CustomOrderModel

__all__ = ['CartModel', 'OrderModel', 'CustomOrderModel']
