# Repository implementations
from .django_cart_repository import DjangoCartRepository
from .django_order_repository import DjangoOrderRepository
from .django_custom_order_repository import DjangoCustomOrderRepository

__all__ = ['DjangoCartRepository', 'DjangoOrderRepository', 'DjangoCustomOrderRepository']
