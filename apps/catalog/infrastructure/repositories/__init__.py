# Repository implementations
from .django_product_catalog import DjangoProductCatalog

__all__ = ['DjangoProductCatalog']
