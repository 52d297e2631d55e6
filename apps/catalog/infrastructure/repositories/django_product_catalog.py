"""
Django ORM implementation of ProductCatalog.
"""
from decimal import Decimal
from typing import Dict, Iterable, Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError

from ...domain.entities.product import Product
from ...domain.repositories.product_catalog import ProductCatalog
from ...domain.value_objects.stock import Stock
from ..models.product_model import ProductModel


class DjangoProductCatalog(ProductCatalog):
    """Django ORM based product catalog."""

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        try:
            model = ProductModel.objects.get(id=product_id)
            return self._to_entity(model)
        except (ProductModel.DoesNotExist, DjangoValidationError):
            return None

    def find_by_ids(self, product_ids: Iterable[UUID]) -> Dict[UUID, Product]:
        """Find several products at once."""
        ids = set(product_ids)
        if not ids:
            return {}
        models = ProductModel.objects.filter(id__in=ids)
        return {model.id: self._to_entity(model) for model in models}

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert Django model to domain entity."""
        return Product(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
            stock=Stock(quantity=model.stock_quantity),
            image_ref=model.image_url or "",
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
