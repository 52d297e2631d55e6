"""
Product catalog interface.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional
from uuid import UUID

from ..entities.product import Product


class ProductCatalog(ABC):
    """Read-only port onto the product catalog."""

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        pass

    @abstractmethod
    def find_by_ids(self, product_ids: Iterable[UUID]) -> Dict[UUID, Product]:
        """Find several products at once, keyed by ID. Unknown IDs are absent."""
        pass
