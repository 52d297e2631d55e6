"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, ValidationError


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id: str):
        super().__init__(entity_name="Product", entity_id=product_id)


class ProductUnavailableError(ValidationError):
    """Raised when a product exists but is no longer sold."""

    def __init__(self, product_name: str, field: str = "product_id"):
        super().__init__(
            message=f"Product '{product_name}' is not available",
            field=field,
        )
        self.product_name = product_name


__all__ = [
    'ProductNotFoundError',
    'ProductUnavailableError',
]
