"""
Order domain exceptions.
"""
from typing import Dict, List

from shared.domain.exceptions import (
    ConflictError,
    DomainException,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)


class OrderNotFoundError(NotFoundError):
    """Raised when an order or custom order is not found.

    Deliberately generic: tracking lookups must not reveal whether an id
    was malformed or merely unknown.
    """

    def __init__(self):
        super().__init__(message="Order not found", code="ORDER_NOT_FOUND")


class CartLineNotFoundError(NotFoundError):
    """Raised when a cart line id does not exist in the owner's cart."""

    def __init__(self):
        super().__init__(message="Cart item not found", code="CART_ITEM_NOT_FOUND")


class InvalidTransitionError(InvalidOperationError):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, current_status: str, requested_status: str):
        super().__init__(
            message=f"Cannot move order from '{current_status}' to '{requested_status}'",
            operation=requested_status,
            state=current_status,
            code="INVALID_TRANSITION",
        )
        self.current_status = current_status
        self.requested_status = requested_status

    def details(self):
        return {
            'current_status': self.current_status,
            'requested_status': self.requested_status,
        }


class ConcurrentModificationError(ConflictError):
    """Raised when the order changed between load and save."""

    def __init__(self, expected_version: int, actual_version: int = None):
        super().__init__(
            message="Order was modified by another request; reload and retry",
            code="CONCURRENT_MODIFICATION",
        )
        self.expected_version = expected_version
        self.actual_version = actual_version


class TrackingIdCollisionError(DomainException):
    """Raised by repositories when a generated tracking id is already taken."""

    def __init__(self, tracking_id: str):
        super().__init__(message=f"Tracking id '{tracking_id}' already exists", code="TRACKING_ID_COLLISION")
        self.tracking_id = tracking_id


class DuplicateCheckoutError(DomainException):
    """Raised when an order with the same idempotency key was committed first."""

    def __init__(self, idempotency_key: str):
        super().__init__(message="Checkout already submitted", code="DUPLICATE_CHECKOUT")
        self.idempotency_key = idempotency_key


class IdempotencyKeyReusedError(ConflictError):
    """Raised when an idempotency key already belongs to another owner's checkout."""

    def __init__(self):
        super().__init__(
            message="Idempotency-Key was already used for a different checkout",
            code="IDEMPOTENCY_KEY_REUSED",
        )


class InvalidQuantityError(ValidationError):
    """Raised when a quantity is below one or above the per-line limit."""

    def __init__(self, quantity, field: str = "quantity", message: str = "Quantity must be at least 1."):
        super().__init__(message=message, field=field)
        self.quantity = quantity


class InvalidCustomizationError(ValidationError):
    """Raised when customization options break their limits."""

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(message="Invalid customization", field="customization", errors=errors)


class InvalidPhoneNumberError(ValidationError):
    """Raised when a phone number is not a valid mobile number."""

    def __init__(self, phone: str):
        super().__init__(message="Enter a valid mobile number, e.g. 01712345678.", field="phone")
        self.phone = phone


class InvalidOwnerIdError(ValidationError):
    """Raised when a cart owner id is not a short opaque token."""

    def __init__(self, owner_id: str):
        super().__init__(
            message="Owner id must be 1-64 characters of letters, digits, '_' or '-'.",
            field="owner_id",
        )
        self.owner_id = owner_id
