"""
Domain exceptions.

Every error the domain raises derives from ``DomainException`` and carries a
machine-readable ``code``. ``shared.interfaces.exception_handlers`` maps each
family to an HTTP status.
"""
from typing import Dict, List, Optional


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class NotFoundError(DomainException):
    """Raised when a looked-up record does not exist.

    The message is meant to be shown to callers as-is, so it never contains
    the identifier that failed to match.
    """

    def __init__(self, message: str = "Not found", code: str = "NOT_FOUND"):
        super().__init__(message=message, code=code)


class EntityNotFoundError(NotFoundError):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str):
        super().__init__(
            message=f"{entity_name} not found",
            code="ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails.

    ``errors`` maps field names to lists of messages when more than one field
    failed; ``field`` names the single failing field otherwise.
    """

    def __init__(
        self,
        message: str,
        field: str = None,
        errors: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field
        self.errors = errors or ({field: [message]} if field else {})


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None, code: str = None):
        super().__init__(message=message, code=code or "INVALID_OPERATION")
        self.operation = operation
        self.state = state

    def details(self) -> Dict[str, Optional[str]]:
        """Extra response fields describing the rejected operation."""
        return {'operation': self.operation, 'state': self.state}


class ConflictError(DomainException):
    """Raised when a write loses a race against another writer."""

    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message=message, code=code)


class PersistenceError(DomainException):
    """Raised when the backing store cannot complete an operation."""

    def __init__(self, message: str = "Storage is temporarily unavailable"):
        super().__init__(message=message, code="PERSISTENCE_ERROR")
