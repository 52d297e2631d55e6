# Shared domain module
from .base_entity import BaseEntity, AggregateRoot, utc_now
from .base_value_object import ValueObject
from .domain_event import DomainEvent
from .exceptions import (
    DomainException,
    NotFoundError,
    EntityNotFoundError,
    ValidationError,
    InvalidOperationError,
    ConflictError,
    PersistenceError,
)
from .validation import FieldErrors

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'utc_now',
    'ValueObject',
    'DomainEvent',
    'DomainException',
    'NotFoundError',
    'EntityNotFoundError',
    'ValidationError',
    'InvalidOperationError',
    'ConflictError',
    'PersistenceError',
    'FieldErrors',
]
