"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.

    Subclasses are frozen dataclasses, so equality and hashing are derived
    from their fields. Use ``object.__setattr__`` inside ``__post_init__`` to
    store normalized values.
    """

    def replace(self, **changes) -> 'ValueObject':
        """Return a copy with the given fields changed."""
        from dataclasses import replace
        return replace(self, **changes)
