"""
Tracking ID value object.
"""
import re
import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from shared.domain import ValueObject

ALPHABET = string.ascii_uppercase + string.digits
RANDOM_LENGTH = 8

_PREFIX_PATTERN = re.compile(r'^[A-Z]{1,6}$')
_PATTERN = re.compile(r'^[A-Z]{1,6}\d{14}[0-9A-Z]{8}$')


@dataclass(frozen=True)
class TrackingId(ValueObject):
    """Public order reference, e.g. ``TN20250114093012K3F9QX2M``.

    Layout: prefix, UTC timestamp (``%Y%m%d%H%M%S``), then eight characters
    drawn from ``secrets``. The database unique constraint is the final
    guarantee; generation only makes collisions unlikely.
    """
    value: str

    def __post_init__(self):
        if not self.is_well_formed(self.value):
            raise ValueError(f"Malformed tracking id: {self.value!r}")

    @classmethod
    def generate(cls, prefix: str = 'TN', now: Optional[datetime] = None) -> 'TrackingId':
        """Generate a new tracking id."""
        if not _PREFIX_PATTERN.match(prefix):
            raise ValueError(f"Tracking prefix must be 1-6 uppercase letters, got {prefix!r}")
        stamp = (now or datetime.now(timezone.utc)).strftime('%Y%m%d%H%M%S')
        random_part = ''.join(secrets.choice(ALPHABET) for _ in range(RANDOM_LENGTH))
        return cls(value=f"{prefix}{stamp}{random_part}")

    @staticmethod
    def is_well_formed(value) -> bool:
        return isinstance(value, str) and bool(_PATTERN.match(value))

    def __str__(self) -> str:
        return self.value
