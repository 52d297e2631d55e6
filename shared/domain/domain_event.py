"""
Domain event base class.
"""
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for domain events."""
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__

    def payload(self) -> Dict[str, Any]:
        """Event fields without the envelope attributes."""
        data = asdict(self)
        data.pop('event_id', None)
        data.pop('occurred_at', None)
        return data
