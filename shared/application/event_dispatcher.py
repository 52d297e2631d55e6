"""
Domain event dispatching through Django signals.
"""
import logging
from typing import Iterable

from django.db import transaction
from django.dispatch import Signal

from shared.domain import AggregateRoot, DomainEvent

logger = logging.getLogger(__name__)

# Receivers get ``event`` as a keyword argument; ``sender`` is the event class.
domain_event_published = Signal()


def publish(events: Iterable[DomainEvent]) -> None:
    """Send each event to every connected receiver."""
    for event in events:
        logger.debug("Publishing %s %s", event.event_type, event.event_id)
        domain_event_published.send(sender=event.__class__, event=event)


def publish_on_commit(aggregate: AggregateRoot) -> None:
    """Publish the aggregate's pending events once the current transaction commits."""
    events = aggregate.clear_domain_events()
    if events:
        transaction.on_commit(lambda: publish(events))
