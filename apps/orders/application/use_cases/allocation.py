"""
Tracking id allocation.
"""
import logging
from typing import Callable, TypeVar

from shared.domain.exceptions import PersistenceError
from ...domain.entities.trackable_order import TrackableOrder
from ...domain.exceptions import TrackingIdCollisionError
from ...domain.repositories.trackable_order_repository import TrackableOrderRepository
from ...domain.value_objects.tracking_id import TrackingId

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=TrackableOrder)


def insert_with_unique_tracking_id(
    repository: TrackableOrderRepository[T],
    build: Callable[[TrackingId], T],
    prefix: str,
    max_attempts: int,
) -> T:
    """Insert the record built by ``build``, drawing a new tracking id on collision.

    The repository's unique constraint decides; an existing record is never
    overwritten. Gives up with PersistenceError after ``max_attempts``.
    """
    for attempt in range(1, max_attempts + 1):
        record = build(TrackingId.generate(prefix))
        try:
            return repository.add(record)
        except TrackingIdCollisionError as e:
            logger.warning(
                "Tracking id collision on attempt %d/%d: %s", attempt, max_attempts, e.tracking_id
            )
    logger.error("Could not allocate a unique tracking id after %d attempts", max_attempts)
    raise PersistenceError("Could not allocate a tracking id; please retry")
