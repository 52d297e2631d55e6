"""
Change order status use case.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable

from django.db import transaction

from shared.application import UseCase, UseCaseResult
from shared.application.event_dispatcher import publish_on_commit
from ...domain.entities.trackable_order import TrackableOrder
from ...domain.exceptions import ConcurrentModificationError, OrderNotFoundError
from ...domain.repositories.trackable_order_repository import TrackableOrderRepository
from ...domain.value_objects.order_status import OrderStatus
from ..dtos.admin_dto import ChangeStatusDTO
from ..settings import invalidate_tracking

logger = logging.getLogger(__name__)


@dataclass
class ChangeOrderStatusUseCase(UseCase[ChangeStatusDTO, Any]):
    """Move an order or custom order to a new status.

    The write is a compare-and-set on ``version``: a stale
    ``expected_version``, or another writer between load and save, raises
    ConcurrentModificationError and nothing changes.
    """

    repository: TrackableOrderRepository
    to_dto: Callable[[TrackableOrder], Any]

    def execute(self, input_dto: ChangeStatusDTO) -> UseCaseResult[Any]:
        with transaction.atomic():
            order = self.repository.find_by_id(input_dto.order_id)
            if order is None:
                raise OrderNotFoundError()

            expected_version = order.version
            if input_dto.expected_version is not None:
                expected_version = input_dto.expected_version
                if expected_version != order.version:
                    raise ConcurrentModificationError(expected_version, order.version)

            old_status = order.status
            order.change_status(OrderStatus(input_dto.status))
            saved = self.repository.save_status(order, expected_version=expected_version)
            publish_on_commit(order)

        invalidate_tracking(order.tracking_id.value, order.version)
        logger.info(
            "%s %s: %s -> %s (version %d)",
            order.kind, order.tracking_id, old_status.value, order.status.value, order.version,
        )
        return UseCaseResult.ok(self.to_dto(saved))
