"""
Track order use case.
"""
import logging
from dataclasses import dataclass, field

from shared.application import UseCase, UseCaseResult
from shared.infrastructure.cache import PrefixedCache
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.custom_order_repository import CustomOrderRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.tracking_id import TrackingId
from ..dtos.tracking_dto import TrackingDTO
from ..settings import tracking_cache, tracking_version_key

logger = logging.getLogger(__name__)


@dataclass
class TrackOrderUseCase(UseCase[str, TrackingDTO]):
    """Resolve a tracking id to its public projection.

    Orders are searched first, then custom orders. Matching is exact and
    case-sensitive. Malformed and unknown ids fail identically. A cached
    projection older than the last recorded status change is re-read.
    """

    order_repository: OrderRepository
    custom_order_repository: CustomOrderRepository
    cache: PrefixedCache = field(default_factory=tracking_cache)

    def execute(self, input_dto: str) -> UseCaseResult[TrackingDTO]:
        if not TrackingId.is_well_formed(input_dto):
            raise OrderNotFoundError()

        newest_version = self.cache.get(tracking_version_key(input_dto)) or 0
        projection = self.cache.get(input_dto)
        if projection is None or projection.version < newest_version:
            projection = self._resolve(input_dto)
            self.cache.set(input_dto, projection)
        return UseCaseResult.ok(projection)

    def _resolve(self, tracking_id: str) -> TrackingDTO:
        order = self.order_repository.find_by_tracking_id(tracking_id)
        if order is not None:
            return TrackingDTO.from_order(order)

        custom_order = self.custom_order_repository.find_by_tracking_id(tracking_id)
        if custom_order is not None:
            return TrackingDTO.from_custom_order(custom_order)

        logger.info("Tracking lookup missed: %s", tracking_id)
        raise OrderNotFoundError()
