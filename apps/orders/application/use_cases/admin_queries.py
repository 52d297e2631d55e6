"""
Administrative read use cases.
"""
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.entities.trackable_order import TrackableOrder
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.trackable_order_repository import TrackableOrderRepository
from ...domain.value_objects.order_status import OrderStatus
from ..dtos.admin_dto import ListOrdersDTO


class OrderListing(Sequence):
    """Lazy, sliceable view over a repository.

    Paginators only ask for ``count()`` and one slice, so just one page of
    rows is ever loaded.
    """

    def __init__(
        self,
        repository: TrackableOrderRepository,
        to_dto: Callable[[TrackableOrder], Any],
        status: Optional[OrderStatus] = None,
    ):
        self.repository = repository
        self.to_dto = to_dto
        self.status = status

    def count(self) -> int:
        return self.repository.count(status=self.status)

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, _ = index.indices(len(self))
            if stop <= start:
                return []
            orders = self.repository.find_all(status=self.status, offset=start, limit=stop - start)
            return [self.to_dto(order) for order in orders]
        if index < 0:
            index += len(self)
        page = self[index:index + 1]
        if not page:
            raise IndexError(index)
        return page[0]


@dataclass
class ListOrdersUseCase(UseCase[ListOrdersDTO, OrderListing]):
    """Newest-first listing, optionally filtered by status."""

    repository: TrackableOrderRepository
    to_dto: Callable[[TrackableOrder], Any]

    def execute(self, input_dto: ListOrdersDTO) -> UseCaseResult[OrderListing]:
        status = OrderStatus(input_dto.status) if input_dto.status else None
        return UseCaseResult.ok(OrderListing(self.repository, self.to_dto, status=status))


@dataclass
class GetOrderUseCase(UseCase[UUID, Any]):

    repository: TrackableOrderRepository
    to_dto: Callable[[TrackableOrder], Any]

    def execute(self, input_dto: UUID) -> UseCaseResult[Any]:
        order = self.repository.find_by_id(input_dto)
        if order is None:
            raise OrderNotFoundError()
        return UseCaseResult.ok(self.to_dto(order))
