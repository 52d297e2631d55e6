"""
Shared Django ORM plumbing for order repositories.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from django.db import IntegrityError, models, transaction

from shared.domain.exceptions import PersistenceError, ValidationError
from ...domain.entities.trackable_order import TrackableOrder
from ...domain.exceptions import ConcurrentModificationError, OrderNotFoundError, TrackingIdCollisionError
from ...domain.value_objects.customer_info import CustomerInfo
from ...domain.value_objects.order_status import OrderStatus
from ...domain.value_objects.phone_number import PhoneNumber
from ...domain.value_objects.tracking_id import TrackingId

logger = logging.getLogger(__name__)


class DjangoTrackableOrderRepository(ABC):
    """Insert-once rows whose status column is guarded by ``version``.

    Subclasses set ``model`` and implement ``_to_fields`` / ``_build_entity``.
    """

    model: type = models.Model

    def add(self, order: TrackableOrder) -> TrackableOrder:
        """Insert a new row. Never updates an existing one."""
        try:
            with transaction.atomic():
                self.model.objects.create(**self._to_fields(order))
        except IntegrityError as e:
            self._raise_for_integrity_error(order, e)
        return order

    def _raise_for_integrity_error(self, order: TrackableOrder, error: IntegrityError) -> None:
        if self.model.objects.filter(tracking_id=order.tracking_id.value).exists():
            raise TrackingIdCollisionError(order.tracking_id.value) from error
        logger.error("Insert of %s %s failed: %s", order.kind, order.tracking_id, error)
        raise PersistenceError() from error

    def find_by_id(self, order_id: UUID) -> Optional[TrackableOrder]:
        """Find a record by ID."""
        try:
            model = self.model.objects.get(id=order_id)
            return self._to_entity(model)
        except self.model.DoesNotExist:
            return None

    def find_by_tracking_id(self, tracking_id: str) -> Optional[TrackableOrder]:
        """Exact, case-sensitive lookup."""
        model = self.model.objects.filter(tracking_id=tracking_id).first()
        # Some collations compare case-insensitively; re-check in Python.
        if model is None or model.tracking_id != tracking_id:
            return None
        return self._to_entity(model)

    def find_all(
        self,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[TrackableOrder]:
        """Newest first, optionally filtered by status."""
        queryset = self._filtered(status).order_by('-created_at', '-id')
        return [self._to_entity(model) for model in queryset[offset:offset + limit]]

    def count(self, status: Optional[OrderStatus] = None) -> int:
        """Count records."""
        return self._filtered(status).count()

    def save_status(self, order: TrackableOrder, expected_version: int) -> TrackableOrder:
        """Compare-and-set the lifecycle columns."""
        updated = self.model.objects.filter(id=order.id, version=expected_version).update(
            status=order.status.value,
            version=order.version,
            updated_at=order.updated_at,
        )
        if updated == 0:
            current = self.model.objects.filter(id=order.id).values_list('version', flat=True).first()
            if current is None:
                raise OrderNotFoundError()
            logger.warning(
                "%s %s: version %d expected, %d stored",
                order.kind, order.tracking_id, expected_version, current,
            )
            raise ConcurrentModificationError(expected_version, current)
        return order

    def _filtered(self, status: Optional[OrderStatus]):
        queryset = self.model.objects.all()
        if status:
            queryset = queryset.filter(status=OrderStatus(status).value)
        return queryset

    @abstractmethod
    def _to_fields(self, order: TrackableOrder) -> Dict[str, Any]:
        """Model field values for a new row."""

    @abstractmethod
    def _build_entity(self, model, common: Dict[str, Any]) -> TrackableOrder:
        """Finish the entity from ``common`` plus the subclass's own columns."""

    def _to_entity(self, model) -> TrackableOrder:
        """Convert Django model to domain entity; unreadable rows become PersistenceError."""
        try:
            common = {
                'id': model.id,
                'tracking_id': TrackingId(value=model.tracking_id),
                'customer': CustomerInfo(
                    name=model.customer_name,
                    phone=PhoneNumber(value=model.phone),
                    district=model.district,
                    address=model.address,
                    thana=model.thana,
                ),
                'status': OrderStatus(model.status),
                'version': model.version,
                'created_at': model.created_at,
                'updated_at': model.updated_at,
            }
            return self._build_entity(model, common)
        except (ValueError, ValidationError) as e:
            logger.error("Unreadable %s row %s: %s", self.model.__name__, model.pk, e)
            raise PersistenceError() from e

    @staticmethod
    def _common_fields(order: TrackableOrder) -> Dict[str, Any]:
        return {
            'id': order.id,
            'tracking_id': order.tracking_id.value,
            'status': order.status.value,
            'version': order.version,
            'customer_name': order.customer.name,
            'phone': order.customer.phone.value,
            'district': order.customer.district,
            'thana': order.customer.thana,
            'address': order.customer.address,
            'created_at': order.created_at,
            'updated_at': order.updated_at,
        }
