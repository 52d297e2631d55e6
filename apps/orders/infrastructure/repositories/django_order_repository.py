"""
Django ORM implementation of OrderRepository.
"""
from decimal import Decimal
from typing import Any, Dict, Optional

from django.db import IntegrityError

from ...domain.entities.order import Order
from ...domain.exceptions import DuplicateCheckoutError
from ...domain.repositories.order_repository import OrderRepository
from ..models.order_model import OrderModel
from ..schemas import order_item_to_record, payment_to_record, read_order_items, read_payment
from .django_trackable_order_repository import DjangoTrackableOrderRepository


class DjangoOrderRepository(DjangoTrackableOrderRepository, OrderRepository):
    """Django ORM based order repository implementation."""

    model = OrderModel

    def find_by_idempotency_key(self, idempotency_key: str) -> Optional[Order]:
        """Find the order created with an idempotency key."""
        model = OrderModel.objects.filter(idempotency_key=idempotency_key).first()
        return self._to_entity(model) if model else None

    def _raise_for_integrity_error(self, order: Order, error: IntegrityError) -> None:
        if (
            order.idempotency_key
            and OrderModel.objects.filter(idempotency_key=order.idempotency_key).exists()
        ):
            raise DuplicateCheckoutError(order.idempotency_key) from error
        super()._raise_for_integrity_error(order, error)

    def _to_fields(self, order: Order) -> Dict[str, Any]:
        fields = self._common_fields(order)
        fields.update({
            'owner_id': order.owner_id,
            'items': [order_item_to_record(item) for item in order.items],
            'total': order.total,
            'payment_info': payment_to_record(order.payment),
            'idempotency_key': order.idempotency_key,
            'notes': order.notes,
        })
        return fields

    def _build_entity(self, model: OrderModel, common: Dict[str, Any]) -> Order:
        return Order(
            **common,
            payment=read_payment(model.payment_info, model.tracking_id),
            items=tuple(read_order_items(model.items, model.tracking_id)),
            total=Decimal(str(model.total)),
            owner_id=model.owner_id,
            idempotency_key=model.idempotency_key,
            notes=model.notes,
        )
