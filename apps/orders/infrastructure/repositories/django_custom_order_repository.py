"""
Django ORM implementation of CustomOrderRepository.
"""
from decimal import Decimal
from typing import Any, Dict

from ...domain.entities.custom_order import CustomOrder
from ...domain.repositories.custom_order_repository import CustomOrderRepository
from ...domain.value_objects.customization_brief import CustomizationBrief
from ..models.custom_order_model import CustomOrderModel
from ..schemas import payment_to_record, read_payment
from .django_trackable_order_repository import DjangoTrackableOrderRepository


class DjangoCustomOrderRepository(DjangoTrackableOrderRepository, CustomOrderRepository):
    """Django ORM based custom order repository implementation."""

    model = CustomOrderModel

    def _to_fields(self, custom_order: CustomOrder) -> Dict[str, Any]:
        fields = self._common_fields(custom_order)
        fields.update({
            'product_id': custom_order.product_id,
            'product_name': custom_order.product_name,
            'quantity': custom_order.quantity,
            'base_price': custom_order.base_price,
            'customization_instructions': custom_order.brief.instructions,
            'customization_images': list(custom_order.brief.images),
            'customization_cost': custom_order.customization_cost,
            'total_price': custom_order.total_price,
            'payment_info': payment_to_record(custom_order.payment),
        })
        return fields

    def _build_entity(self, model: CustomOrderModel, common: Dict[str, Any]) -> CustomOrder:
        return CustomOrder(
            **common,
            payment=read_payment(model.payment_info, model.tracking_id),
            product_id=model.product_id,
            product_name=model.product_name,
            quantity=model.quantity,
            base_price=Decimal(str(model.base_price)),
            brief=CustomizationBrief(
                instructions=model.customization_instructions,
                images=tuple(model.customization_images or ()),
                cost=Decimal(str(model.customization_cost)),
            ),
        )
