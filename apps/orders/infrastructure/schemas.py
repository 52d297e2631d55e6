"""
Record schemas for JSON columns.

Everything written to a JSON column goes through a ``*_to_record`` helper,
and everything read back is validated by the matching serializer before it
becomes a domain object. Money is stored as a decimal string.
"""
import logging
from typing import Any, Dict, List

from rest_framework import serializers

from shared.domain.exceptions import PersistenceError, ValidationError
from ..domain.entities.cart_item import CartItem
from ..domain.value_objects.customization import Customization
from ..domain.value_objects.order_item import OrderItem
from ..domain.value_objects.payment_info import PaymentInfo, PaymentMethod

logger = logging.getLogger(__name__)


class CustomizationRecord(serializers.Serializer):
    size = serializers.CharField(allow_null=True, allow_blank=True, required=False)
    color = serializers.CharField(allow_null=True, allow_blank=True, required=False)
    custom_text = serializers.CharField(allow_null=True, allow_blank=True, required=False)
    images = serializers.ListField(child=serializers.CharField(), required=False, default=list)


class OrderItemRecord(serializers.Serializer):
    product_id = serializers.UUIDField()
    name = serializers.CharField()
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    quantity = serializers.IntegerField(min_value=1)
    image_ref = serializers.CharField(allow_blank=True, required=False, default="")
    customization = CustomizationRecord(allow_null=True, required=False, default=None)


class CartLineRecord(OrderItemRecord):
    id = serializers.UUIDField()


class PaymentRecord(serializers.Serializer):
    method = serializers.ChoiceField(choices=PaymentMethod.values())
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    transaction_id = serializers.CharField(allow_blank=True, required=False, default="")


def _customization_to_record(customization):
    return customization.to_dict() if customization else None


def order_item_to_record(item: OrderItem) -> Dict[str, Any]:
    return {
        'product_id': str(item.product_id),
        'name': item.name,
        'unit_price': str(item.unit_price),
        'quantity': item.quantity,
        'image_ref': item.image_ref,
        'customization': _customization_to_record(item.customization),
    }


def cart_line_to_record(item: CartItem) -> Dict[str, Any]:
    record = order_item_to_record(item.to_order_item())
    record['id'] = str(item.id)
    return record


def payment_to_record(payment: PaymentInfo) -> Dict[str, Any]:
    return {
        'method': payment.method.value,
        'amount': str(payment.amount),
        'transaction_id': payment.transaction_id,
    }


def _validated(serializer_class, data) -> Dict[str, Any]:
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        raise ValueError(serializer.errors)
    return serializer.validated_data


def _item_kwargs(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'product_id': data['product_id'],
        'name': data['name'],
        'unit_price': data['unit_price'],
        'quantity': data['quantity'],
        'image_ref': data.get('image_ref', ""),
        'customization': Customization.from_dict(data.get('customization')),
    }


def read_cart_lines(raw: Any, owner_id: str) -> List[CartItem]:
    """Rebuild cart lines, dropping any that fail the schema check."""
    if not isinstance(raw, list):
        logger.warning("Cart %s: items column is not a list; treating as empty", owner_id)
        return []

    lines = []
    for index, record in enumerate(raw):
        try:
            data = _validated(CartLineRecord, record)
            lines.append(CartItem(id=data['id'], **_item_kwargs(data)))
        except (ValueError, ValidationError) as e:
            logger.warning("Cart %s: dropping corrupt line %d: %s", owner_id, index, e)
    return lines


def read_order_items(raw: Any, tracking_id: str) -> List[OrderItem]:
    """Rebuild an order's item snapshot. Any corrupt line fails the whole read."""
    if not isinstance(raw, list):
        logger.error("Order %s: items column is not a list", tracking_id)
        raise PersistenceError()
    try:
        return [OrderItem(**_item_kwargs(_validated(OrderItemRecord, record))) for record in raw]
    except (ValueError, ValidationError) as e:
        logger.error("Order %s: corrupt items snapshot: %s", tracking_id, e)
        raise PersistenceError() from e


def read_payment(raw: Any, tracking_id: str) -> PaymentInfo:
    try:
        data = _validated(PaymentRecord, raw)
    except ValueError as e:
        logger.error("Order %s: corrupt payment info: %s", tracking_id, e)
        raise PersistenceError() from e
    return PaymentInfo(
        method=PaymentMethod(data['method']),
        amount=data['amount'],
        transaction_id=data.get('transaction_id', ""),
    )
