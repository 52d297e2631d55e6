"""
Order serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.order_status import OrderStatus
from .cart_serializer import CustomizationSerializer


def _optional_text(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, default='', **kwargs)


class CustomerFieldsSerializer(serializers.Serializer):
    """Customer, delivery and payment input.

    Fields are optional here so that the domain can report every missing
    or invalid value together.
    """
    customer_name = _optional_text()
    phone = _optional_text()
    district = _optional_text()
    thana = _optional_text()
    address = _optional_text()
    payment_method = _optional_text()
    payment_amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True, default=None,
    )
    transaction_id = _optional_text()


class OrderCreateSerializer(CustomerFieldsSerializer):
    """Serializer for checking out a cart."""
    owner_id = serializers.CharField(max_length=64)
    notes = _optional_text()


class OrderPlacedSerializer(serializers.Serializer):
    tracking_id = serializers.CharField(read_only=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class OrderItemSerializer(serializers.Serializer):
    """Serializer for order item output."""
    product_id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    image_ref = serializers.CharField(read_only=True)
    customization = CustomizationSerializer(read_only=True, allow_null=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class OrderSerializer(serializers.Serializer):
    """Serializer for order output (administrators)."""
    id = serializers.UUIDField(read_only=True)
    tracking_id = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    status_label = serializers.CharField(read_only=True)
    version = serializers.IntegerField(read_only=True)
    owner_id = serializers.CharField(read_only=True, allow_null=True)
    customer_name = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    district = serializers.CharField(read_only=True)
    thana = serializers.CharField(read_only=True)
    address = serializers.CharField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    payment_method = serializers.CharField(read_only=True)
    payment_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    transaction_id = serializers.CharField(read_only=True)
    notes = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class StatusUpdateSerializer(serializers.Serializer):
    """Serializer for an administrative status change."""
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus])
    expected_version = serializers.IntegerField(min_value=1, required=False, allow_null=True, default=None)


class OrderFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus], required=False)
