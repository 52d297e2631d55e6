"""
Custom order serializers.
"""
from decimal import Decimal

from rest_framework import serializers

from ...domain.entities.cart_item import MAX_LINE_QUANTITY
from .order_serializer import CustomerFieldsSerializer


class CustomOrderCreateSerializer(CustomerFieldsSerializer):
    """Serializer for placing a custom order."""
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY, default=1)
    customization_instructions = serializers.CharField(required=False, allow_blank=True, default='')
    customization_images = serializers.ListField(
        child=serializers.CharField(max_length=500),
        required=False,
        default=list,
    )
    customization_cost = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, default=Decimal('0'),
    )


class CustomOrderPlacedSerializer(serializers.Serializer):
    tracking_id = serializers.CharField(read_only=True)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class CustomOrderSerializer(serializers.Serializer):
    """Serializer for custom order output (administrators)."""
    id = serializers.UUIDField(read_only=True)
    tracking_id = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    status_label = serializers.CharField(read_only=True)
    version = serializers.IntegerField(read_only=True)
    product_id = serializers.UUIDField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    customer_name = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    district = serializers.CharField(read_only=True)
    thana = serializers.CharField(read_only=True)
    address = serializers.CharField(read_only=True)
    customization_instructions = serializers.CharField(read_only=True)
    customization_images = serializers.ListField(child=serializers.CharField(), read_only=True)
    base_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    customization_cost = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    payment_method = serializers.CharField(read_only=True)
    payment_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    transaction_id = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
