"""
Cart serializers.
"""
from rest_framework import serializers

from ...domain.entities.cart_item import MAX_LINE_QUANTITY


class CustomizationSerializer(serializers.Serializer):
    """Customization options. Limits are enforced again by the domain."""
    size = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    color = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    custom_text = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    images = serializers.ListField(
        child=serializers.CharField(max_length=500),
        required=False,
    )


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    id = serializers.UUIDField(read_only=True)
    product_id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    image_ref = serializers.CharField(read_only=True)
    customization = CustomizationSerializer(read_only=True, allow_null=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    owner_id = serializers.CharField(read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class CartItemCreateSerializer(serializers.Serializer):
    """Serializer for adding item to cart."""
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY, default=1)
    customization = CustomizationSerializer(required=False, allow_null=True)


class CartItemUpdateSerializer(serializers.Serializer):
    """Serializer for updating cart item. Zero or less removes the line."""
    quantity = serializers.IntegerField(max_value=MAX_LINE_QUANTITY)
