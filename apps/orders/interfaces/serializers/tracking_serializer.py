"""
Tracking serializers.
"""
from rest_framework import serializers


class TimelineEntrySerializer(serializers.Serializer):
    status = serializers.CharField(read_only=True)
    label = serializers.CharField(read_only=True)
    reached = serializers.BooleanField(read_only=True)
    at = serializers.DateTimeField(read_only=True, allow_null=True)


class DeliverySummarySerializer(serializers.Serializer):
    customer_name = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    district = serializers.CharField(read_only=True)
    thana = serializers.CharField(read_only=True)
    address = serializers.CharField(read_only=True)


class TrackedItemSerializer(serializers.Serializer):
    name = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    customization = serializers.DictField(read_only=True, allow_null=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class TrackingSerializer(serializers.Serializer):
    """Public, customer-safe order projection."""
    kind = serializers.CharField(read_only=True)
    tracking_id = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    status_label = serializers.CharField(read_only=True)
    delivery = DeliverySummarySerializer(read_only=True)
    items = TrackedItemSerializer(many=True, read_only=True)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    payment_method = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    timeline = TimelineEntrySerializer(many=True, read_only=True)
