"""
Order Django ORM model.
"""
import uuid

from django.db import models
from django.utils import timezone

from ...domain.value_objects.order_status import OrderStatus


class OrderModel(models.Model):
    """Order model. Items and payment info are schema-checked JSON."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    tracking_id = models.CharField(max_length=32, unique=True)
    owner_id = models.CharField(max_length=64, null=True, blank=True, db_index=True)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices(),
        default=OrderStatus.PENDING.value,
        db_index=True,
    )
    version = models.PositiveIntegerField(default=1)

    # Customer and delivery
    customer_name = models.CharField(max_length=100)
    phone = models.CharField(max_length=20)
    district = models.CharField(max_length=100)
    thana = models.CharField(max_length=100, blank=True)
    address = models.TextField()

    items = models.JSONField(default=list)
    total = models.DecimalField(max_digits=12, decimal_places=2)
    payment_info = models.JSONField(default=dict)
    idempotency_key = models.CharField(max_length=255, unique=True, null=True, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = 'orders'
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'created_at'], name='orders_status_created_idx'),
        ]

    def __str__(self):
        return self.tracking_id
