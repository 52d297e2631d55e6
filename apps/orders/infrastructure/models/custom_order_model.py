"""
Custom order Django ORM model.
"""
import uuid

from django.db import models
from django.utils import timezone

from ...domain.value_objects.order_status import OrderStatus


class CustomOrderModel(models.Model):
    """Custom order model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    tracking_id = models.CharField(max_length=32, unique=True)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices(),
        default=OrderStatus.PENDING.value,
        db_index=True,
    )
    version = models.PositiveIntegerField(default=1)

    # Product snapshot
    product_id = models.UUIDField(db_index=True)
    product_name = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField()
    base_price = models.DecimalField(max_digits=12, decimal_places=2)

    # Customer and delivery
    customer_name = models.CharField(max_length=100)
    phone = models.CharField(max_length=20)
    district = models.CharField(max_length=100)
    thana = models.CharField(max_length=100, blank=True)
    address = models.TextField()

    customization_instructions = models.TextField()
    customization_images = models.JSONField(default=list, blank=True)
    customization_cost = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    payment_info = models.JSONField(default=dict)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = 'orders'
        db_table = 'custom_orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'created_at'], name='custom_orders_status_idx'),
        ]

    def __str__(self):
        return self.tracking_id
