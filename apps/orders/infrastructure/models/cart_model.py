"""
Cart Django ORM model.
"""
import uuid

from django.db import models


class CartModel(models.Model):
    """Cart model. Lines live in a JSON column, one row per owner."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.CharField(max_length=64, unique=True)
    items = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'orders'
        db_table = 'carts'

    def __str__(self):
        return f"Cart for {self.owner_id}"
