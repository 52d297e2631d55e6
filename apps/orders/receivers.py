"""
Default domain event receivers.

The notification surface: anything that should react to a placed or
progressed order (SMS, e-mail, analytics) connects here.
"""
import logging

from django.dispatch import receiver

from shared.application.event_dispatcher import domain_event_published
from .domain.events import CustomOrderPlaced, OrderPlaced, OrderStatusChanged

logger = logging.getLogger(__name__)


@receiver(domain_event_published, sender=OrderPlaced)
def log_order_placed(sender, event: OrderPlaced, **kwargs):
    logger.info("Order placed: %s total=%s", event.tracking_id, event.total)


@receiver(domain_event_published, sender=CustomOrderPlaced)
def log_custom_order_placed(sender, event: CustomOrderPlaced, **kwargs):
    logger.info("Custom order placed: %s total=%s", event.tracking_id, event.total_price)


@receiver(domain_event_published, sender=OrderStatusChanged)
def log_status_changed(sender, event: OrderStatusChanged, **kwargs):
    logger.info(
        "%s %s status changed: %s -> %s",
        event.kind, event.tracking_id, event.old_status, event.new_status,
    )
