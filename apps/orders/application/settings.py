"""
Order engine settings read from Django settings.
"""
from dataclasses import dataclass

from django.conf import settings

from shared.infrastructure.cache import PrefixedCache

TRACKING_CACHE_PREFIX = 'orders:tracking'


@dataclass(frozen=True)
class OrdersSettings:
    tracking_prefix: str = 'TN'
    custom_tracking_prefix: str = 'CO'
    tracking_cache_timeout: int = 60
    max_tracking_attempts: int = 5

    @classmethod
    def from_django(cls) -> 'OrdersSettings':
        defaults = cls()
        return cls(
            tracking_prefix=getattr(settings, 'ORDERS_TRACKING_PREFIX', defaults.tracking_prefix),
            custom_tracking_prefix=getattr(
                settings, 'ORDERS_CUSTOM_TRACKING_PREFIX', defaults.custom_tracking_prefix
            ),
            tracking_cache_timeout=getattr(
                settings, 'ORDERS_TRACKING_CACHE_TIMEOUT', defaults.tracking_cache_timeout
            ),
            max_tracking_attempts=getattr(
                settings, 'ORDERS_MAX_TRACKING_ATTEMPTS', defaults.max_tracking_attempts
            ),
        )


def tracking_cache() -> PrefixedCache:
    """Cache holding public tracking projections, keyed by tracking id."""
    return PrefixedCache(
        prefix=TRACKING_CACHE_PREFIX,
        timeout=OrdersSettings.from_django().tracking_cache_timeout,
    )


def tracking_version_key(tracking_id: str) -> str:
    return f"{tracking_id}:version"


def invalidate_tracking(tracking_id: str, version: int) -> None:
    """Drop the cached projection and record ``version`` as the newest one.

    Projections older than the recorded version are ignored on read, even
    if a slow reader stores one after this call.
    """
    cache = tracking_cache()
    cache.set(tracking_version_key(tracking_id), version, timeout=cache.timeout * 2)
    cache.delete(tracking_id)
