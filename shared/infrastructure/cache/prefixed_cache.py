"""
Namespaced wrapper around Django's configured cache (Redis in production).
"""
import logging
from typing import Any, Callable, Optional

from django.core.cache import caches

logger = logging.getLogger(__name__)


class PrefixedCache:
    """Cache wrapper that namespaces keys and never lets cache outages escape.

    Values are stored as-is; the Django backend pickles them.
    """

    def __init__(self, prefix: str, timeout: int = 300, alias: str = 'default'):
        self.prefix = prefix
        self.timeout = timeout
        self.alias = alias

    @property
    def _backend(self):
        return caches[self.alias]

    def make_key(self, key: str) -> str:
        """Create a cache key with prefix."""
        return f"{self.prefix}:{key}"

    def get(self, key: str) -> Optional[Any]:
        try:
            return self._backend.get(self.make_key(key))
        except Exception:
            logger.warning("Cache read failed for %s", self.make_key(key), exc_info=True)
            return None

    def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        try:
            self._backend.set(self.make_key(key), value, self.timeout if timeout is None else timeout)
        except Exception:
            logger.warning("Cache write failed for %s", self.make_key(key), exc_info=True)

    def delete(self, key: str) -> None:
        try:
            self._backend.delete(self.make_key(key))
        except Exception:
            logger.warning("Cache delete failed for %s", self.make_key(key), exc_info=True)

    def get_or_set(self, key: str, default_func: Callable[[], Any], timeout: Optional[int] = None) -> Any:
        """Get from cache or compute with ``default_func`` and store the result."""
        value = self.get(key)
        if value is None:
            value = default_func()
            self.set(key, value, timeout)
        return value
