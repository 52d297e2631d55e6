from .prefixed_cache import PrefixedCache

__all__ = ['PrefixedCache']
