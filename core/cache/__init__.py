"""Cache Module - Caching services."""
from core.cache.compatibility_cache import (
    CompatibilityCache,
    pair_fingerprint,
    CACHE_TTL_SECONDS
)

__all__ = [
    'CompatibilityCache',
    'pair_fingerprint',
    'CACHE_TTL_SECONDS'
]
