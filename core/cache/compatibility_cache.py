"""Compatibility Cache Service - Redis caching for compatibility results."""
import json
import logging
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from urllib.parse import urlparse

from redis import Redis

from core.config_loader import CacheConfig, ScorerConfig
from core.scorer.models import CompatibilityResult, ProfileSnapshot
from core.utils import canonical_pair, stable_hash

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 24 * 60 * 60


def _sanitize_url(url: str) -> str:
    """Remove credentials from URL for safe logging."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            sanitized = parsed._replace(
                netloc=f"{parsed.username or ''}:*@{parsed.hostname}:{parsed.port or 6379}"
            )
            return sanitized.geturl()
        return url
    except ValueError:
        return url


def pair_fingerprint(a: ProfileSnapshot, b: ProfileSnapshot, config: ScorerConfig) -> str:
    """Hash of both snapshots (in canonical order) and the scorer config."""
    first, second = (a, b) if a.user_id <= b.user_id else (b, a)
    return stable_hash({
        "a": first.fingerprint_payload(),
        "b": second.fingerprint_payload(),
        "config": config.model_dump(mode="json"),
    })


class CompatibilityCache:
    """
    Cache for compatibility results.

    Entries are stored once per canonical pair, so both query orders hit the
    same key. The key embeds a fingerprint of both snapshots and the scorer
    configuration; a profile edit produces a new key instead of a stale hit.
    Redis errors are logged and treated as cache misses.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        password: Optional[str] = None,
        ttl_seconds: int = CACHE_TTL_SECONDS,
        key_prefix: str = "compat"
    ):
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.key_prefix = key_prefix
        self._redis: Optional[Redis] = None
        self._available = False

        try:
            self._redis = Redis.from_url(
                redis_url,
                password=password,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )
            self._redis.ping()
            self._available = True
            logger.info(f"Compatibility cache connected to Redis at {_sanitize_url(redis_url)}")
        except Exception as e:
            logger.warning(f"Compatibility cache Redis unavailable: {e}")
            self._redis = None
            self._available = False

    @classmethod
    def from_config(cls, config: CacheConfig) -> "CompatibilityCache":
        return cls(
            redis_url=config.redis_url,
            password=config.password,
            ttl_seconds=config.ttl_seconds,
            key_prefix=config.key_prefix,
        )

    @property
    def is_available(self) -> bool:
        return self._available and self._redis is not None

    def make_key(self, a: ProfileSnapshot, b: ProfileSnapshot, config: ScorerConfig) -> str:
        low, high = canonical_pair(a.user_id, b.user_id)
        return f"{self.key_prefix}:{low}:{high}:{pair_fingerprint(a, b, config)}"

    def get_result(
        self,
        a: ProfileSnapshot,
        b: ProfileSnapshot,
        config: ScorerConfig
    ) -> Optional[CompatibilityResult]:
        """Get a cached result for the pair, in canonical order."""
        if not self.is_available:
            return None

        key = self.make_key(a, b, config)
        try:
            data = self._redis.get(key)
        except Exception as e:
            logger.warning(f"Error reading from compatibility cache: {e}")
            return None

        if not data:
            logger.debug(f"Cache miss for {key}")
            return None

        logger.debug(f"Cache hit for {key}")
        try:
            return CompatibilityResult.from_dict(json.loads(data)["data"])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding malformed compatibility cache entry {key}: {e}")
            return None

    def set_result(
        self,
        a: ProfileSnapshot,
        b: ProfileSnapshot,
        config: ScorerConfig,
        result: CompatibilityResult,
        ttl_seconds: Optional[int] = None
    ) -> bool:
        """Cache a result under the canonical pair key."""
        if not self.is_available:
            return False

        low, high = canonical_pair(a.user_id, b.user_id)
        ttl = ttl_seconds or self.ttl_seconds
        cache_entry: Dict[str, Any] = {
            "data": result.for_pair(low, high).to_dict(),
            "cached_at": datetime.now(timezone.utc).isoformat(),
            "ttl_seconds": ttl,
        }

        try:
            self._redis.setex(self.make_key(a, b, config), ttl, json.dumps(cache_entry))
            return True
        except Exception as e:
            logger.warning(f"Error writing to compatibility cache: {e}")
            return False

    def clear_all(self) -> int:
        """Clear all cached compatibility results."""
        if not self.is_available:
            return 0

        deleted = 0
        try:
            cursor = 0
            while True:
                cursor, keys = self._redis.scan(cursor=cursor, match=f"{self.key_prefix}:*", count=100)
                if keys:
                    self._redis.delete(*keys)
                    deleted += len(keys)
                if cursor == 0:
                    break
        except Exception as e:
            logger.warning(f"Error clearing compatibility cache: {e}")
            return deleted

        logger.info(f"Cleared {deleted} compatibility results from cache")
        return deleted
