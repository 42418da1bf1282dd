# ============================================================================
# FILE: tracknest/core/cache.py
# ============================================================================
import redis
import json
from typing import Optional, Any
from tracknest.config import settings
import logging

logger = logging.getLogger(__name__)

class RedisCache:
    """
    Redis cache for chart lookups.
    Catalog data only changes when the loader runs, so entries are dropped
    by key pattern after each load instead of per write.
    """

    def __init__(self):
        try:
            self.redis_client = redis.from_url(settings.REDIS_URL, decode_responses=True)
            self.redis_client.ping()
            logger.info("Redis connection established")
        except Exception as e:
            logger.warning(f"Redis connection failed: {e}. Caching disabled.")
            self.redis_client = None

    def set_cache(self, key: str, value: Any, expire: int = None) -> bool:
        """Store a JSON-serializable value, optionally expiring after `expire` seconds"""
        if not self.redis_client:
            return False

        try:
            serialized = json.dumps(value)
            if expire:
                self.redis_client.setex(key, expire, serialized)
            else:
                self.redis_client.set(key, serialized)
            return True
        except Exception as e:
            logger.error(f"Cache set error for {key}: {e}")
            return False

    def get_cache(self, key: str) -> Optional[Any]:
        if not self.redis_client:
            return None

        try:
            value = self.redis_client.get(key)
            return json.loads(value) if value is not None else None
        except Exception as e:
            logger.error(f"Cache get error for {key}: {e}")
            return None

    def invalidate(self, pattern: str) -> int:
        """Delete every key matching a glob pattern such as "charts:*"; returns how many went"""
        if not self.redis_client:
            return 0

        try:
            keys = list(self.redis_client.scan_iter(match=pattern))
            if keys:
                self.redis_client.delete(*keys)
            logger.info(f"Invalidated {len(keys)} cache keys matching {pattern}")
            return len(keys)
        except Exception as e:
            logger.error(f"Cache invalidate error for {pattern}: {e}")
            return 0

# Singleton instance
cache = RedisCache()
