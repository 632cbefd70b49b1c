"""
Redis Cache Configuration and Utilities
Disposable cache for computed career analyses
"""

import redis
import json
import hashlib
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class RedisCache:
    """Redis cache wrapper with JSON serialization; degrades to a no-op when Redis is unavailable"""

    def __init__(self, redis_url: Optional[str] = None):
        self.redis_client = None
        self.connected = False
        if redis_url:
            self.connect(redis_url)

    def init_app(self, app):
        """Connect using the app's REDIS_URL unless caching is disabled"""
        if not app.config.get('CACHE_ENABLED', True):
            logger.info("Analysis cache disabled by configuration")
            self.redis_client = None
            self.connected = False
            return
        self.connect(app.config.get('REDIS_URL', 'redis://localhost:6379/0'))

    def connect(self, redis_url: str):
        """Initialize Redis connection"""
        try:
            self.redis_client = redis.from_url(redis_url, decode_responses=False)
            # Test connection
            self.redis_client.ping()
            self.connected = True
            logger.info("Redis connection established successfully")
        except redis.RedisError as e:
            logger.warning(f"Redis connection failed: {e}. Cache will be disabled.")
            self.redis_client = None
            self.connected = False

    def _make_key(self, key: str, prefix: str = "career") -> str:
        """Generate cache key with prefix"""
        return f"{prefix}:{key}"

    def get(self, key: str, prefix: str = "career") -> Optional[Any]:
        """Get value from cache"""
        if not self.connected:
            return None

        try:
            data = self.redis_client.get(self._make_key(key, prefix))
            if data is None:
                return None
            return json.loads(data.decode('utf-8'))
        except (redis.RedisError, ValueError) as e:
            logger.error(f"Cache get error for key {key}: {e}")
            return None

    def set(self, key: str, value: Any, ttl: int = 300, prefix: str = "career") -> bool:
        """Set value in cache with TTL"""
        if not self.connected:
            return False

        try:
            serialized_value = json.dumps(value, sort_keys=True).encode('utf-8')
            return bool(self.redis_client.setex(self._make_key(key, prefix), ttl, serialized_value))
        except (redis.RedisError, TypeError) as e:
            logger.error(f"Cache set error for key {key}: {e}")
            return False

    def delete(self, key: str, prefix: str = "career") -> bool:
        """Delete key from cache"""
        if not self.connected:
            return False

        try:
            return bool(self.redis_client.delete(self._make_key(key, prefix)))
        except redis.RedisError as e:
            logger.error(f"Cache delete error for key {key}: {e}")
            return False

    def flush_pattern(self, pattern: str, prefix: str = "career") -> int:
        """Delete all keys matching pattern"""
        if not self.connected:
            return 0

        try:
            keys = list(self.redis_client.scan_iter(match=self._make_key(pattern, prefix)))
            if keys:
                return self.redis_client.delete(*keys)
            return 0
        except redis.RedisError as e:
            logger.error(f"Cache flush error for pattern {pattern}: {e}")
            return 0


# Global cache instance, connected by init_app
cache = RedisCache()


def get_profile_fingerprint(snapshot: Any) -> str:
    """Hash of a profile snapshot; identical snapshots share a cache key"""
    payload = json.dumps(snapshot, sort_keys=True, default=str)
    return hashlib.sha256(payload.encode('utf-8')).hexdigest()


def analysis_cache_key(user_id: str, snapshot: Any, score_source: str) -> str:
    return f"analysis:{user_id}:{score_source}:{get_profile_fingerprint(snapshot)}"


# Characters with special meaning in Redis MATCH patterns
_GLOB_SPECIAL = '\\*?[]'


def escape_glob(value: str) -> str:
    """Backslash-escape glob characters so Redis matches them literally"""
    return ''.join(f'\\{char}' if char in _GLOB_SPECIAL else char for char in str(value))


def analysis_user_pattern(user_id: str) -> str:
    """Pattern matching every cached analysis of one user and no one else"""
    return f"analysis:{escape_glob(user_id)}:*"
