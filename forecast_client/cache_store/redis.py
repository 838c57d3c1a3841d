"""Redis-backed forecast cache holding the entry under a single key."""

from typing import Optional

from forecast_client.cache_store.base import CacheStore, dump_entry, load_entry
from forecast_client.domain import CacheEntry
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache_store/redis_cache_store")

DEFAULT_CACHE_KEY = "weather:lastForecast"


class RedisCacheStore(CacheStore):
    """Single-key store on a Redis client. No TTL: the entry lives until overwritten."""

    def __init__(self, client, key: str = DEFAULT_CACHE_KEY) -> None:
        """Initialize with a Redis client and the key holding the entry."""
        logger.debug("Initializing RedisCacheStore")
        self.client = client
        self.key = key

    def read(self) -> Optional[CacheEntry]:
        """Fetch and parse the entry; connection errors read as absent."""
        try:
            raw = self.client.get(self.key)
        except Exception as exc:
            logger.error("Failed to read forecast cache from Redis: %s", exc)
            return None
        return load_entry(raw)

    def write(self, entry: CacheEntry) -> None:
        """Overwrite the key with the serialized entry."""
        try:
            self.client.set(self.key, dump_entry(entry).encode("utf-8"))
        except Exception as exc:
            logger.error("Failed to write forecast cache to Redis: %s", exc)
            raise
