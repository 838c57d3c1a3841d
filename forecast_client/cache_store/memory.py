"""In-memory forecast cache, intended for development and tests."""

import threading
from typing import Optional

from forecast_client.cache_store.base import CacheStore
from forecast_client.domain import CacheEntry
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache_store/in_memory_cache_store")


class InMemoryCacheStore(CacheStore):
    """Thread-safe, non-durable single-slot store (dev/test)."""

    def __init__(self, entry: CacheEntry | None = None) -> None:
        logger.debug("Initializing InMemoryCacheStore")
        self._entry = entry
        self._lock = threading.Lock()

    def read(self) -> Optional[CacheEntry]:
        with self._lock:
            return self._entry

    def write(self, entry: CacheEntry) -> None:
        with self._lock:
            self._entry = entry
