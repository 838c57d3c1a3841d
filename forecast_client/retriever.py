"""Fetch a forecast from the remote service, falling back to the last cached result."""
from __future__ import annotations

import threading

from forecast_client.cache_store import CacheStore
from forecast_client.data_sources import ForecastDataSource
from forecast_client.domain import (
    CacheEntry,
    ErrorKind,
    ForecastResult,
    RequestMode,
    RetrievalError,
    RetrievalOutcome,
    Source,
)
from forecast_client.errors import ForecastFetchError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="retriever")

STALE_DATA_MESSAGE = "Backend unreachable. Showing last cached result."
NO_DATA_MESSAGE = "Fetch failed and no cached data found."


class ForecastRetriever:
    """Decide per request whether data comes from the network or the cache.

    `retrieve()` never raises for fetch failures: they are reported through
    `RetrievalOutcome.error`. Only a successful live fetch writes the cache.
    """

    def __init__(self, data_source: ForecastDataSource, cache: CacheStore) -> None:
        self.data_source = data_source
        self.cache = cache
        # serializes read-then-write against the single cache slot
        self._cache_lock = threading.Lock()

    def retrieve(self, city: str, mode: RequestMode) -> RetrievalOutcome:
        """Return the forecast for `city` according to `mode`."""
        if mode is RequestMode.OFFLINE:
            return self._from_cache(city)
        return self._from_network(city)

    def read_cached(self) -> ForecastResult | None:
        """Cached result tagged offline-cache, or None; reads under the cache lock."""
        with self._cache_lock:
            entry = self.cache.read()
        if entry is None:
            return None
        return entry.result.with_source(Source.OFFLINE_CACHE)

    def _from_cache(self, city: str) -> RetrievalOutcome:
        cached = self.read_cached()
        if cached is None:
            logger.info("Offline mode and no cached forecast", extra={"city": city})
            return RetrievalOutcome(result=ForecastResult.empty(city))
        logger.info("Offline mode; serving cached forecast", extra={"cached_city": cached.city})
        return RetrievalOutcome(result=cached)

    def _from_network(self, city: str) -> RetrievalOutcome:
        try:
            result = self.data_source.fetch_forecast(city, offline_mode=False)
        except ForecastFetchError as exc:
            logger.warning(
                "Forecast fetch failed; trying cache",
                extra={"city": city, "error": str(exc), "error_type": type(exc).__name__},
            )
            return self._fallback(city)

        result = result.with_source(Source.LIVE)
        try:
            with self._cache_lock:
                self.cache.write(CacheEntry(result=result))
        except Exception as exc:  # live data is still usable
            logger.error("Failed to persist live forecast: %s", exc)
        else:
            logger.info("Live forecast cached", extra={"city": result.city, "days_count": len(result.days)})
        return RetrievalOutcome(result=result)

    def _fallback(self, city: str) -> RetrievalOutcome:
        cached = self.read_cached()
        if cached is None:
            return RetrievalOutcome(
                result=ForecastResult.empty(city),
                error=RetrievalError(kind=ErrorKind.FATAL, message=NO_DATA_MESSAGE),
            )
        return RetrievalOutcome(
            result=cached,
            error=RetrievalError(kind=ErrorKind.ADVISORY, message=STALE_DATA_MESSAGE),
        )
