"""Pick the forecast cache backend from configuration."""

from __future__ import annotations

import redis

from forecast_client import config
from forecast_client.cache_store.base import CacheStore
from forecast_client.cache_store.file import FileCacheStore
from forecast_client.cache_store.memory import InMemoryCacheStore
from forecast_client.cache_store.redis import RedisCacheStore
from utils.logging_utils import get_tagged_logger, mask_url

logger = get_tagged_logger(__name__, tag="cache_store/factory")

DEFAULT_BACKEND = "file"


def build_cache_store(settings: config.Settings | None = None) -> CacheStore:
    """Instantiate the configured cache store."""
    settings = settings or config.settings
    backend = (settings.cache_backend or DEFAULT_BACKEND).lower()

    if backend == "memory":
        logger.info("Using InMemoryCacheStore (not durable)")
        return InMemoryCacheStore()

    if backend == "redis":
        url = settings.cache_redis_url
        if not url:
            raise ValueError("cache_redis_url must be set for the redis cache backend")
        try:
            client = redis.Redis.from_url(url)
            client.ping()
            logger.info("Using RedisCacheStore", extra={"redis_url": mask_url(url)})
            return RedisCacheStore(client, key=settings.cache_key)
        except redis.RedisError as exc:
            logger.warning(
                "Falling back to FileCacheStore (Redis unavailable)",
                extra={"redis_url": mask_url(url), "error": str(exc)},
            )
            return FileCacheStore(settings.cache_path)

    if backend == "file":
        logger.info("Using FileCacheStore", extra={"path": settings.cache_path})
        return FileCacheStore(settings.cache_path)

    raise ValueError(f"Unknown cache backend '{backend}'")
