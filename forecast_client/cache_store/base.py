"""Shared protocol and helpers for the single-slot forecast cache."""

from typing import Optional, Protocol

from pydantic import ValidationError

from forecast_client.domain import CacheEntry
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache_store")


class CacheStore(Protocol):
    """Protocol for cache backends holding at most one CacheEntry."""

    def read(self) -> Optional[CacheEntry]:
        """Return the stored entry, or None if unset or unreadable."""

    def write(self, entry: CacheEntry) -> None:
        """Replace the stored entry unconditionally."""


def dump_entry(entry: CacheEntry) -> str:
    """Serialize an entry to the JSON text kept in durable storage."""
    return entry.model_dump_json()


def load_entry(raw: str | bytes | None) -> Optional[CacheEntry]:
    """Parse stored JSON text; malformed or empty values read as absent."""
    if not raw:
        return None
    try:
        return CacheEntry.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning("Ignoring malformed cache entry", extra={"errors": exc.error_count()})
        return None
