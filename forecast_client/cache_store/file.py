"""JSON-file forecast cache that survives process restarts."""

import os
import tempfile
import threading
from pathlib import Path
from typing import Optional

from forecast_client.cache_store.base import CacheStore, dump_entry, load_entry
from forecast_client.domain import CacheEntry
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache_store/file_cache_store")


class FileCacheStore(CacheStore):
    """Keep the last successful forecast as JSON in a single file.

    Writes go to a temporary file in the same directory which is then renamed
    over the target, so readers see either the old entry or the new one.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        logger.debug("Initializing FileCacheStore", extra={"path": str(self.path)})

    def read(self) -> Optional[CacheEntry]:
        """Return the cached entry, or None if the file is missing or unreadable."""
        with self._lock:
            try:
                raw = self.path.read_text(encoding="utf-8")
            except FileNotFoundError:
                return None
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Failed to read forecast cache: %s", exc)
                return None
        return load_entry(raw)

    def write(self, entry: CacheEntry) -> None:
        """Atomically replace the cached entry."""
        payload = dump_entry(entry)
        directory = self.path.parent
        with self._lock:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                try:
                    os.unlink(tmp_name)
                except FileNotFoundError:
                    pass
                raise
        logger.debug("Wrote forecast cache", extra={"path": str(self.path), "city": entry.result.city})
