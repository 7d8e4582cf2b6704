"""In-memory cache of merged responses keyed by request path."""

import logging
import threading

logger = logging.getLogger(__name__)


class MergeCache:
    """Thread-safe mapping of request path to merged content.

    Each operation is atomic on its own. A get-then-put sequence is not, so
    two concurrent misses on the same key may both compute and store the
    value; the last write wins. Entries never expire and the cache has no
    size bound, it only empties on ``clear``.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        logger.info("Expiring cache")
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        """Snapshot of cached request paths in insertion order."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
