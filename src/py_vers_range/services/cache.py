"""VersionCache: a bounded, caller-owned memo of parsed versions."""

import logging
import threading
from typing import Dict

from py_vers_range.config import DEFAULT_CACHE_CAPACITY
from py_vers_range.models import Version

logger = logging.getLogger(__name__)


class VersionCache:
    """Memoizes :meth:`Version.parse` for whoever owns the cache.

    When ``capacity`` entries are stored the cache is cleared before the next
    insert. A lock guards every access so one instance can be shared between
    threads. Failed parses are never cached.
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.hits = 0
        self.misses = 0
        self._entries: Dict[str, Version] = {}
        self._lock = threading.Lock()

    def get(self, version_string: str) -> Version:
        """Return the parsed Version for ``version_string``, parsing on a miss."""
        with self._lock:
            cached = self._entries.get(version_string)
            if cached is not None:
                self.hits += 1
                return cached

        version = Version.parse(version_string)

        with self._lock:
            self.misses += 1
            if len(self._entries) >= self.capacity:
                logger.debug("Version cache full at %d entries, clearing", len(self._entries))
                self._entries.clear()
            self._entries[version_string] = version
        return version

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
