"""In-memory weather cache with a fixed expiry threshold."""

import math
import threading
import time
from typing import Callable, Optional

from weather_lookup.cache.base import WeatherCache
from weather_lookup.domain import CacheEntry, CacheEntryStatus, CacheStatus, WeatherRecord

from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache/in_memory_weather_cache")

DEFAULT_EXPIRY_MS = 5 * 60 * 1000


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class InMemoryWeatherCache(WeatherCache):
    """Thread-safe, expiry-aware in-memory store of the latest record per city."""

    def __init__(self, expiry_ms: int = DEFAULT_EXPIRY_MS, clock: Callable[[], int] = now_ms) -> None:
        """Initialize with an expiry threshold (ms) and a clock returning epoch ms."""
        logger.debug("Initializing InMemoryWeatherCache", extra={"expiry_ms": expiry_ms})
        self.expiry_ms = expiry_ms
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def _expired(self, entry: CacheEntry, now: int) -> bool:
        """Return True if the entry is older than the expiry threshold at `now`."""
        return now - entry.stored_at > self.expiry_ms

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return a fresh entry, evicting it instead if it has expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._expired(entry, self._clock()):
                self._entries.pop(key, None)
                logger.info("Expired cache entry removed", extra={"city_key": key})
                return None
            return entry

    def put(self, key: str, record: WeatherRecord) -> CacheEntry:
        """Replace whatever is stored under `key` with a freshly stamped entry."""
        with self._lock:
            entry = CacheEntry(data=record, stored_at=self._clock())
            self._entries[key] = entry
        logger.debug("Cached weather data", extra={"city_key": key})
        return entry

    def status(self) -> CacheStatus:
        """Snapshot all entries; expiry is reported but nothing is evicted."""
        with self._lock:
            now = self._clock()
            details = [
                CacheEntryStatus(
                    city=key,
                    age=math.floor((now - entry.stored_at) / 1000 + 0.5),
                    expired=self._expired(entry, now),
                    data=entry.data,
                )
                for key, entry in self._entries.items()
            ]
        expired = sum(1 for d in details if d.expired)
        return CacheStatus(
            total_entries=len(details),
            valid_entries=len(details) - expired,
            expired_entries=expired,
            details=details,
        )

    def clear(self) -> None:
        """Clear all entries."""
        with self._lock:
            self._entries.clear()
        logger.info("Cache entries cleared")

    def clear_expired(self) -> int:
        """Sweep expired entries and return the number removed."""
        with self._lock:
            now = self._clock()
            stale = [key for key, entry in self._entries.items() if self._expired(entry, now)]
            for key in stale:
                del self._entries[key]
        logger.info(f"Cleared {len(stale)} expired cache entries")
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
