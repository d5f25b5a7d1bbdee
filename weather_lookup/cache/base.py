"""Shared protocol for weather record caches."""

from typing import Optional, Protocol

from weather_lookup.domain import CacheEntry, CacheStatus, WeatherRecord


class WeatherCache(Protocol):
    """Protocol for cache backends keyed by normalized city name."""

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the entry if still fresh; drop it and return None if expired."""

    def put(self, key: str, record: WeatherRecord) -> CacheEntry:
        """Store `record` under `key`, replacing any previous entry."""

    def status(self) -> CacheStatus:
        """Snapshot every entry without evicting anything."""

    def clear(self) -> None:
        """Remove every entry."""

    def clear_expired(self) -> int:
        """Remove expired entries and return how many were removed."""
