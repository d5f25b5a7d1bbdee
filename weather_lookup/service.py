"""Cache-backed weather lookups that always resolve to an envelope."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from weather_lookup import formatting
from weather_lookup.cache import InMemoryWeatherCache, WeatherCache
from weather_lookup.config import Settings, settings as default_settings
from weather_lookup.data_sources import WeatherSource, build_weather_source
from weather_lookup.domain import (
    CacheStatus,
    ErrorDetail,
    ErrorKind,
    WeatherFailure,
    WeatherRecord,
    WeatherResult,
    WeatherSuccess,
    WeatherView,
    normalize_city,
)
from weather_lookup.errors import InvalidInputError, WeatherLookupError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_service")

INVALID_CITY_MESSAGE = "City name is required and must be a valid string"


def build_success(record: WeatherRecord, *, from_cache: bool) -> WeatherSuccess:
    """Shape a record into a success envelope."""
    return WeatherSuccess(
        message=formatting.success_message(record, from_cache=from_cache),
        data=WeatherView.from_record(record, from_cache=from_cache),
        display_text=formatting.display_text(record),
    )


def build_failure(raw_city: object, kind: ErrorKind, error_message: str) -> WeatherFailure:
    """Shape an error into a failure envelope naming the caller's original input."""
    return WeatherFailure(
        message=formatting.failure_message(raw_city, error_message),
        display_text=formatting.error_display_text(error_message),
        error=ErrorDetail(
            type=kind,
            message=error_message,
            timestamp=datetime.now(timezone.utc).isoformat(),
        ),
    )


class WeatherService:
    """
    Wrap a weather source with a private short-lived cache.

    `get_weather` never raises: invalid input, unknown cities and source
    faults all come back as a `WeatherFailure`. The cache is only touched
    synchronously, so within one call nothing else can run between the miss
    and the write except the source await.
    """

    def __init__(
        self,
        source: Optional[WeatherSource] = None,
        cache: Optional[WeatherCache] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or default_settings
        self.source = source if source is not None else build_weather_source(settings)
        self.cache = cache if cache is not None else InMemoryWeatherCache(expiry_ms=settings.cache_expiry_ms)
        logger.info("Weather service initialized")

    async def get_weather(self, city: object) -> WeatherResult:
        """Look up one city, preferring a fresh cache entry over the source."""
        try:
            if not isinstance(city, str) or not city.strip():
                raise InvalidInputError(INVALID_CITY_MESSAGE)

            city_key = normalize_city(city)
            logger.debug(f"Getting weather for: {city_key}")

            cached = self.cache.get(city_key)
            if cached is not None:
                logger.info(f"Using cached data for {city_key}")
                return build_success(cached.data, from_cache=True)

            logger.info(f"Fetching fresh weather data for {city_key}...")
            record = await self.source.fetch(city_key)
            self.cache.put(city_key, record)
            return build_success(record, from_cache=False)

        except WeatherLookupError as exc:
            logger.warning(
                f"Weather fetch failed for {city}: {exc}",
                extra={"error_kind": exc.kind.value},
            )
            return build_failure(city, exc.kind, str(exc))
        except Exception as exc:
            logger.exception(f"Unexpected weather source fault for {city}")
            return build_failure(city, ErrorKind.SOURCE_ERROR, str(exc) or exc.__class__.__name__)

    def get_cache_status(self) -> CacheStatus:
        """Diagnostic snapshot of the cache; never evicts."""
        return self.cache.status()

    def clear_cache(self) -> None:
        """Drop every cached record."""
        self.cache.clear()

    def clear_expired_cache(self) -> int:
        """Evict expired records and return how many were removed."""
        return self.cache.clear_expired()
