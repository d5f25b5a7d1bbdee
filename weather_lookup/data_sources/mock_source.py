"""Static weather table served with simulated network latency."""
from __future__ import annotations

import asyncio
import random
import time
from typing import Awaitable, Callable, Dict, Optional, Tuple

from weather_lookup.domain import WeatherRecord
from weather_lookup.errors import CityNotFoundError
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="mock_weather_source")

SOURCE_TAG = "mock-api"

MOCK_WEATHER: Dict[str, dict] = {
    "london": {
        "temperature": 15,
        "description": "Cloudy with light rain",
        "humidity": 78,
        "wind_speed": 12,
        "pressure": 1013,
        "visibility": 8,
        "icon": "🌦️",
        "feels_like": 13,
    },
    "new york": {
        "temperature": 22,
        "description": "Sunny and clear",
        "humidity": 45,
        "wind_speed": 8,
        "pressure": 1020,
        "visibility": 15,
        "icon": "☀️",
        "feels_like": 24,
    },
    "tokyo": {
        "temperature": 18,
        "description": "Partly cloudy",
        "humidity": 62,
        "wind_speed": 6,
        "pressure": 1018,
        "visibility": 12,
        "icon": "⛅",
        "feels_like": 19,
    },
    "paris": {
        "temperature": 12,
        "description": "Overcast",
        "humidity": 71,
        "wind_speed": 14,
        "pressure": 1008,
        "visibility": 10,
        "icon": "☁️",
        "feels_like": 10,
    },
    "sydney": {
        "temperature": 25,
        "description": "Warm and sunny",
        "humidity": 38,
        "wind_speed": 10,
        "pressure": 1025,
        "visibility": 20,
        "icon": "🌞",
        "feels_like": 27,
    },
    "moscow": {
        "temperature": -5,
        "description": "Snow and cold",
        "humidity": 85,
        "wind_speed": 18,
        "pressure": 1000,
        "visibility": 5,
        "icon": "❄️",
        "feels_like": -10,
    },
    "dubai": {
        "temperature": 35,
        "description": "Hot and sunny",
        "humidity": 25,
        "wind_speed": 5,
        "pressure": 1015,
        "visibility": 18,
        "icon": "🔥",
        "feels_like": 40,
    },
}

COUNTRY_BY_CITY: Dict[str, str] = {
    "london": "United Kingdom",
    "new york": "United States",
    "tokyo": "Japan",
    "paris": "France",
    "sydney": "Australia",
    "moscow": "Russia",
    "dubai": "UAE",
}


def country_for_city(city_key: str) -> str:
    """Map a city key to its country, or "unknown"."""
    return COUNTRY_BY_CITY.get(city_key, "unknown")


class MockWeatherSource:
    """
    Serve records from a static table after a random delay.

    The latency model is injectable: `delay_range_ms` bounds the uniform
    delay, `sleep` performs it and `rng` draws it. Tests pass a zero range
    or a recording sleep so nothing actually waits.
    """

    def __init__(
        self,
        *,
        delay_range_ms: Tuple[int, int] = (500, 2000),
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = lambda: int(time.time() * 1000),
        table: Optional[Dict[str, dict]] = None,
    ) -> None:
        low, high = delay_range_ms
        if low < 0 or high < low:
            raise ValueError(f"Invalid delay range {delay_range_ms!r}")
        self.delay_range_ms = (low, high)
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._clock = clock
        self._table = MOCK_WEATHER if table is None else table
        self.calls: int = 0

    def available_cities(self) -> list[str]:
        """Display names of every city the table knows about."""
        return [key.title() for key in self._table]

    def _next_delay_seconds(self) -> float:
        low, high = self.delay_range_ms
        if high == low:
            return low / 1000
        return self._rng.uniform(low, high) / 1000

    async def fetch(self, city_key: str) -> WeatherRecord:
        """Simulate a network round-trip and return the record for `city_key`."""
        self.calls += 1
        logger.info(f"Fetching weather for {city_key}...")
        delay = self._next_delay_seconds()
        if delay > 0:
            await self._sleep(delay)

        row = self._table.get(city_key)
        if row is None:
            raise CityNotFoundError(
                f'Weather data not available for "{city_key}". '
                f"Available cities: {', '.join(self.available_cities())}"
            )

        logger.info(f"Weather data found for {city_key}", extra={"delay_s": round(delay, 3)})
        return WeatherRecord(
            city=city_key,
            country=country_for_city(city_key),
            timestamp=self._clock(),
            source=SOURCE_TAG,
            **row,
        )
