"""Interfaces and helpers for weather sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Protocol

from weather_lookup.domain import WeatherRecord


class WeatherSource(Protocol):
    """Interface for anything that can look up current weather for a city."""

    async def fetch(self, city_key: str) -> WeatherRecord:
        """
        Return the current record for a normalized city key.

        Raises CityNotFoundError for unknown cities and WeatherSourceError
        (or any other exception) for everything else.
        """
        ...


@dataclass
class CallableWeatherSource(WeatherSource):
    """Wrap an async callable so alternate backends can be swapped in."""

    fetch_weather: Callable[[str], Awaitable[WeatherRecord]]

    async def fetch(self, city_key: str) -> WeatherRecord:
        """Delegate to the configured callable."""
        return await self.fetch_weather(city_key)
