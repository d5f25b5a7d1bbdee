"""Side-by-side comparison of two cities."""
from __future__ import annotations

import asyncio

from weather_lookup import formatting
from weather_lookup.domain import (
    ComparisonResult,
    HumidityComparison,
    TemperatureComparison,
    WeatherComparison,
    WeatherView,
)
from weather_lookup.service import WeatherService
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="comparator")


def build_comparison(first: WeatherView, second: WeatherView) -> WeatherComparison:
    """Differences are first minus second; ties go to the second city."""
    temp_diff = first.temperature - second.temperature
    humidity_diff = first.humidity - second.humidity
    warmer = first if temp_diff > 0 else second
    more_humid = first if humidity_diff > 0 else second
    return WeatherComparison(
        temperature=TemperatureComparison(
            difference=temp_diff,
            warmer=warmer,
            description=formatting.temperature_description(temp_diff, warmer),
        ),
        humidity=HumidityComparison(
            difference=humidity_diff,
            more_humid=more_humid,
            description=formatting.humidity_description(humidity_diff, more_humid),
        ),
    )


class Comparator:
    """Fetch two cities concurrently and diff their temperature and humidity."""

    def __init__(self, service: WeatherService) -> None:
        self.service = service

    async def compare_weather(self, city1: str, city2: str) -> ComparisonResult:
        logger.info(f"Comparing weather between {city1} and {city2}...")
        try:
            first, second = await asyncio.gather(
                self.service.get_weather(city1),
                self.service.get_weather(city2),
            )
        except Exception as exc:  # pragma: no cover - get_weather resolves to envelopes
            logger.exception("Weather comparison failed")
            return ComparisonResult(success=False, error=str(exc) or exc.__class__.__name__)

        for city, result in ((city1, first), (city2, second)):
            if not result.success:
                error = f"Failed to get weather for {city}: {result.message}"
                logger.warning(f"Weather comparison failed: {error}")
                return ComparisonResult(success=False, error=error)

        return ComparisonResult(
            success=True,
            city1=first.data,
            city2=second.data,
            comparison=build_comparison(first.data, second.data),
            summary=formatting.comparison_summary(first.data, second.data),
        )
