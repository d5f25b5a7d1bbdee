"""Factory helpers for choosing a weather source at startup."""

from __future__ import annotations

from weather_lookup import config
from weather_lookup.data_sources.base import WeatherSource
from weather_lookup.data_sources.mock_source import MockWeatherSource
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/factory")


DEFAULT_SOURCE_NAME = "mock"


def build_weather_source(settings: config.Settings | None = None) -> WeatherSource:
    """Instantiate the configured weather source."""
    settings = settings or config.settings
    source = (settings.weather_source or DEFAULT_SOURCE_NAME).lower()

    if source == "mock":
        delay_range = (settings.mock_min_delay_ms, settings.mock_max_delay_ms)
        logger.info("Using mock weather source", extra={"delay_range_ms": delay_range})
        return MockWeatherSource(delay_range_ms=delay_range)

    raise ValueError(f"Unknown weather source '{source}'")
