"""Weather sources that can back the lookup service."""

from .base import CallableWeatherSource, WeatherSource
from .factory import build_weather_source
from .mock_source import COUNTRY_BY_CITY, MOCK_WEATHER, MockWeatherSource, country_for_city

__all__ = [
    "build_weather_source",
    "CallableWeatherSource",
    "WeatherSource",
    "MockWeatherSource",
    "MOCK_WEATHER",
    "COUNTRY_BY_CITY",
    "country_for_city",
]
