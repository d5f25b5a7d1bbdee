"""Cache backends for weather records."""

from .base import WeatherCache
from .memory import InMemoryWeatherCache

__all__ = [
    "WeatherCache",
    "InMemoryWeatherCache",
]
