import unittest

from weather_lookup.data_sources.base import CallableWeatherSource
from weather_lookup.data_sources.factory import build_weather_source, DEFAULT_SOURCE_NAME
from weather_lookup.data_sources.mock_source import MockWeatherSource
from weather_lookup.domain import WeatherRecord


class DummySettings:
    def __init__(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        self.weather_source = getattr(self, "weather_source", DEFAULT_SOURCE_NAME)
        self.mock_min_delay_ms = getattr(self, "mock_min_delay_ms", 500)
        self.mock_max_delay_ms = getattr(self, "mock_max_delay_ms", 2000)


class TestWeatherSourceFactory(unittest.TestCase):
    def test_build_mock_default(self):
        ds = build_weather_source(DummySettings())
        self.assertIsInstance(ds, MockWeatherSource)
        self.assertEqual(ds.delay_range_ms, (500, 2000))

    def test_mock_uses_configured_delays(self):
        ds = build_weather_source(DummySettings(mock_min_delay_ms=0, mock_max_delay_ms=10))
        self.assertEqual(ds.delay_range_ms, (0, 10))

    def test_unknown_source_raises(self):
        with self.assertRaises(ValueError):
            build_weather_source(DummySettings(weather_source="openweather"))


class TestCallableWeatherSource(unittest.IsolatedAsyncioTestCase):
    async def test_delegates_to_callable(self):
        seen = []

        async def fetch(city_key: str) -> WeatherRecord:
            seen.append(city_key)
            return WeatherRecord(
                city=city_key, temperature=1, description="x", humidity=2, wind_speed=3,
                pressure=4, visibility=5, feels_like=6, timestamp=7,
            )

        source = CallableWeatherSource(fetch)
        record = await source.fetch("oslo")
        self.assertEqual(seen, ["oslo"])
        self.assertEqual(record.city, "oslo")


if __name__ == "__main__":
    unittest.main()
