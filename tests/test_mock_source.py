import random
import unittest

from weather_lookup.data_sources.mock_source import (
    COUNTRY_BY_CITY,
    MOCK_WEATHER,
    MockWeatherSource,
    country_for_city,
)
from weather_lookup.errors import CityNotFoundError
from weather_lookup.domain import ErrorKind


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class TestMockWeatherSource(unittest.IsolatedAsyncioTestCase):
    async def test_known_city_returns_full_record(self):
        source = MockWeatherSource(delay_range_ms=(0, 0), clock=lambda: 42)
        record = await source.fetch("new york")
        self.assertEqual(record.city, "new york")
        self.assertEqual(record.country, "United States")
        self.assertEqual(record.temperature, 22)
        self.assertEqual(record.feels_like, 24)
        self.assertEqual(record.wind_speed, 8)
        self.assertEqual(record.timestamp, 42)
        self.assertEqual(record.source, "mock-api")

    async def test_unknown_city_lists_alternatives(self):
        source = MockWeatherSource(delay_range_ms=(0, 0))
        with self.assertRaises(CityNotFoundError) as ctx:
            await source.fetch("atlantis")
        message = str(ctx.exception)
        self.assertIn('"atlantis"', message)
        self.assertIn("London", message)
        self.assertIn("New York", message)
        self.assertEqual(ctx.exception.kind, ErrorKind.NOT_FOUND)

    async def test_delay_drawn_from_range_and_slept(self):
        sleep = RecordingSleep()
        source = MockWeatherSource(delay_range_ms=(500, 2000), sleep=sleep, rng=random.Random(7))
        await source.fetch("tokyo")
        await source.fetch("paris")
        self.assertEqual(len(sleep.delays), 2)
        for delay in sleep.delays:
            self.assertGreaterEqual(delay, 0.5)
            self.assertLessEqual(delay, 2.0)
        self.assertEqual(source.calls, 2)

    async def test_zero_delay_never_sleeps(self):
        sleep = RecordingSleep()
        source = MockWeatherSource(delay_range_ms=(0, 0), sleep=sleep)
        await source.fetch("dubai")
        self.assertEqual(sleep.delays, [])

    async def test_custom_table(self):
        table = {"atlantis": dict(MOCK_WEATHER["london"], temperature=30)}
        source = MockWeatherSource(delay_range_ms=(0, 0), table=table)
        record = await source.fetch("atlantis")
        self.assertEqual(record.temperature, 30)
        self.assertEqual(record.country, "unknown")

    def test_invalid_delay_range(self):
        with self.assertRaises(ValueError):
            MockWeatherSource(delay_range_ms=(100, 10))

    def test_country_lookup(self):
        self.assertEqual(country_for_city("dubai"), "UAE")
        self.assertEqual(country_for_city("atlantis"), "unknown")
        self.assertEqual(set(COUNTRY_BY_CITY), set(MOCK_WEATHER))


if __name__ == "__main__":
    unittest.main()
