import os
import unittest

from pydantic import ValidationError

from weather_lookup.config import Settings


class TestConfig(unittest.TestCase):
    def test_settings_defaults(self):
        previous = os.environ.pop("WEATHER_CACHE_EXPIRY_MS", None)
        try:
            s = Settings()
            self.assertEqual(s.cache_expiry_ms, 300_000)
            self.assertEqual(s.weather_source, "mock")
            self.assertEqual((s.mock_min_delay_ms, s.mock_max_delay_ms), (500, 2000))
        finally:
            if previous is not None:
                os.environ["WEATHER_CACHE_EXPIRY_MS"] = previous

    def test_cache_expiry_env_override(self):
        previous = os.environ.get("WEATHER_CACHE_EXPIRY_MS")
        try:
            os.environ["WEATHER_CACHE_EXPIRY_MS"] = "60000"
            s = Settings()
            self.assertEqual(s.cache_expiry_ms, 60000)
        finally:
            if previous is None:
                os.environ.pop("WEATHER_CACHE_EXPIRY_MS", None)
            else:
                os.environ["WEATHER_CACHE_EXPIRY_MS"] = previous

    def test_source_name_is_normalized(self):
        s = Settings(weather_source="  MOCK ")
        self.assertEqual(s.weather_source, "mock")

    def test_delay_range_must_be_ordered(self):
        with self.assertRaises(ValidationError):
            Settings(mock_min_delay_ms=100, mock_max_delay_ms=50)

    def test_negative_expiry_rejected(self):
        with self.assertRaises(ValidationError):
            Settings(cache_expiry_ms=-1)


if __name__ == "__main__":
    unittest.main()
