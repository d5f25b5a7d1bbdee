import unittest

from weather_lookup import formatting
from weather_lookup.domain import WeatherRecord


def _record(**overrides) -> WeatherRecord:
    fields = dict(
        city="sydney", country="Australia", temperature=25, description="Warm and sunny",
        humidity=38, wind_speed=10, pressure=1025, visibility=20, feels_like=27,
        icon="🌞", timestamp=0,
    )
    fields.update(overrides)
    return WeatherRecord(**fields)


class TestFormatting(unittest.TestCase):
    def test_fmt_number(self):
        self.assertEqual(formatting.fmt_number(15.0), "15")
        self.assertEqual(formatting.fmt_number(-5), "-5")
        self.assertEqual(formatting.fmt_number(2.5), "2.5")

    def test_fmt_timestamp(self):
        self.assertEqual(formatting.fmt_timestamp(0), "1970-01-01T00:00:00+00:00")

    def test_display_text_includes_every_field(self):
        text = formatting.display_text(_record())
        lines = text.splitlines()
        self.assertEqual(lines[0], "🌞 Weather in sydney, Australia")
        self.assertIn("25°C (feels like 27°C)", text)
        self.assertIn("Warm and sunny", text)
        self.assertIn("38%", text)
        self.assertIn("10 km/h", text)
        self.assertIn("1025 hPa", text)
        self.assertIn("20 km", text)
        self.assertIn("1970-01-01T00:00:00+00:00", text)

    def test_messages(self):
        self.assertEqual(
            formatting.success_message(_record(), from_cache=True),
            "sydney: 25°C, Warm and sunny (from cache)",
        )
        self.assertEqual(
            formatting.failure_message("Sydny", "not available"),
            "Unable to get weather for Sydny: not available",
        )


if __name__ == "__main__":
    unittest.main()
