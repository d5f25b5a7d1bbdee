"""Human-readable text for weather envelopes and comparisons."""

from __future__ import annotations

from datetime import datetime, timezone

from weather_lookup.domain import WeatherRecord, WeatherView


def fmt_number(value: float) -> str:
    """Render 15.0 as "15" and 2.5 as "2.5"."""
    return f"{value:g}"


def fmt_timestamp(epoch_ms: int) -> str:
    """ISO-8601 UTC rendering of an epoch-millisecond timestamp."""
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).isoformat(timespec="seconds")


def success_message(record: WeatherRecord, *, from_cache: bool) -> str:
    cache_text = " (from cache)" if from_cache else ""
    return f"{record.city}: {fmt_number(record.temperature)}°C, {record.description}{cache_text}"


def failure_message(raw_city: object, error_message: str) -> str:
    return f"Unable to get weather for {raw_city}: {error_message}"


def error_display_text(error_message: str) -> str:
    return f"❌ Error: {error_message}"


def display_text(record: WeatherRecord) -> str:
    """Multi-line card with every field of a record."""
    lines = [
        f"{record.icon} Weather in {record.city}, {record.country}",
        f"🌡️ Temperature: {fmt_number(record.temperature)}°C (feels like {fmt_number(record.feels_like)}°C)",
        f"📝 Description: {record.description}",
        f"💧 Humidity: {fmt_number(record.humidity)}%",
        f"💨 Wind Speed: {fmt_number(record.wind_speed)} km/h",
        f"📊 Pressure: {fmt_number(record.pressure)} hPa",
        f"👁️ Visibility: {fmt_number(record.visibility)} km",
        f"⏰ Updated: {fmt_timestamp(record.timestamp)}",
    ]
    return "\n".join(lines).strip()


def _difference_description(
    diff: float, leader: WeatherView, *, similar: str, unit: str, above: str, below: str
) -> str:
    # Under one unit is "similar"; the adjective follows the sign of first minus second.
    if abs(diff) < 1:
        return similar
    adjective = above if diff > 0 else below
    return f"{fmt_number(abs(diff))}{unit} {adjective} in {leader.city}"


def temperature_description(diff: float, warmer: WeatherView) -> str:
    return _difference_description(
        diff, warmer, similar="Similar temperatures", unit="°C", above="warmer", below="cooler"
    )


def humidity_description(diff: float, more_humid: WeatherView) -> str:
    return _difference_description(
        diff, more_humid, similar="Similar humidity", unit="%", above="more humid", below="less humid"
    )


def comparison_summary(first: WeatherView, second: WeatherView) -> str:
    """Two lines, one per city, with temperature and description."""
    return "\n".join(
        f"🏙️ {view.city}: {fmt_number(view.temperature)}°C, {view.description}"
        for view in (first, second)
    )
