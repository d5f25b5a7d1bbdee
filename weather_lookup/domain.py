"""Domain vocabulary and strict schemas for weather lookups.

This module defines the payloads that flow between the weather source, the
cache, the service and its callers: records, cache snapshots, and the
success/failure envelopes returned by every public operation. No lookup or
formatting logic lives here.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _StrictBaseModel(BaseModel):
    """Base model with strict extra handling."""

    model_config = ConfigDict(extra="forbid")


class ErrorKind(str, Enum):
    """Failure categories surfaced in envelopes."""
    INVALID_INPUT = "InvalidInput"
    NOT_FOUND = "NotFound"
    SOURCE_ERROR = "SourceError"


def normalize_city(raw: str) -> str:
    """Return the cache/source key for a user-supplied city name."""
    return raw.strip().lower()


class WeatherRecord(_StrictBaseModel):
    """One snapshot returned by a weather source. Immutable."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    city: str
    country: str = "unknown"
    temperature: float = Field(..., description="Degrees Celsius")
    description: str
    humidity: float = Field(..., description="Relative humidity, percent")
    wind_speed: float = Field(..., description="km/h")
    pressure: float = Field(..., description="hPa")
    visibility: float = Field(..., description="km")
    feels_like: float = Field(..., description="Degrees Celsius")
    icon: str = ""
    timestamp: int = Field(..., description="Retrieval time, epoch milliseconds")
    source: str = "mock-api"


class WeatherView(_StrictBaseModel):
    """Record fields as returned to callers, plus cache provenance."""
    city: str
    country: str
    temperature: float
    description: str
    humidity: float
    wind_speed: float
    pressure: float
    visibility: float
    feels_like: float
    icon: str
    timestamp: int
    from_cache: bool

    @classmethod
    def from_record(cls, record: WeatherRecord, *, from_cache: bool) -> "WeatherView":
        return cls(
            city=record.city,
            country=record.country,
            temperature=record.temperature,
            description=record.description,
            humidity=record.humidity,
            wind_speed=record.wind_speed,
            pressure=record.pressure,
            visibility=record.visibility,
            feels_like=record.feels_like,
            icon=record.icon,
            timestamp=record.timestamp,
            from_cache=from_cache,
        )


class CacheEntry(_StrictBaseModel):
    """A record and the wall-clock instant (epoch ms) it was stored."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    data: WeatherRecord
    stored_at: int


class CacheEntryStatus(_StrictBaseModel):
    """Diagnostic view of one cache entry."""
    city: str
    age: int = Field(..., description="Age in whole seconds")
    expired: bool
    data: WeatherRecord


class CacheStatus(_StrictBaseModel):
    """Read-only snapshot of the cache."""
    total_entries: int
    valid_entries: int
    expired_entries: int
    details: List[CacheEntryStatus] = Field(default_factory=list)


class ErrorDetail(_StrictBaseModel):
    """Machine-readable part of a failure envelope."""
    type: ErrorKind
    message: str
    timestamp: str  # ISO-8601, UTC


class WeatherSuccess(_StrictBaseModel):
    """Successful lookup envelope."""
    success: Literal[True] = True
    message: str
    data: WeatherView
    display_text: str


class WeatherFailure(_StrictBaseModel):
    """Failed lookup envelope."""
    success: Literal[False] = False
    message: str
    data: None = None
    display_text: str
    error: ErrorDetail


WeatherResult = Union[WeatherSuccess, WeatherFailure]


class BatchSummary(_StrictBaseModel):
    """Aggregate statistics for a batch lookup. Durations in milliseconds."""
    total: int
    successful: int
    failed: int
    duration: float
    average_time: Optional[float] = None


class BatchResult(_StrictBaseModel):
    """Outcome of a multi-city lookup; `results` follows input order."""
    success: bool
    results: List[WeatherResult] = Field(default_factory=list)
    summary: BatchSummary
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None


class TemperatureComparison(_StrictBaseModel):
    difference: float
    warmer: WeatherView
    description: str


class HumidityComparison(_StrictBaseModel):
    difference: float
    more_humid: WeatherView
    description: str


class WeatherComparison(_StrictBaseModel):
    """Per-metric differences between two cities (first minus second)."""
    temperature: TemperatureComparison
    humidity: HumidityComparison


class ComparisonResult(_StrictBaseModel):
    """Outcome of comparing two cities; no partial comparison on failure."""
    success: bool
    city1: Optional[WeatherView] = None
    city2: Optional[WeatherView] = None
    comparison: Optional[WeatherComparison] = None
    summary: Optional[str] = None
    error: Optional[str] = None
