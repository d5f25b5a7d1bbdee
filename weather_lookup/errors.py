"""Exceptions raised inside the lookup pipeline.

They never escape the public operations: the service converts each one into
a failure envelope tagged with the exception's `kind`.
"""

from weather_lookup.domain import ErrorKind


class WeatherLookupError(Exception):
    """Base class for weather lookup failures."""
    kind: ErrorKind = ErrorKind.SOURCE_ERROR


class InvalidInputError(WeatherLookupError):
    """Raised for empty/non-string city names and empty batches."""
    kind = ErrorKind.INVALID_INPUT


class CityNotFoundError(WeatherLookupError):
    """Raised by a weather source that has no record for a city key."""
    kind = ErrorKind.NOT_FOUND


class WeatherSourceError(WeatherLookupError):
    """Raised when a weather source fails for any other reason."""
    kind = ErrorKind.SOURCE_ERROR
