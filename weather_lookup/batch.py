"""Concurrent multi-city lookups with aggregate statistics."""
from __future__ import annotations

import asyncio
import time
from typing import Callable, List, Sequence

from weather_lookup.domain import BatchResult, BatchSummary, ErrorKind, WeatherResult
from weather_lookup.service import WeatherService, build_failure
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="batch_coordinator")

EMPTY_BATCH_MESSAGE = "Cities must be a non-empty list"


def _monotonic_ms() -> float:
    return time.perf_counter() * 1000


class BatchCoordinator:
    """Fan out lookups for many cities and wait for every one of them to settle."""

    def __init__(self, service: WeatherService, clock: Callable[[], float] = _monotonic_ms) -> None:
        self.service = service
        self._clock = clock

    async def get_multiple_cities_weather(self, cities: Sequence[str]) -> BatchResult:
        """
        Look up every city concurrently; results keep the input order.

        Individual failures stay in `results` and never cancel siblings. Only
        an empty/invalid `cities` argument or a fault in the fan-out itself
        fails the whole batch.
        """
        if not isinstance(cities, (list, tuple)) or len(cities) == 0:
            total = len(cities) if isinstance(cities, (list, tuple)) else 0
            logger.warning("Rejected batch request", extra={"error_kind": ErrorKind.INVALID_INPUT.value})
            return BatchResult(
                success=False,
                summary=BatchSummary(total=total, successful=0, failed=total, duration=0.0),
                error=EMPTY_BATCH_MESSAGE,
                error_kind=ErrorKind.INVALID_INPUT,
            )

        total = len(cities)
        logger.info(f"Fetching weather for {total} cities in parallel...")
        start = self._clock()

        lookups = []
        try:
            for city in cities:
                lookups.append(self.service.get_weather(city))
            settled = await asyncio.gather(*lookups, return_exceptions=True)
        except Exception as exc:
            duration = self._clock() - start
            for lookup in lookups:
                if asyncio.iscoroutine(lookup):
                    lookup.close()
            logger.exception("Batch weather fetch failed")
            return BatchResult(
                success=False,
                results=[],
                summary=BatchSummary(total=total, successful=0, failed=total, duration=duration),
                error=str(exc) or exc.__class__.__name__,
                error_kind=ErrorKind.SOURCE_ERROR,
            )

        results: List[WeatherResult] = []
        for city, outcome in zip(cities, settled):
            if isinstance(outcome, BaseException):
                # get_weather resolves to an envelope; anything else is a fault in that one lookup
                logger.error(f"Lookup for {city} raised instead of resolving: {outcome!r}")
                outcome = build_failure(city, ErrorKind.SOURCE_ERROR, str(outcome) or outcome.__class__.__name__)
            results.append(outcome)

        successful = sum(1 for r in results if r.success)
        failed = total - successful
        duration = self._clock() - start

        logger.info(
            f"Batch complete in {duration:.0f}ms: {successful} successful, {failed} failed",
            extra={"total": total},
        )
        return BatchResult(
            success=True,
            results=results,
            summary=BatchSummary(
                total=total,
                successful=successful,
                failed=failed,
                duration=duration,
                average_time=duration / total,
            ),
        )
