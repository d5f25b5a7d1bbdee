"""Walk through the lookup features against the mock source.

Run with ``python -m weather_lookup.demo``.
"""
import asyncio

from weather_lookup.batch import BatchCoordinator
from weather_lookup.comparison import Comparator
from weather_lookup.config import settings
from weather_lookup.service import WeatherService
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="demo")


async def run_demo(service: WeatherService | None = None) -> None:
    """Single city, unknown city, batch, comparison, then cache status."""
    service = service or WeatherService(settings=settings)
    batch = BatchCoordinator(service)
    comparator = Comparator(service)

    print("\n--- Testing Functionality ---")

    london = await service.get_weather("London")
    print(london.display_text)

    invalid = await service.get_weather("Atlantis")
    print(invalid.message)

    multiple = await batch.get_multiple_cities_weather(["New York", "Tokyo", "Paris"])
    print(f"\nMultiple cities result: {multiple.summary.successful}/{multiple.summary.total} successful")

    comparison = await comparator.compare_weather("London", "Dubai")
    if comparison.success:
        print("\nComparison:", comparison.comparison.temperature.description)

    status = service.get_cache_status()
    print(f"\nCache status: {status.total_entries} entries, {status.valid_entries} valid")


def main() -> None:
    setup_logging(level=settings.log_level, job_name=f"{settings.job_name}_demo")
    asyncio.run(run_demo())


if __name__ == "__main__":
    main()
