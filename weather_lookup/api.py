"""HTTP API for the weather lookup service."""

from typing import List, Union

from fastapi import APIRouter, Query
from pydantic import BaseModel

from .batch import BatchCoordinator
from .comparison import Comparator
from .config import settings
from .domain import BatchResult, CacheStatus, ComparisonResult, WeatherFailure, WeatherSuccess
from .service import WeatherService
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_lookup/api")

router = APIRouter()

_service = WeatherService(settings=settings)
_batch = BatchCoordinator(_service)
_comparator = Comparator(_service)


def use_service(service: WeatherService) -> None:
    """Swap the service behind the routes (tests, alternate sources)."""
    global _service, _batch, _comparator
    _service = service
    _batch = BatchCoordinator(service)
    _comparator = Comparator(service)


def get_service() -> WeatherService:
    return _service


class BatchRequest(BaseModel):
    """Incoming multi-city lookup payload."""
    cities: List[str]


class ClearCacheResponse(BaseModel):
    cleared: bool


class ClearExpiredResponse(BaseModel):
    cleared: int


@router.get("/weather/compare", response_model=ComparisonResult)
async def compare_weather(city_a: str = Query(...), city_b: str = Query(...)):
    """Compare temperature and humidity between two cities."""
    return await _comparator.compare_weather(city_a, city_b)


@router.post("/weather/batch", response_model=BatchResult)
async def get_multiple_cities_weather(req: BatchRequest):
    """Look up several cities at once; per-city failures stay in the results."""
    return await _batch.get_multiple_cities_weather(req.cities)


@router.get("/weather/{city}", response_model=Union[WeatherSuccess, WeatherFailure])
async def get_weather(city: str):
    """Look up one city. Failures come back as an envelope, not an HTTP error."""
    return await _service.get_weather(city)


@router.get("/cache", response_model=CacheStatus)
def get_cache_status():
    """Diagnostic snapshot of the cache."""
    return _service.get_cache_status()


@router.delete("/cache", response_model=ClearCacheResponse)
def clear_cache():
    """Drop every cached record."""
    _service.clear_cache()
    logger.info("Cache cleared via API")
    return ClearCacheResponse(cleared=True)


@router.post("/cache/clear-expired", response_model=ClearExpiredResponse)
def clear_expired_cache():
    """Evict expired records only."""
    return ClearExpiredResponse(cleared=_service.clear_expired_cache())
