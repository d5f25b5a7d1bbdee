"""Application configuration pulled from environment variables via pydantic."""
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the weather lookup service."""
    model_config = SettingsConfigDict(env_prefix="WEATHER_", extra="ignore")

    cache_expiry_ms: int = 5 * 60 * 1000
    weather_source: str = "mock"  # options: mock
    mock_min_delay_ms: int = 500
    mock_max_delay_ms: int = 2000
    log_level: str = "INFO"
    job_name: str = "weather_lookup"

    @field_validator("weather_source", mode="after")
    @classmethod
    def normalize_source_name(cls, v: str) -> str:
        """Source names are matched case-insensitively."""
        return str(v).strip().lower()

    @field_validator("cache_expiry_ms", "mock_min_delay_ms", "mock_max_delay_ms", mode="after")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @model_validator(mode="after")
    def delay_range_ordered(self) -> "Settings":
        if self.mock_max_delay_ms < self.mock_min_delay_ms:
            raise ValueError("mock_max_delay_ms must be >= mock_min_delay_ms")
        return self


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4)}")
