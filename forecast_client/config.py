"""Client configuration pulled from environment variables via pydantic."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger, mask_url
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the forecast client."""
    model_config = SettingsConfigDict(env_prefix="FORECAST_", extra="ignore")

    api_base_url: str = "http://localhost:8080"
    forecast_path: str = "/api/v1/weather/forecast"
    request_timeout_seconds: float | None = None  # None: wait as long as the service takes
    cache_backend: str = "file"  # options: file, redis, memory
    cache_path: str = ".forecast_cache.json"
    cache_key: str = "weather:lastForecast"
    cache_redis_url: str | None = None
    default_city: str = "london"
    days_shown: int = 3

    @field_validator("api_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return str(v).rstrip("/")

    @property
    def forecast_url(self) -> str:
        """Absolute URL of the remote forecast endpoint."""
        return f"{self.api_base_url}/{self.forecast_path.lstrip('/')}"


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    dumped = settings.model_dump()
    if dumped.get("cache_redis_url"):
        dumped["cache_redis_url"] = mask_url(dumped["cache_redis_url"])
    logger.debug(f"Loaded settings: {dumped}")
