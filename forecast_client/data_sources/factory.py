"""Factory helpers for choosing a forecast data source at startup."""

from __future__ import annotations

from functools import partial

from forecast_client import config
from forecast_client.data_sources.base import CallableForecastDataSource, ForecastDataSource
from forecast_client.data_sources.forecast_api_client import fetch_forecast
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/factory")


def build_data_source(settings: config.Settings | None = None) -> ForecastDataSource:
    """Instantiate the HTTP data source bound to the configured endpoint."""
    settings = settings or config.settings
    url = settings.forecast_url
    logger.info("Using remote forecast service", extra={"url": url})
    return CallableForecastDataSource(
        forecast=partial(
            fetch_forecast,
            url=url,
            timeout=settings.request_timeout_seconds,
        ),
    )
