"""Data sources for the remote forecast service."""

from .base import CallableForecastDataSource, ForecastDataSource
from .factory import build_data_source
from .forecast_api_client import fetch_forecast

__all__ = [
    "build_data_source",
    "ForecastDataSource",
    "CallableForecastDataSource",
    "fetch_forecast",
]
