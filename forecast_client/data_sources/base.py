"""Interfaces and helpers for forecast data sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from forecast_client.domain import ForecastResult


class ForecastDataSource(Protocol):
    """Interface for anything that can provide a city forecast."""

    def fetch_forecast(self, city: str, *, offline_mode: bool = False) -> ForecastResult:
        """Return the live forecast for `city` or raise ForecastFetchError."""
        ...


@dataclass
class CallableForecastDataSource(ForecastDataSource):
    """Wrap a fetch callable so it can be swapped for fakes or other backends."""

    forecast: Callable[..., ForecastResult]

    def fetch_forecast(self, city: str, *, offline_mode: bool = False) -> ForecastResult:
        """Delegate to the configured forecast callable."""
        return self.forecast(city, offline_mode=offline_mode)
