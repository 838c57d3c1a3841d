"""Helpers for fetching a 3-day city forecast from the remote forecast service."""
from __future__ import annotations

from typing import Optional

import requests
from pydantic import ValidationError

from forecast_client.config import settings
from forecast_client.domain import ForecastPayload, ForecastResult
from forecast_client.errors import ForecastPayloadError, ForecastStatusError, ForecastTransportError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="forecast_api_client")

# No requests_cache/retry adapter here: a cached HTTP response would be
# reported as live, and retries are left to the user.
session = requests.Session()

_UNSET = object()


def fetch_forecast(
    city: str,
    *,
    offline_mode: bool = False,
    url: Optional[str] = None,
    timeout: Optional[float] | object = _UNSET,
) -> ForecastResult:
    """Fetch the forecast for `city` and return it as a live ForecastResult.

    Raises ForecastTransportError, ForecastStatusError or ForecastPayloadError;
    callers decide how to fall back. An explicit `timeout=None` means no
    timeout; leaving it out uses the configured one.
    """
    url = url or settings.forecast_url
    if timeout is _UNSET:
        timeout = settings.request_timeout_seconds

    params = {
        "city": city,
        "offlineMode": "true" if offline_mode else "false",
    }

    logger.debug("Requesting forecast", extra={"city": city, "url": url})
    try:
        resp = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as exc:
        raise ForecastTransportError(str(exc)) from exc

    if not 200 <= resp.status_code < 300:
        raise ForecastStatusError(resp.status_code)

    try:
        data = resp.json()
    except ValueError as exc:
        raise ForecastPayloadError(f"response body is not JSON: {exc}") from exc

    try:
        result = ForecastPayload.model_validate(data).to_result()
    except ValidationError as exc:
        raise ForecastPayloadError(f"unexpected forecast payload: {exc.error_count()} error(s)") from exc

    logger.info(
        "Fetched forecast",
        extra={"city": result.city, "days_count": len(result.days)},
    )
    return result
