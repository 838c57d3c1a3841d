"""Exceptions raised by forecast data sources."""


class ForecastFetchError(Exception):
    """The remote forecast could not be obtained."""


class ForecastTransportError(ForecastFetchError):
    """The request never produced an HTTP response (DNS, refused, reset, timeout)."""


class ForecastStatusError(ForecastFetchError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")


class ForecastPayloadError(ForecastFetchError):
    """The response body was not JSON or did not match the forecast schema."""
