"""Forecast vocabulary and schemas shared by the retriever, cache and presentation layers.

The models here describe data only: what a forecast day looks like, where a
result came from, and the shape of the persisted cache entry. Decisions about
fetching and display live elsewhere.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Source(str, Enum):
    """Provenance of a forecast result."""
    LIVE = "live"
    OFFLINE_CACHE = "offline-cache"
    NONE = "none"


class RequestMode(str, Enum):
    """User-selected request mode."""
    ONLINE = "online"
    OFFLINE = "offline"

    @classmethod
    def from_offline_flag(cls, offline: bool) -> "RequestMode":
        """Map the UI's offline toggle onto a mode."""
        return cls.OFFLINE if offline else cls.ONLINE


class ErrorKind(str, Enum):
    """Severity of a retrieval error."""
    ADVISORY = "advisory"  # stale data is still shown
    FATAL = "fatal"  # nothing to show for this request


class ForecastDay(BaseModel):
    """One calendar day of forecast data."""
    model_config = ConfigDict(frozen=True)

    date: dt.date
    high: Optional[float] = None
    low: Optional[float] = None
    advice: List[str] = Field(default_factory=list)

    @field_validator("advice", mode="before")
    @classmethod
    def null_advice_is_empty(cls, v):
        """The service sends null when there is nothing to advise."""
        return [] if v is None else v


class ForecastResult(BaseModel):
    """Outcome of one retrieval: the city asked for, its days and their provenance."""
    model_config = ConfigDict(frozen=True)

    city: str
    days: List[ForecastDay] = Field(default_factory=list)
    source: Source = Source.NONE

    @field_validator("days", mode="after")
    @classmethod
    def dates_strictly_ascending(cls, days: List[ForecastDay]) -> List[ForecastDay]:
        """Reject duplicate or out-of-order dates."""
        for prev, cur in zip(days, days[1:]):
            if cur.date <= prev.date:
                raise ValueError(f"forecast dates must be distinct and ascending ({prev.date} -> {cur.date})")
        return days

    @classmethod
    def empty(cls, city: str) -> "ForecastResult":
        """Result used when there is neither live nor cached data."""
        return cls(city=city, days=[], source=Source.NONE)

    def with_source(self, source: Source) -> "ForecastResult":
        """Return a copy tagged with a different provenance."""
        return self.model_copy(update={"source": source})


class ForecastPayload(BaseModel):
    """Wire shape of a successful response from the remote forecast service."""

    city: str
    source: Optional[str] = None
    days: List[ForecastDay]

    def to_result(self) -> ForecastResult:
        """Validate into a ForecastResult reported as live."""
        return ForecastResult(city=self.city, days=self.days, source=Source.LIVE)


class CacheEntry(BaseModel):
    """The single persisted forecast: the last live result and when it was stored."""

    result: ForecastResult
    stored_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))


class RetrievalError(BaseModel):
    """Error surfaced alongside a retrieval result."""
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    @property
    def is_fatal(self) -> bool:
        return self.kind is ErrorKind.FATAL


class RetrievalOutcome(BaseModel):
    """Result plus optional advisory or fatal error from one retrieve() call."""
    model_config = ConfigDict(frozen=True)

    result: ForecastResult
    error: Optional[RetrievalError] = None
