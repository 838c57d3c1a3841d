"""Display-ready values derived from a forecast result.

Everything here is a pure function of its arguments: no network, no cache, no
clock. A UI renders the ForecastView; it never recomputes themes or icons.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel

from forecast_client.domain import ForecastDay, ForecastResult, RetrievalError, Source

DAYS_SHOWN = 3


@dataclass(frozen=True)
class Theme:
    """Colour scheme for a temperature band."""
    name: str
    emoji: str
    label: str
    background: str


TEMPERATURE_THEMES: Dict[str, Theme] = {
    "scorching": Theme("scorching", "🔥", "Scorching", "linear-gradient(135deg, #b71c1c 0%, #e53935 50%, #ff7043 100%)"),
    "hot": Theme("hot", "☀️", "Hot", "linear-gradient(135deg, #e65100 0%, #f57c00 50%, #ffa726 100%)"),
    "warm": Theme("warm", "🌤️", "Warm", "linear-gradient(135deg, #f9a825 0%, #fdd835 50%, #ffee58 100%)"),
    "cool": Theme("cool", "🌥️", "Cool", "linear-gradient(135deg, #1565c0 0%, #1976d2 50%, #42a5f5 100%)"),
    "cold": Theme("cold", "❄️", "Cold", "linear-gradient(135deg, #0d47a1 0%, #1a237e 50%, #283593 100%)"),
    "default": Theme("default", "🌍", "Weather", "linear-gradient(135deg, #1a237e 0%, #1565c0 50%, #0288d1 100%)"),
}

# Lower bound (inclusive) per band, checked top down.
TEMPERATURE_BANDS = (
    (40.0, "scorching"),
    (30.0, "hot"),
    (20.0, "warm"),
    (10.0, "cool"),
)


class WeatherIcon(str, Enum):
    """Icon shown on a day card."""
    STORM = "⛈️"
    RAIN = "🌧️"
    SUN = "☀️"
    WIND = "💨"
    PARTLY_CLOUDY = "🌤️"


# Order matters: the first keyword found wins.
ADVICE_ICON_KEYWORDS = (
    ("storm", WeatherIcon.STORM),
    ("umbrella", WeatherIcon.RAIN),
    ("sunscreen", WeatherIcon.SUN),
    ("windy", WeatherIcon.WIND),
)


@dataclass(frozen=True)
class SourceBadge:
    """Provenance marker shown next to the city name."""
    text: str
    color: str


LIVE_BADGE = SourceBadge("● Live", "#2e7d32")
CACHED_BADGE = SourceBadge("● Cached", "#e65100")
NO_CACHE_BADGE = SourceBadge("● No Cache", "#999")

DAY_LABELS = ("Today", "Tomorrow", "Day After")

START_PROMPT = "Enter a city and click Get Forecast to begin."
NO_CACHE_PROMPT = "No cached data yet. Switch to Online Mode and search first."


def dominant_temperature(days: Sequence[ForecastDay]) -> Optional[float]:
    """Mean of every known high and low across `days`, or None if there are none.

    Each value counts once, so a day missing its low pulls the mean toward its high.
    """
    temps = [t for d in days for t in (d.high, d.low) if t is not None]
    if not temps:
        return None
    return sum(temps) / len(temps)


def temperature_theme(avg: Optional[float]) -> Theme:
    if avg is None:
        return TEMPERATURE_THEMES["default"]
    for lower, name in TEMPERATURE_BANDS:
        if avg >= lower:
            return TEMPERATURE_THEMES[name]
    return TEMPERATURE_THEMES["cold"]


def weather_icon(advice: Sequence[str]) -> WeatherIcon:
    """Pick an icon from advice text by keyword priority (storm > umbrella > sunscreen > windy)."""
    text = " ".join(advice).lower()
    for keyword, icon in ADVICE_ICON_KEYWORDS:
        if keyword in text:
            return icon
    return WeatherIcon.PARTLY_CLOUDY


def source_label(source: Source | str | None) -> SourceBadge:
    value = source.value if isinstance(source, Source) else source
    if value == Source.LIVE.value:
        return LIVE_BADGE
    if value == Source.OFFLINE_CACHE.value:
        return CACHED_BADGE
    return NO_CACHE_BADGE


def day_label(index: int) -> str:
    """Relative name of the n-th forecast card."""
    if 0 <= index < len(DAY_LABELS):
        return DAY_LABELS[index]
    return f"Day {index + 1}"


class ThemeView(BaseModel):
    """Serialized theme."""
    name: str
    emoji: str
    label: str
    background: str


class SourceBadgeView(BaseModel):
    """Serialized provenance badge."""
    text: str
    color: str


class DayView(BaseModel):
    """One forecast card."""
    date: str
    day_label: str
    icon: str
    high: Optional[float] = None
    low: Optional[float] = None
    advice: List[str]
    all_clear: bool


class ForecastView(BaseModel):
    """Everything a UI needs to render the current forecast state."""
    city: Optional[str] = None
    source: Optional[str] = None
    source_badge: Optional[SourceBadgeView] = None
    average_temperature: Optional[float] = None
    theme: ThemeView
    days: List[DayView]
    error: Optional[RetrievalError] = None
    loading: bool = False
    empty_message: Optional[str] = None


def _day_view(index: int, day: ForecastDay) -> DayView:
    return DayView(
        date=day.date.isoformat(),
        day_label=day_label(index),
        icon=weather_icon(day.advice).value,
        high=day.high,
        low=day.low,
        advice=list(day.advice),
        all_clear=not day.advice,
    )


def build_forecast_view(
    result: Optional[ForecastResult],
    error: Optional[RetrievalError] = None,
    *,
    loading: bool = False,
    days_shown: int = DAYS_SHOWN,
) -> ForecastView:
    """Derive theme, icons, badge and empty-state text for `result`.

    Only the first `days_shown` days are presented, and the theme is chosen
    from the pooled average of exactly those days.
    """
    days = list(result.days[:days_shown]) if result else []
    avg = dominant_temperature(days)
    theme = temperature_theme(avg)

    empty_message = None
    if result is None:
        if error is None:
            empty_message = START_PROMPT
    elif not days:
        empty_message = NO_CACHE_PROMPT

    badge = source_label(result.source) if result else None
    return ForecastView(
        city=result.city if result else None,
        source=result.source.value if result else None,
        source_badge=SourceBadgeView(text=badge.text, color=badge.color) if badge else None,
        average_temperature=avg,
        theme=ThemeView(name=theme.name, emoji=theme.emoji, label=theme.label, background=theme.background),
        days=[_day_view(i, d) for i, d in enumerate(days)],
        error=error,
        loading=loading,
        empty_message=empty_message,
    )
