"""Stateful facade over the retriever: mode flag, loading flag, last result and last error."""
from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Optional

from forecast_client.cache_store import build_cache_store
from forecast_client.config import Settings, settings as default_settings
from forecast_client.data_sources import build_data_source
from forecast_client.domain import ForecastResult, RequestMode, RetrievalError, RetrievalOutcome
from forecast_client.presentation import ForecastView, build_forecast_view
from forecast_client.retriever import ForecastRetriever
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="controller")


@dataclass(frozen=True)
class ForecastState:
    """Snapshot of what the UI should show."""
    mode: RequestMode = RequestMode.ONLINE
    city: Optional[str] = None
    loading: bool = False
    last_result: Optional[ForecastResult] = None
    last_error: Optional[RetrievalError] = None


class ForecastController:
    """Own the presentation state and apply retrievals to it.

    Retrievals may overlap when called from several threads. Each one is
    applied as soon as it completes, so the state reflects whichever response
    arrived last, not whichever request started last.
    """

    def __init__(
        self,
        retriever: ForecastRetriever,
        *,
        mode: RequestMode = RequestMode.ONLINE,
        days_shown: int = 3,
    ) -> None:
        self.retriever = retriever
        self.days_shown = days_shown
        self._lock = threading.Lock()
        self._in_flight = 0
        self._state = ForecastState(mode=mode, last_result=self._initial_result())

    def _initial_result(self) -> Optional[ForecastResult]:
        """Show the cached forecast (if any) before the first request."""
        cached = self.retriever.read_cached()
        if cached is not None:
            logger.debug("Loaded cached forecast at startup", extra={"cached_city": cached.city})
        return cached

    @property
    def state(self) -> ForecastState:
        with self._lock:
            return self._state

    def set_mode(self, mode: RequestMode) -> ForecastState:
        """Switch between online and offline requests."""
        with self._lock:
            self._state = replace(self._state, mode=mode)
            return self._state

    def retrieve(self, city: str, mode: RequestMode | None = None) -> ForecastState:
        """Run one retrieval and fold its outcome into the state.

        `mode` defaults to the controller's current mode.
        """
        with self._lock:
            mode = mode or self._state.mode
            self._in_flight += 1
            self._state = replace(self._state, city=city, loading=True, last_error=None)

        outcome: RetrievalOutcome | None = None
        try:
            outcome = self.retriever.retrieve(city, mode)
        finally:
            with self._lock:
                self._in_flight -= 1
                updates = {"loading": self._in_flight > 0}
                if outcome is not None:
                    updates.update(last_result=outcome.result, last_error=outcome.error)
                self._state = replace(self._state, **updates)
                state = self._state

        if outcome.error is not None:
            logger.warning(
                "Retrieval finished with error",
                extra={"city": city, "kind": outcome.error.kind.value},
            )
        return state

    def view(self) -> ForecastView:
        """Render the current state into display-ready values."""
        state = self.state
        return build_forecast_view(
            state.last_result,
            state.last_error,
            loading=state.loading,
            days_shown=self.days_shown,
        )


def build_controller(settings: Settings | None = None) -> ForecastController:
    """Wire a controller with the configured data source and cache store."""
    settings = settings or default_settings
    retriever = ForecastRetriever(build_data_source(settings), build_cache_store(settings))
    return ForecastController(retriever, days_shown=settings.days_shown)


def main():
    """Manual helper: fetch the default city once and print the derived view."""
    from utils.logging_utils import setup_logging

    setup_logging(level="INFO", job_name="forecast_cli")
    controller = build_controller()
    controller.retrieve(default_settings.default_city)
    view = controller.view()
    print(f"{view.theme.emoji} {view.city} {view.source_badge.text if view.source_badge else ''}")
    if view.error:
        print(f"⚠️ {view.error.message}")
    if view.empty_message:
        print(view.empty_message)
    for day in view.days:
        print(f"  {day.day_label:<10} {day.date} {day.icon}  high {day.high}°C  low {day.low}°C")
        for line in day.advice or ["✓ All clear!"]:
            print(f"      {line}")


if __name__ == "__main__":
    main()
