"""HTTP API exposing the forecast presentation state."""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from .config import settings
from .controller import build_controller
from .domain import RequestMode
from .presentation import ForecastView
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="forecast_client/api")

router = APIRouter()
CONTROLLER = build_controller(settings)


class RetrieveRequest(BaseModel):
    """Incoming retrieval request; omitted fields keep the current city and mode."""
    city: Optional[str] = None
    offline_mode: Optional[bool] = None


class ModeRequest(BaseModel):
    """Toggle between online and offline requests."""
    offline_mode: bool


def _resolve_city(requested: Optional[str]) -> str:
    """Use the requested city, else the last one asked for, else the configured default."""
    city = (requested or "").strip()
    if city:
        return city
    return CONTROLLER.state.city or settings.default_city


@router.get("/forecast", response_model=ForecastView)
def get_forecast_view():
    """Return the current forecast view without contacting the service."""
    return CONTROLLER.view()


@router.post("/forecast/retrieve", response_model=ForecastView)
def retrieve_forecast(req: RetrieveRequest):
    """Run one retrieval and return the updated view.

    Fetch failures come back in `error`; the status is still 200.
    """
    city = _resolve_city(req.city)
    mode = RequestMode.from_offline_flag(req.offline_mode) if req.offline_mode is not None else None
    logger.info(f"Retrieving forecast for {city!r} (mode={(mode or CONTROLLER.state.mode).value})")
    CONTROLLER.retrieve(city, mode)
    return CONTROLLER.view()


@router.put("/forecast/mode", response_model=ForecastView)
def set_mode(req: ModeRequest):
    """Switch request mode and return the view."""
    CONTROLLER.set_mode(RequestMode.from_offline_flag(req.offline_mode))
    return CONTROLLER.view()
