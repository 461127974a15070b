"""FastAPI routes exposing the dashboard state as JSON."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from config import resolve_api_base_url, settings
from controller import DashboardController
from view import build_dashboard_view

logger = logging.getLogger(__name__)
router = APIRouter()

# This gets set by main.py after the controller is created
_controller: DashboardController | None = None


def set_controller(controller: DashboardController | None):
    global _controller
    _controller = controller


# ── Pydantic models ─────────────────────────────────────

class HealthStatus(BaseModel):
    status: str
    api_base_url: str
    ready: bool


def get_controller() -> DashboardController:
    if _controller is None:
        raise HTTPException(status_code=503, detail="Dashboard is not ready")
    return _controller


@router.get("/state")
async def get_state():
    """Current dashboard state together with its rendered view model."""
    state = get_controller().state
    return {
        "state": state.to_dict(),
        "view": build_dashboard_view(state),
    }


@router.get("/health", response_model=HealthStatus)
async def health():
    return HealthStatus(
        status="ok",
        api_base_url=resolve_api_base_url(settings),
        ready=_controller is not None,
    )
