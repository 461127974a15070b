"""FastAPI application — entry point for the tutorial dashboard."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from api_client import get_tutorial_client
from config import resolve_api_base_url, settings
from controller import DashboardController
from dashboard import dashboard_router
from routes import router, set_controller

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Tutorial Dashboard - Starting Up")
    logger.info("Tutorial API: %s", resolve_api_base_url(settings))

    controller = DashboardController(get_tutorial_client())
    set_controller(controller)

    if settings.load_on_startup:
        await controller.load()
        if controller.state.error:
            logger.warning("Initial load failed: %s", controller.state.error)
        else:
            logger.info("Loaded %d tutorials", len(controller.state.tutorials))

    logger.info("Tutorial Dashboard is running on http://%s:%d", settings.host, settings.port)
    yield

    set_controller(None)
    logger.info("Shutdown complete")


app = FastAPI(
    title="Tutorial Dashboard",
    description="CRUD dashboard for tutorial records served by a REST backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(dashboard_router)
app.include_router(router)

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=True)
