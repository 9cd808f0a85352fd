"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Creates one in-memory simulation session per demo (restaurant, railway)
3. Registers all routers (health, catalog, jobs, simulation, news)
4. Runs shutdown logic (stop any playback timers)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog.registry import available_variants, get_catalog
from config.settings import settings
from simulation.session import SimulationSession
from api.routers import catalog, health, jobs, news, simulation

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: nothing to connect to; sessions already exist.
    Shutdown: stop auto-play timers so no daemon thread outlives the app.
    """
    logger.info(f"API ready, demos: {[v.value for v in app.state.sessions]}")

    yield  # app is running and serving requests between startup and shutdown

    for session in app.state.sessions.values():
        session.advancer.stop()
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="FCFS Order Simulator",
        description="Restaurant orders and railway bookings served First-Come-First-Served, with stepped playback",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Created here rather than in lifespan so test clients (which skip
    # lifespan) see the same state
    app.state.sessions = {
        variant: SimulationSession(get_catalog(variant)) for variant in available_variants()
    }

    # Order only matters for readability; no two routers share a path
    app.include_router(health.router)
    app.include_router(news.router)
    app.include_router(catalog.router)
    app.include_router(jobs.router)
    app.include_router(simulation.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
