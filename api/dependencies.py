"""
FastAPI dependency injection.

How this works:
- An endpoint declares `session: SimulationSession = Depends(get_session)`
- FastAPI resolves the `{variant}` path parameter, then hands the endpoint
  the in-memory session for that demo
- Tests swap any of these out through app.dependency_overrides

Sessions are created once per app in create_app() and stored on app.state.
"""

from typing import AsyncGenerator

import httpx
from fastapi import Request

from catalog.base import AbstractCatalog
from models.enums import AppVariant
from news.client import NewsClient
from simulation.session import SimulationSession


def get_session(variant: AppVariant, request: Request) -> SimulationSession:
    """Returns the simulation session for the demo named in the URL."""
    return request.app.state.sessions[variant]


def get_catalog_for(variant: AppVariant, request: Request) -> AbstractCatalog:
    return request.app.state.sessions[variant].catalog


async def get_news_client() -> AsyncGenerator[NewsClient, None]:
    """Yields a news client backed by a fresh HTTP client, closed when the request ends."""
    async with httpx.AsyncClient() as http_client:
        yield NewsClient(http_client)
