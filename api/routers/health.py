"""
Health check endpoint.

There is no database or broker to ping; the service is healthy if it can
answer and every demo has a session.
"""

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    sessions = request.app.state.sessions
    return {
        "status": "healthy",
        "variants": {
            variant.value: len(session.jobs) for variant, session in sessions.items()
        },
    }
