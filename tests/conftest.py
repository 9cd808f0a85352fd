"""
Shared test fixtures.

These replace real infrastructure with lightweight in-memory alternatives:
- threading.Timer → FakeTimer (fires only when a test says so, no sleeping)
- random arrival gaps → a fixed gap of 2, so arrival times are predictable
- HTTP server → httpx.AsyncClient with ASGI transport (no network)

This means tests:
- Run in milliseconds
- Are deterministic (no timer races, no randomness)
- Are fully isolated (each test gets a fresh app and fresh sessions)
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from api.main import create_app
from catalog.registry import available_variants, get_catalog
from models.job import Job
from simulation.session import SimulationSession


class FakeTimer:
    """Stand-in for threading.Timer that only fires when fire() is called."""

    def __init__(self, interval, function, args=()):
        self.interval = interval
        self.function = function
        self.args = args
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        # Runs even if cancelled: models a callback that was already in flight
        self.function(*self.args)


class FakeTimerFactory:
    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, interval, function, args=()):
        timer = FakeTimer(interval, function, args=args)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if t.started and not t.cancelled]

    def fire_next(self) -> None:
        pending = self.pending
        assert pending, "no timer pending"
        pending[0].cancelled = True  # one-shot
        pending[0].fire()


@pytest.fixture
def timers():
    return FakeTimerFactory()


@pytest.fixture
def make_job():
    """Factory for jobs with sensible defaults, ids in creation order."""
    counter = {"next": 1}

    def _make(arrival_time: int, service_time: int, label: str = None, job_id: int = None) -> Job:
        if job_id is None:
            job_id = counter["next"]
        counter["next"] = max(counter["next"], job_id) + 1
        return Job(
            id=job_id,
            label=label or f"customer-{job_id}",
            arrival_time=arrival_time,
            service_time=service_time,
        )

    return _make


@pytest.fixture
def app(timers):
    app = create_app()
    app.state.sessions = {
        variant: SimulationSession(
            get_catalog(variant),
            arrival_gap=(2, 2),
            playback_interval=1.0,
            timer_factory=timers,
        )
        for variant in available_variants()
    }
    return app


@pytest_asyncio.fixture
async def client(app):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    ASGITransport means requests go directly to the app in-process,
    no HTTP server or network involved.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
