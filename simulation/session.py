"""
Simulation session — the caller-side store that feeds the scheduler.

One session backs one demo (restaurant or railway). It holds:
- the cart: catalog items picked but not yet submitted
- the job list: the single source of truth for the simulation
- derived artifacts: schedule, statistics, timeline player, auto-advancer

Lifecycle of a job:
    add_to_cart() x N ──> submit(label) ──> Job(arrival = session clock) ──> reschedule
                                                  │
                                                  └──> clock += random gap (1-3 by default)

Every change to the job list recomputes the whole schedule (no incremental
update; job counts are small) and rewinds playback, exactly like a fresh run.
"""

import logging
import random
import threading
from typing import Optional

from catalog.base import AbstractCatalog, CatalogItem
from config.settings import settings
from models.job import Job, SchedulingResult, Statistics, TimelineEvent
from scheduler.fcfs import Schedule, schedule
from scheduler.playback import AutoAdvancer
from scheduler.player import QueueSnapshot, TimelinePlayer, partition
from scheduler.statistics import summarize

logger = logging.getLogger(__name__)


class SubmissionError(ValueError):
    """Raised when a cart cannot be turned into a job (no label, empty cart)."""


class SimulationSession:

    def __init__(
        self,
        catalog: AbstractCatalog,
        arrival_gap: Optional[tuple[int, int]] = None,
        rng: Optional[random.Random] = None,
        playback_interval: Optional[float] = None,
        timer_factory=None,
    ):
        gap_min, gap_max = arrival_gap or settings.arrival_gap
        if gap_min < 0 or gap_max < gap_min:
            raise ValueError(f"Invalid arrival gap range: ({gap_min}, {gap_max})")

        self.catalog = catalog
        self._gap = (gap_min, gap_max)
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

        self._cart: list[CatalogItem] = []
        self._jobs: list[Job] = []
        self._next_id = 1
        self._clock = 0

        self._schedule = Schedule()
        self._statistics: Optional[Statistics] = None
        self.player = TimelinePlayer()

        self._base_interval = playback_interval or settings.PLAYBACK_INTERVAL
        advancer_kwargs = {}
        if timer_factory is not None:
            advancer_kwargs["timer_factory"] = timer_factory
        self.advancer = AutoAdvancer(
            self.player,
            self._base_interval,
            **advancer_kwargs,
        )

    # ── Cart ────────────────────────────────────────────────────

    @property
    def cart(self) -> list[CatalogItem]:
        return list(self._cart)

    @property
    def cart_total(self) -> float:
        return round(sum(item.cost for item in self._cart), 2)

    @property
    def cart_service_time(self) -> int:
        return sum(item.service_time for item in self._cart)

    def add_to_cart(self, item_id: int) -> CatalogItem:
        """Raises KeyError if the item is not in the catalog."""
        item = self.catalog.get(item_id)
        with self._lock:
            self._cart.append(item)
        return item

    def remove_from_cart(self, index: int) -> CatalogItem:
        """Remove by cart position. Raises IndexError for a bad position."""
        with self._lock:
            if not 0 <= index < len(self._cart):
                raise IndexError(f"No cart entry at position {index}")
            return self._cart.pop(index)

    def clear_cart(self) -> None:
        with self._lock:
            self._cart.clear()

    # ── Jobs ────────────────────────────────────────────────────

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs)

    @property
    def clock(self) -> int:
        """Arrival time the next submitted cart will get."""
        return self._clock

    def submit(self, label: str) -> Job:
        """Turn the cart into a job arriving at the session clock."""
        label = (label or "").strip()
        with self._lock:
            if not label:
                raise SubmissionError(f"A {self.catalog.vocabulary.owner_noun} name is required")
            if not self._cart:
                raise SubmissionError("Cannot submit an empty cart")

            job = Job(
                id=self._issue_id(),
                label=label,
                arrival_time=self._clock,
                service_time=self.cart_service_time,
                items=tuple(self._cart),
            )
            self._cart.clear()
            self._clock += self._next_gap()
            self._append(job)
        return job

    def add_job(self, label: str, arrival_time: int, service_time: int) -> Job:
        """
        Submit a job directly with explicit times, bypassing the cart.

        Raises InvalidJobError for negative or non-integer times.
        """
        with self._lock:
            job = Job(
                id=self._next_id,
                label=label,
                arrival_time=arrival_time,
                service_time=service_time,
            )
            self._next_id += 1
            self._clock = max(self._clock, arrival_time + self._next_gap())
            self._append(job)
        return job

    def clear(self) -> None:
        """Throw away every job and start a fresh simulation."""
        with self._lock:
            self._cart.clear()
            self._jobs.clear()
            self._next_id = 1
            self._clock = 0
            self._recompute()
        logger.info(f"{self.catalog.variant.value} simulation cleared")

    # ── Derived artifacts ───────────────────────────────────────

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    @property
    def results(self) -> tuple[SchedulingResult, ...]:
        return self._schedule.results

    @property
    def timeline(self) -> tuple[TimelineEvent, ...]:
        return self._schedule.timeline

    @property
    def statistics(self) -> Optional[Statistics]:
        return self._statistics

    def queues(self) -> QueueSnapshot:
        return partition(self._schedule.results, self.player.snapshot().time)

    # ── Playback speed ──────────────────────────────────────────

    @property
    def speed(self) -> float:
        """Playback rate relative to the configured interval (1.0 = normal)."""
        return self._base_interval / self.advancer.interval

    def set_speed(self, speed: float) -> None:
        """2.0 plays twice as fast, 0.5 half as fast. Raises ValueError unless speed > 0."""
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        self.advancer.set_interval(self._base_interval / speed)

    # ── Internals ───────────────────────────────────────────────

    def _issue_id(self) -> int:
        job_id = self._next_id
        self._next_id += 1
        return job_id

    def _next_gap(self) -> int:
        return self._rng.randint(*self._gap)

    def _append(self, job: Job) -> None:
        self._jobs.append(job)
        logger.info(
            f"{self.catalog.vocabulary.job_noun} #{job.id} from {job.label} "
            f"arrives at {job.arrival_time} (service {job.service_time})"
        )
        self._recompute()

    def _recompute(self) -> None:
        # Stop first so no pending advance lands on the new timeline
        self.advancer.stop()
        self._schedule = schedule(self._jobs)
        self._statistics = summarize(self._schedule.results)
        self.player.load(self._schedule.timeline)
