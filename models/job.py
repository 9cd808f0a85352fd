"""
Core data entities for the FCFS simulation.

These are plain frozen dataclasses, not ORM models. Nothing here is persisted:
the job list lives in memory for as long as a simulation session does.

- Job: one arrival (an order or a booking), immutable once created
- SchedulingResult: the scheduler's verdict for one job
- TimelineEvent: one of the three instants (arrival/start/completion) of a job
- Statistics: aggregate metrics over a set of results

Key design decisions:
- Job validates itself in __post_init__, so a negative or non-integer time
  can never reach the scheduler
- Results and events hold a reference to their Job instead of copying fields;
  the job list stays the single source of truth
"""

from dataclasses import dataclass
from typing import Optional

from catalog.base import CatalogItem, Vocabulary
from models.enums import EventKind


class InvalidJobError(ValueError):
    """Raised when a Job is constructed with fields outside its contract."""


def _require_time(name: str, value) -> None:
    # bool is an int subclass; True/False as a time is always a caller bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidJobError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidJobError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class Job:
    id: int
    label: str
    arrival_time: int
    service_time: int
    items: tuple[CatalogItem, ...] = ()

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidJobError(f"id must be an integer, got {self.id!r}")
        if not isinstance(self.label, str):
            raise InvalidJobError(f"label must be a string, got {self.label!r}")
        _require_time("arrival_time", self.arrival_time)
        _require_time("service_time", self.service_time)
        # Accept any iterable of items but store an immutable tuple
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class SchedulingResult:
    job: Job
    start_time: int
    completion_time: int

    @property
    def arrival_time(self) -> int:
        return self.job.arrival_time

    @property
    def service_time(self) -> int:
        return self.job.service_time

    @property
    def wait_time(self) -> int:
        return self.start_time - self.job.arrival_time

    @property
    def turnaround_time(self) -> int:
        return self.completion_time - self.job.arrival_time

    @property
    def response_time(self) -> int:
        # Single burst, never interrupted: first response is the start
        return self.wait_time


@dataclass(frozen=True)
class TimelineEvent:
    time: int
    kind: EventKind
    result: SchedulingResult

    @property
    def job(self) -> Job:
        return self.result.job

    def describe(self, vocabulary: Optional[Vocabulary] = None) -> str:
        """Human-readable line for the playback panel."""
        vocab = vocabulary or Vocabulary()
        job = self.job
        unit = vocab.time_unit
        head = f"{vocab.job_noun} #{job.id}"

        if self.kind == EventKind.ARRIVAL:
            return (
                f"{head} from {job.label} arrives "
                f"({len(job.items)} items, {job.service_time} {unit} {vocab.service_noun} time)"
            )
        if self.kind == EventKind.START:
            wait = self.result.wait_time
            if wait > 0:
                return f"{head} starts processing after waiting {wait} {unit}"
            return f"{head} starts processing immediately (no wait time)"
        return f"{head} completed (turnaround time: {self.result.turnaround_time} {unit})"


@dataclass(frozen=True)
class Statistics:
    avg_wait_time: float
    avg_turnaround_time: float
    min_wait_time: int
    max_wait_time: int
    min_turnaround_time: int
    max_turnaround_time: int
    job_count: int
    total_time: int
