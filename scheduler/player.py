"""
Timeline player and job status classifier.

The player is a cursor over the schedule's timeline. The UI shows one event
at a time; "current simulated time" is the time of the event under the cursor.

Job status is never stored. It is recomputed from (result, current time):

    sim_time < start                → WAITING
    start <= sim_time < completion  → PROCESSING
    sim_time >= completion          → COMPLETED

A zero-length job has an empty [start, completion) interval, so it goes
straight from WAITING to COMPLETED and progress never divides by zero.

Epochs:
Every jump of the cursor that is not a plain step (reset, set_step, load)
bumps `epoch`. An auto-advance scheduled before the jump carries the old
epoch, and step(epoch=old) is then a no-op. This is how a stop/reset
cancels an advance that was already in flight.
"""

import threading
from dataclasses import dataclass, field
from typing import Optional, Sequence

from models.enums import JobStatus
from models.job import SchedulingResult, TimelineEvent


@dataclass(frozen=True)
class Classification:
    status: JobStatus
    progress: float  # 0.0 .. 1.0


@dataclass(frozen=True)
class QueueSnapshot:
    waiting: list[SchedulingResult] = field(default_factory=list)
    processing: list[SchedulingResult] = field(default_factory=list)
    completed: list[SchedulingResult] = field(default_factory=list)


@dataclass(frozen=True)
class PlayerSnapshot:
    """Cursor state read in one go, so step/event/time always agree."""
    step: int
    total_steps: int
    event: Optional[TimelineEvent]

    @property
    def time(self) -> int:
        return self.event.time if self.event is not None else 0

    @property
    def progress(self) -> float:
        if not self.total_steps:
            return 0.0
        return (self.step + 1) / self.total_steps


def classify(result: SchedulingResult, sim_time: int) -> Classification:
    if sim_time < result.start_time:
        return Classification(JobStatus.WAITING, 0.0)
    if sim_time >= result.completion_time:
        return Classification(JobStatus.COMPLETED, 1.0)

    # Here start <= sim_time < completion, so service_time > 0
    progress = (sim_time - result.start_time) / result.service_time
    return Classification(JobStatus.PROCESSING, min(max(progress, 0.0), 1.0))


def partition(results: Sequence[SchedulingResult], sim_time: int) -> QueueSnapshot:
    """Bucket every job into exactly one of waiting/processing/completed."""
    snapshot = QueueSnapshot()
    buckets = {
        JobStatus.WAITING: snapshot.waiting,
        JobStatus.PROCESSING: snapshot.processing,
        JobStatus.COMPLETED: snapshot.completed,
    }
    for result in results:
        buckets[classify(result, sim_time).status].append(result)
    return snapshot


class TimelinePlayer:

    def __init__(self, timeline: Sequence[TimelineEvent] = ()):
        self._timeline: tuple[TimelineEvent, ...] = tuple(timeline)
        self._step = 0
        self._epoch = 0
        self._lock = threading.Lock()

    @property
    def timeline(self) -> tuple[TimelineEvent, ...]:
        return self._timeline

    @property
    def current_step(self) -> int:
        return self._step

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def total_steps(self) -> int:
        return len(self._timeline)

    @property
    def current_event(self) -> Optional[TimelineEvent]:
        return self.snapshot().event

    @property
    def current_time(self) -> int:
        return self.snapshot().time

    @property
    def at_end(self) -> bool:
        return self._step >= len(self._timeline) - 1

    @property
    def progress(self) -> float:
        """Fraction of the timeline played, counting the current step."""
        return self.snapshot().progress

    def snapshot(self) -> PlayerSnapshot:
        with self._lock:
            event = self._timeline[self._step] if self._timeline else None
            return PlayerSnapshot(step=self._step, total_steps=len(self._timeline), event=event)

    def step(self, epoch: Optional[int] = None) -> bool:
        """
        Advance one event. Returns True if the cursor moved.

        Stops at the last event (no wraparound). If `epoch` is given and the
        player has been reset/seeked/reloaded since, nothing happens.
        """
        with self._lock:
            if epoch is not None and epoch != self._epoch:
                return False
            if self._step >= len(self._timeline) - 1:
                return False
            self._step += 1
            return True

    def reset(self) -> None:
        with self._lock:
            self._step = 0
            self._epoch += 1

    def set_step(self, step: int) -> None:
        with self._lock:
            if not 0 <= step < max(len(self._timeline), 1):
                raise IndexError(
                    f"Step {step} out of range for a timeline of {len(self._timeline)} events"
                )
            self._step = step
            self._epoch += 1

    def load(self, timeline: Sequence[TimelineEvent]) -> None:
        """Swap in a freshly computed timeline and rewind."""
        with self._lock:
            self._timeline = tuple(timeline)
            self._step = 0
            self._epoch += 1
