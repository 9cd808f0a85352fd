"""
Pydantic schemas for the /{variant}/simulation and /{variant}/playback endpoints.

SchedulingResultResponse: one row of the results table / Gantt chart.
TimelineEventResponse: one playback step, with its rendered description.
StatisticsResponse: AWT/ATT and friends.
PlaybackState: everything the animation panel needs for the current step.
"""

from typing import Optional

from pydantic import BaseModel, Field

from catalog.base import Vocabulary
from models.job import SchedulingResult, Statistics, TimelineEvent
from scheduler.player import classify


class SchedulingResultResponse(BaseModel):
    job_id: int
    label: str
    arrival_time: int
    service_time: int
    start_time: int
    completion_time: int
    wait_time: int
    turnaround_time: int
    response_time: int

    @classmethod
    def from_result(cls, result: SchedulingResult) -> "SchedulingResultResponse":
        return cls(
            job_id=result.job.id,
            label=result.job.label,
            arrival_time=result.arrival_time,
            service_time=result.service_time,
            start_time=result.start_time,
            completion_time=result.completion_time,
            wait_time=result.wait_time,
            turnaround_time=result.turnaround_time,
            response_time=result.response_time,
        )


class TimelineEventResponse(BaseModel):
    step: int
    time: int
    kind: str
    job_id: int
    description: str

    @classmethod
    def from_event(cls, step: int, event: TimelineEvent, vocabulary: Vocabulary) -> "TimelineEventResponse":
        return cls(
            step=step,
            time=event.time,
            kind=event.kind.value,
            job_id=event.job.id,
            description=event.describe(vocabulary),
        )


class SimulationResponse(BaseModel):
    """Response body for GET /{variant}/simulation."""

    results: list[SchedulingResultResponse]
    timeline: list[TimelineEventResponse]


class StatisticsResponse(BaseModel):
    """Response body for GET /{variant}/simulation/stats (null when there are no jobs)."""

    avg_wait_time: float
    avg_turnaround_time: float
    min_wait_time: int
    max_wait_time: int
    min_turnaround_time: int
    max_turnaround_time: int
    job_count: int
    total_time: int

    model_config = {"from_attributes": True}

    @classmethod
    def from_statistics(cls, stats: Optional[Statistics]) -> Optional["StatisticsResponse"]:
        return cls.model_validate(stats) if stats is not None else None


class QueueEntry(BaseModel):
    job_id: int
    label: str
    status: str
    progress: float    # 0.0 .. 1.0, only moves while PROCESSING
    arrival_time: int
    start_time: int
    completion_time: int

    @classmethod
    def from_result(cls, result: SchedulingResult, sim_time: int) -> "QueueEntry":
        classification = classify(result, sim_time)
        return cls(
            job_id=result.job.id,
            label=result.job.label,
            status=classification.status.value,
            progress=classification.progress,
            arrival_time=result.arrival_time,
            start_time=result.start_time,
            completion_time=result.completion_time,
        )


class PlaybackState(BaseModel):
    """Response body for every /{variant}/playback endpoint."""

    current_step: int
    total_steps: int
    current_time: int
    playing: bool
    interval: float    # seconds between auto-advanced steps
    speed: float       # 1.0 = configured interval
    progress: float
    current_event: Optional[TimelineEventResponse] = None
    waiting: list[QueueEntry]
    processing: list[QueueEntry]
    completed: list[QueueEntry]


class PlaybackSeek(BaseModel):
    """Request body for PUT /{variant}/playback/step."""

    step: int = Field(..., ge=0)


class PlaybackSpeed(BaseModel):
    """Request body for PUT /{variant}/playback/speed."""

    speed: float = Field(..., gt=0, le=16, examples=[2.0])
