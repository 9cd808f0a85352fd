"""
First Come First Served (FCFS) scheduler.

The simplest scheduling policy: jobs run in the order they arrive, one at a
time, and a job is never interrupted once it starts.

Unlike a live queue, this is a pure function over the whole job list:

    jobs ──> stable sort by arrival ──> walk with a single server clock ──> results
                                                   │
                                                   └──> 3 events per job ──> stable sort ──> timeline

Ordering rules:
- Jobs with the same arrival_time keep the order they had in the input list
  (Python's sort is stable, and that stability is part of the contract)
- The server clock starts at the first arrival, not at 0
- Events at the same instant keep emission order, so a job's own
  arrival/start/completion stay causal, and across jobs arrival order wins

Downside of the policy: a long job blocks everything behind it.
This is called the "convoy effect".
"""

import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable

from models.enums import EventKind
from models.job import Job, SchedulingResult, TimelineEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Schedule:
    results: tuple[SchedulingResult, ...] = ()
    timeline: tuple[TimelineEvent, ...] = ()

    def result_for(self, job_id: int) -> SchedulingResult:
        for result in self.results:
            if result.job.id == job_id:
                return result
        raise KeyError(f"No scheduling result for job {job_id}")


def schedule(jobs: Iterable[Job]) -> Schedule:
    """
    Compute the FCFS schedule and event timeline for a set of jobs.

    Never mutates its input and returns fresh objects on every call, so it can
    be rerun whenever the job list changes and gives identical output for
    identical input.
    """
    jobs = list(jobs)
    for job in jobs:
        if not isinstance(job, Job):
            raise TypeError(f"schedule() expects Job instances, got {type(job).__name__}")

    if not jobs:
        return Schedule()

    ordered = sorted(jobs, key=attrgetter("arrival_time"))
    server_free_at = ordered[0].arrival_time

    results: list[SchedulingResult] = []
    events: list[TimelineEvent] = []

    for job in ordered:
        start = max(server_free_at, job.arrival_time)
        result = SchedulingResult(job=job, start_time=start, completion_time=start + job.service_time)
        results.append(result)

        events.append(TimelineEvent(job.arrival_time, EventKind.ARRIVAL, result))
        events.append(TimelineEvent(result.start_time, EventKind.START, result))
        events.append(TimelineEvent(result.completion_time, EventKind.COMPLETION, result))

        server_free_at = result.completion_time

    events.sort(key=attrgetter("time"))

    logger.debug(
        f"Scheduled {len(results)} jobs, {len(events)} events, "
        f"makespan ends at {server_free_at}"
    )
    return Schedule(results=tuple(results), timeline=tuple(events))
