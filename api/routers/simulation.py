"""
Simulation and playback endpoints.

GET  /{variant}/simulation          → Per-job results + full described timeline
GET  /{variant}/simulation/stats    → AWT/ATT/min/max/total (null with no jobs)
GET  /{variant}/playback            → Cursor, current event and the three queues
POST /{variant}/playback/step       → Advance one event (stops at the end)
PUT  /{variant}/playback/step       → Jump to a given event
POST /{variant}/playback/reset      → Stop and rewind to the first event
POST /{variant}/playback/play       → Start auto-advancing on a timer
POST /{variant}/playback/pause      → Stop auto-advancing
PUT  /{variant}/playback/speed      → Change the auto-advance rate (2.0 = twice as fast)

Manual step/seek calls pause auto-play first, so a pending timer never
lands on top of a user action.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_session
from api.schemas.simulation import (
    PlaybackSeek,
    PlaybackSpeed,
    PlaybackState,
    QueueEntry,
    SchedulingResultResponse,
    SimulationResponse,
    StatisticsResponse,
    TimelineEventResponse,
)
from scheduler.player import partition
from simulation.session import SimulationSession

router = APIRouter(prefix="/{variant}", tags=["simulation"])


def _playback_state(session: SimulationSession) -> PlaybackState:
    # One read of the cursor and one of the schedule; a timer tick landing
    # mid-build must not mix two steps into the same response
    snap = session.player.snapshot()
    results = session.schedule.results
    sim_time = snap.time
    queues = partition(results, sim_time)
    vocabulary = session.catalog.vocabulary

    return PlaybackState(
        current_step=snap.step,
        total_steps=snap.total_steps,
        current_time=sim_time,
        playing=session.advancer.playing,
        interval=session.advancer.interval,
        speed=session.speed,
        progress=snap.progress,
        current_event=(
            TimelineEventResponse.from_event(snap.step, snap.event, vocabulary)
            if snap.event is not None else None
        ),
        waiting=[QueueEntry.from_result(r, sim_time) for r in queues.waiting],
        processing=[QueueEntry.from_result(r, sim_time) for r in queues.processing],
        completed=[QueueEntry.from_result(r, sim_time) for r in queues.completed],
    )


@router.get("/simulation", response_model=SimulationResponse)
async def get_simulation(
    session: SimulationSession = Depends(get_session),
) -> SimulationResponse:
    vocabulary = session.catalog.vocabulary
    current = session.schedule
    return SimulationResponse(
        results=[SchedulingResultResponse.from_result(r) for r in current.results],
        timeline=[
            TimelineEventResponse.from_event(i, event, vocabulary)
            for i, event in enumerate(current.timeline)
        ],
    )


@router.get("/simulation/stats", response_model=Optional[StatisticsResponse])
async def get_statistics(
    session: SimulationSession = Depends(get_session),
) -> Optional[StatisticsResponse]:
    return StatisticsResponse.from_statistics(session.statistics)


@router.get("/playback", response_model=PlaybackState)
async def get_playback(
    session: SimulationSession = Depends(get_session),
) -> PlaybackState:
    return _playback_state(session)


@router.post("/playback/step", response_model=PlaybackState)
async def step_playback(
    session: SimulationSession = Depends(get_session),
) -> PlaybackState:
    session.advancer.stop()
    session.player.step()
    return _playback_state(session)


@router.put("/playback/step", response_model=PlaybackState)
async def seek_playback(
    seek: PlaybackSeek,
    session: SimulationSession = Depends(get_session),
) -> PlaybackState:
    session.advancer.stop()
    try:
        session.player.set_step(seek.step)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _playback_state(session)


@router.post("/playback/reset", response_model=PlaybackState)
async def reset_playback(
    session: SimulationSession = Depends(get_session),
) -> PlaybackState:
    session.advancer.reset()
    return _playback_state(session)


@router.post("/playback/play", response_model=PlaybackState)
async def play(
    session: SimulationSession = Depends(get_session),
) -> PlaybackState:
    if session.player.total_steps == 0:
        raise HTTPException(status_code=409, detail="Nothing to play: no jobs submitted")
    session.advancer.start()
    return _playback_state(session)


@router.post("/playback/pause", response_model=PlaybackState)
async def pause(
    session: SimulationSession = Depends(get_session),
) -> PlaybackState:
    session.advancer.stop()
    return _playback_state(session)


@router.put("/playback/speed", response_model=PlaybackState)
async def set_speed(
    body: PlaybackSpeed,
    session: SimulationSession = Depends(get_session),
) -> PlaybackState:
    session.set_speed(body.speed)
    return _playback_state(session)
