"""
Job endpoints.

POST   /{variant}/jobs/        → Submit the cart as a job (arrives at the session clock)
POST   /{variant}/jobs/direct  → Submit a job with explicit arrival/service times
GET    /{variant}/jobs/        → List jobs in insertion order
DELETE /{variant}/jobs/        → Clear every job and restart the simulation

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Call the session
- Return the response

Every successful submission recomputes the schedule and rewinds playback.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_session
from api.schemas.job import JobCreate, JobListResponse, JobResponse, JobSubmit
from models.job import InvalidJobError
from simulation.session import SimulationSession, SubmissionError

router = APIRouter(prefix="/{variant}/jobs", tags=["jobs"])


@router.post("/", response_model=JobResponse, status_code=201)
async def submit_cart(
    job_in: JobSubmit,
    session: SimulationSession = Depends(get_session),
) -> JobResponse:
    """
    Submit the current cart.

    Service time = sum of the items' service times.
    Arrival time = the session clock, which then moves forward by a small
    random gap so consecutive submissions arrive one after another.
    """
    try:
        job = session.submit(job_in.label)
    except SubmissionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return JobResponse.model_validate(job)


@router.post("/direct", response_model=JobResponse, status_code=201)
async def create_job(
    job_in: JobCreate,
    session: SimulationSession = Depends(get_session),
) -> JobResponse:
    try:
        job = session.add_job(job_in.label, job_in.arrival_time, job_in.service_time)
    except InvalidJobError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return JobResponse.model_validate(job)


@router.get("/", response_model=JobListResponse)
async def list_jobs(
    session: SimulationSession = Depends(get_session),
) -> JobListResponse:
    jobs = session.jobs
    return JobListResponse(
        jobs=[JobResponse.model_validate(j) for j in jobs],
        total=len(jobs),
    )


@router.delete("/", status_code=204)
async def clear_jobs(
    session: SimulationSession = Depends(get_session),
) -> None:
    """Reset the simulation. Jobs are not persisted anywhere, so they are gone."""
    session.clear()
