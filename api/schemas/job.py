"""
Pydantic schemas for the /{variant}/jobs endpoints.

- JobSubmit: submit the current cart as a job (only a name is needed)
- JobCreate: submit a job directly with explicit times (no cart)
- JobResponse: one job as stored in the session
- JobListResponse: every job in insertion order

FastAPI validates incoming data against these automatically.
If someone sends arrival_time=-1, FastAPI returns a 422 error before our code even runs.
"""

from pydantic import BaseModel, Field

from api.schemas.catalog import CatalogItemResponse


class JobSubmit(BaseModel):
    """Request body for POST /{variant}/jobs/."""

    label: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Customer / passenger name",
        examples=["Ana"],
    )


class JobCreate(BaseModel):
    """Request body for POST /{variant}/jobs/direct."""

    label: str = Field(..., min_length=1, max_length=255)
    arrival_time: int = Field(..., ge=0, description="When the job becomes eligible for service")
    service_time: int = Field(..., ge=0, description="Time units the job occupies the server (0 allowed)")


class JobResponse(BaseModel):
    id: int
    label: str
    arrival_time: int
    service_time: int
    items: list[CatalogItemResponse] = []

    model_config = {"from_attributes": True}


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
    total: int
