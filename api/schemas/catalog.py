"""
Pydantic schemas for the catalog and cart endpoints.

These are NOT domain models; they define the HTTP API contract:
- CatalogItemResponse: one menu item / route
- CatalogResponse: the whole catalog grouped by category, plus its wording
- CartItemAdd: request body for adding an item to the cart
- CartResponse: the current cart with totals
"""

from pydantic import BaseModel, Field


class CatalogItemResponse(BaseModel):
    id: int
    name: str
    cost: float
    service_time: int
    category: str

    # Read straight from the CatalogItem dataclass attributes
    model_config = {"from_attributes": True}


class VocabularyResponse(BaseModel):
    job_noun: str
    owner_noun: str
    service_noun: str
    time_unit: str

    model_config = {"from_attributes": True}


class CatalogResponse(BaseModel):
    """Response body for GET /{variant}/catalog."""

    variant: str
    vocabulary: VocabularyResponse
    categories: dict[str, list[CatalogItemResponse]]


class CartItemAdd(BaseModel):
    """Request body for POST /{variant}/cart/items."""

    item_id: int = Field(..., ge=1, examples=[4])


class CartResponse(BaseModel):
    """Response body for the /{variant}/cart endpoints."""

    items: list[CatalogItemResponse]
    total_cost: float
    service_time: int        # what the job's service time would be if submitted now
    next_arrival_time: int   # session clock
