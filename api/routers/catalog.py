"""
Catalog and cart endpoints.

GET    /{variant}/catalog             → Menu items / routes grouped by category
GET    /{variant}/cart                → Current cart with totals
POST   /{variant}/cart/items          → Add a catalog item to the cart
DELETE /{variant}/cart/items/{index}  → Remove the cart entry at a position
DELETE /{variant}/cart                → Empty the cart

The cart is session state, not a job yet. Nothing here touches the schedule;
only submitting the cart (POST /{variant}/jobs/) does.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_catalog_for, get_session
from api.schemas.catalog import (
    CartItemAdd,
    CartResponse,
    CatalogItemResponse,
    CatalogResponse,
    VocabularyResponse,
)
from catalog.base import AbstractCatalog
from simulation.session import SimulationSession

router = APIRouter(prefix="/{variant}", tags=["catalog"])


def _cart_response(session: SimulationSession) -> CartResponse:
    return CartResponse(
        items=[CatalogItemResponse.model_validate(item) for item in session.cart],
        total_cost=session.cart_total,
        service_time=session.cart_service_time,
        next_arrival_time=session.clock,
    )


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog(
    catalog: AbstractCatalog = Depends(get_catalog_for),
) -> CatalogResponse:
    return CatalogResponse(
        variant=catalog.variant.value,
        vocabulary=VocabularyResponse.model_validate(catalog.vocabulary),
        categories={
            category: [CatalogItemResponse.model_validate(item) for item in items]
            for category, items in catalog.grouped().items()
        },
    )


@router.get("/cart", response_model=CartResponse)
async def get_cart(
    session: SimulationSession = Depends(get_session),
) -> CartResponse:
    return _cart_response(session)


@router.post("/cart/items", response_model=CartResponse, status_code=201)
async def add_cart_item(
    item_in: CartItemAdd,
    session: SimulationSession = Depends(get_session),
) -> CartResponse:
    try:
        session.add_to_cart(item_in.item_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Catalog item {item_in.item_id} not found")
    return _cart_response(session)


@router.delete("/cart/items/{index}", response_model=CartResponse)
async def remove_cart_item(
    index: int,
    session: SimulationSession = Depends(get_session),
) -> CartResponse:
    try:
        session.remove_from_cart(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _cart_response(session)


@router.delete("/cart", response_model=CartResponse)
async def clear_cart(
    session: SimulationSession = Depends(get_session),
) -> CartResponse:
    session.clear_cart()
    return _cart_response(session)
