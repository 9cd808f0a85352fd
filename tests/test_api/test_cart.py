"""
API integration tests for the catalog and cart endpoints.

These use the test HTTP client from conftest.py, which talks to
the FastAPI app in-process with fresh in-memory sessions.
"""

import pytest


@pytest.mark.asyncio
async def test_restaurant_catalog_grouped(client):
    response = await client.get("/restaurant/catalog")

    assert response.status_code == 200
    data = response.json()
    assert data["variant"] == "restaurant"
    assert data["vocabulary"]["job_noun"] == "Order"
    assert list(data["categories"]) == ["Appetizers", "Main Courses", "Desserts", "Beverages"]
    assert data["categories"]["Beverages"][0]["name"] == "Coffee"


@pytest.mark.asyncio
async def test_railway_catalog(client):
    response = await client.get("/railway/catalog")

    assert response.status_code == 200
    assert response.json()["vocabulary"]["job_noun"] == "Booking"


@pytest.mark.asyncio
async def test_unknown_variant_is_422(client):
    response = await client.get("/airline/catalog")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_add_items_to_cart(client):
    await client.post("/restaurant/cart/items", json={"item_id": 4})
    response = await client.post("/restaurant/cart/items", json={"item_id": 11})

    assert response.status_code == 201
    data = response.json()
    assert [i["name"] for i in data["items"]] == ["Grilled Chicken", "Coffee"]
    assert data["total_cost"] == 22.98
    assert data["service_time"] == 16
    assert data["next_arrival_time"] == 0


@pytest.mark.asyncio
async def test_add_unknown_item_is_404(client):
    response = await client.post("/restaurant/cart/items", json={"item_id": 999})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_carts_are_separate_per_demo(client):
    await client.post("/restaurant/cart/items", json={"item_id": 1})

    response = await client.get("/railway/cart")
    assert response.json()["items"] == []


@pytest.mark.asyncio
async def test_remove_cart_item(client):
    await client.post("/restaurant/cart/items", json={"item_id": 1})
    await client.post("/restaurant/cart/items", json={"item_id": 2})

    response = await client.delete("/restaurant/cart/items/0")
    assert response.status_code == 200
    assert [i["id"] for i in response.json()["items"]] == [2]

    response = await client.delete("/restaurant/cart/items/7")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_clear_cart(client):
    await client.post("/railway/cart/items", json={"item_id": 3})

    response = await client.delete("/railway/cart")
    assert response.status_code == 200
    assert response.json()["items"] == []
    assert response.json()["service_time"] == 0
