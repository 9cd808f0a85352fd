"""
API integration tests for /{variant}/jobs endpoints.

The sessions in conftest use a fixed arrival gap of 2, so the n-th
submitted cart arrives at 2 * (n - 1).
"""

import pytest


async def _submit(client, label, *item_ids, variant="restaurant"):
    for item_id in item_ids:
        await client.post(f"/{variant}/cart/items", json={"item_id": item_id})
    return await client.post(f"/{variant}/jobs/", json={"label": label})


@pytest.mark.asyncio
async def test_submit_cart(client):
    """POST /jobs/ turns the cart into a job arriving at the session clock."""
    response = await _submit(client, "Ana", 4, 11)

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 1
    assert data["label"] == "Ana"
    assert data["arrival_time"] == 0
    assert data["service_time"] == 16
    assert [i["id"] for i in data["items"]] == [4, 11]

    cart = (await client.get("/restaurant/cart")).json()
    assert cart["items"] == []
    assert cart["next_arrival_time"] == 2


@pytest.mark.asyncio
async def test_submit_empty_cart_is_409(client):
    response = await client.post("/restaurant/jobs/", json={"label": "Ana"})
    assert response.status_code == 409
    assert "empty cart" in response.json()["detail"]


@pytest.mark.asyncio
async def test_submit_without_label_is_422(client):
    await client.post("/restaurant/cart/items", json={"item_id": 1})
    response = await client.post("/restaurant/jobs/", json={"label": ""})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_submit_blank_label_is_409(client):
    await client.post("/railway/cart/items", json={"item_id": 1})
    response = await client.post("/railway/jobs/", json={"label": "   "})
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_create_direct_job(client):
    response = await client.post("/restaurant/jobs/direct", json={
        "label": "walk-in",
        "arrival_time": 4,
        "service_time": 0,
    })

    assert response.status_code == 201
    data = response.json()
    assert data["arrival_time"] == 4
    assert data["service_time"] == 0
    assert data["items"] == []


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["arrival_time", "service_time"])
async def test_negative_times_are_422(client, field):
    body = {"label": "bad", "arrival_time": 0, "service_time": 1, field: -1}
    response = await client.post("/restaurant/jobs/direct", json=body)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_jobs_in_insertion_order(client):
    await _submit(client, "Ana", 1)
    await _submit(client, "Raj", 2)

    response = await client.get("/restaurant/jobs/")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert [j["label"] for j in data["jobs"]] == ["Ana", "Raj"]
    assert [j["arrival_time"] for j in data["jobs"]] == [0, 2]


@pytest.mark.asyncio
async def test_clear_jobs(client):
    await _submit(client, "Ana", 1)

    response = await client.delete("/restaurant/jobs/")
    assert response.status_code == 204

    data = (await client.get("/restaurant/jobs/")).json()
    assert data["total"] == 0
    assert (await client.get("/restaurant/simulation/stats")).json() is None


@pytest.mark.asyncio
async def test_demos_do_not_share_jobs(client):
    await _submit(client, "Ana", 1, variant="railway")

    assert (await client.get("/railway/jobs/")).json()["total"] == 1
    assert (await client.get("/restaurant/jobs/")).json()["total"] == 0
