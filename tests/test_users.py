"""
User endpoint tests.
"""

import pytest


@pytest.mark.asyncio
async def test_user_crud(test_client):
    created = await test_client.post("/api/users", json={"name": "Nadia", "email": "nadia@example.com"})
    assert created.status_code == 201
    user = created.json()

    fetched = await test_client.get(f"/api/users/{user['id']}")
    assert fetched.json()["email"] == "nadia@example.com"

    updated = await test_client.put(f"/api/users/{user['id']}", json={"name": "Nadia R."})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Nadia R."
    assert updated.json()["email"] == "nadia@example.com"

    listed = await test_client.get("/api/users")
    assert [u["id"] for u in listed.json()] == [user["id"]]

    assert (await test_client.delete(f"/api/users/{user['id']}")).status_code == 204
    assert (await test_client.get(f"/api/users/{user['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_user_email_is_unique(test_client, make_user):
    await make_user(email="same@example.com")

    response = await test_client.post("/api/users", json={"name": "Other", "email": "same@example.com"})

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_user_email_must_look_like_an_address(test_client):
    response = await test_client.post("/api/users", json={"name": "Bad", "email": "not-an-email"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_missing_user(test_client):
    response = await test_client.put("/api/users/3", json={"name": "X"})

    assert response.status_code == 404
