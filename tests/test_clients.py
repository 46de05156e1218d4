"""
Client endpoint tests.
"""

import pytest


@pytest.mark.asyncio
async def test_create_client_returns_generated_id(test_client):
    response = await test_client.post(
        "/api/clients",
        json={"company_name": "Acme", "contact_person": "Jane", "email": "jane@acme.test"},
    )

    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["status"] == "active"
    assert data["company_name"] == "Acme"


@pytest.mark.asyncio
async def test_get_client_returns_created_fields(test_client):
    payload = {
        "company_name": "Acme",
        "contact_person": "Jane",
        "email": "jane@acme.test",
        "phone": "+1 555 0100",
        "address": "1 Main St",
        "country": "US",
        "social_contacts": {"whatsapp": "+15550100", "linkedin": "acme"},
        "status": "inactive",
    }
    created = (await test_client.post("/api/clients", json=payload)).json()

    response = await test_client.get(f"/api/clients/{created['id']}")

    assert response.status_code == 200
    data = response.json()
    for key, value in payload.items():
        assert data[key] == value
    assert data["created_at"]
    assert data["updated_at"]
    assert data["projects"] == []


@pytest.mark.asyncio
async def test_create_client_missing_required_field(test_client):
    response = await test_client.post("/api/clients", json={"company_name": "Acme"})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["message"] == "Validation error"
    assert error["path"] == "/api/clients"


@pytest.mark.asyncio
async def test_create_client_duplicate_email_conflicts(test_client, make_client):
    await make_client(email="dup@example.com")

    response = await test_client.post(
        "/api/clients",
        json={"company_name": "Other", "contact_person": "Bob", "email": "dup@example.com"},
    )

    assert response.status_code == 409
    assert "dup@example.com" in response.json()["error"]["message"]


@pytest.mark.asyncio
async def test_get_missing_client_returns_404(test_client):
    response = await test_client.get("/api/clients/999")

    assert response.status_code == 404
    assert response.json() == {
        "error": {"message": "Client not found", "details": {"id": 999}, "path": "/api/clients/999"}
    }


@pytest.mark.asyncio
async def test_list_clients_embeds_projects(test_client, make_client, make_project):
    acme = await make_client(company_name="Acme")
    other = await make_client(company_name="Other")
    await make_project(acme["id"], title="Site")
    await make_project(acme["id"], title="App")

    response = await test_client.get("/api/clients")

    assert response.status_code == 200
    clients = {c["id"]: c for c in response.json()}
    assert sorted(p["title"] for p in clients[acme["id"]]["projects"]) == ["App", "Site"]
    assert all(p["client_name"] == "Acme" for p in clients[acme["id"]]["projects"])
    assert clients[other["id"]]["projects"] == []


@pytest.mark.asyncio
async def test_update_client_changes_only_given_fields(test_client, make_client):
    client = await make_client(company_name="Acme", phone="123")

    response = await test_client.put(f"/api/clients/{client['id']}", json={"phone": "456"})

    assert response.status_code == 200
    data = response.json()
    assert data["phone"] == "456"
    assert data["company_name"] == "Acme"
    assert data["email"] == client["email"]


@pytest.mark.asyncio
async def test_update_client_to_taken_email_conflicts(test_client, make_client):
    await make_client(email="taken@example.com")
    client = await make_client()

    response = await test_client.put(f"/api/clients/{client['id']}", json={"email": "taken@example.com"})

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_missing_client_returns_404(test_client):
    response = await test_client.put("/api/clients/42", json={"phone": "1"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_client_keeps_projects_without_client(test_client, make_client, make_project):
    client = await make_client()
    project = await make_project(client["id"])

    response = await test_client.delete(f"/api/clients/{client['id']}")
    assert response.status_code == 204

    assert (await test_client.get(f"/api/clients/{client['id']}")).status_code == 404
    orphan = (await test_client.get(f"/api/projects/{project['id']}")).json()
    assert orphan["client_id"] is None
    assert orphan["client_name"] is None


@pytest.mark.asyncio
async def test_delete_missing_client_returns_404(test_client):
    response = await test_client.delete("/api/clients/7")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_dashboard_stats(test_client, make_client, make_project):
    active = await make_client()
    await make_client(status="inactive")
    await make_project(active["id"], status="in_progress")
    await make_project(active["id"], status="completed")
    await make_project(active["id"])

    response = await test_client.get("/api/clients/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalClients": 2,
        "activeClients": 1,
        "totalProjects": 3,
        "activeProjects": 1,
    }
