"""
Project endpoint tests, including the derived budget and status fields.
"""

import pytest


@pytest.mark.asyncio
async def test_create_project(test_client, make_client):
    client = await make_client(company_name="Acme")

    response = await test_client.post(
        "/api/projects",
        json={
            "title": "Website",
            "client_id": client["id"],
            "budget": 1000,
            "start_date": "2024-01-01",
            "end_date": "2024-03-01",
            "project_live_url": "https://acme.example",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "not_started"
    assert data["client_name"] == "Acme"
    assert data["static_budget"] == 1000
    assert data["budget"] == 1000
    assert data["task_count"] == 0
    assert data["project_live_url"] == "https://acme.example"


@pytest.mark.asyncio
async def test_create_project_requires_existing_client(test_client):
    response = await test_client.post("/api/projects", json={"title": "Website", "client_id": 99})

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "client_id"}


@pytest.mark.asyncio
async def test_create_project_requires_title(test_client, make_client):
    client = await make_client()

    response = await test_client.post("/api/projects", json={"client_id": client["id"]})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_project_rejects_end_before_start(test_client, make_client):
    client = await make_client()

    response = await test_client.post(
        "/api/projects",
        json={"title": "X", "client_id": client["id"], "start_date": "2024-02-01", "end_date": "2024-01-01"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_project_budget_includes_completed_transactions(
    test_client, make_client, make_project, make_transaction
):
    client = await make_client()
    project = await make_project(client["id"], budget=1000)
    await make_transaction(project["id"], type="payment", amount=500, status="completed")
    await make_transaction(project["id"], type="expense", amount=200, status="completed")
    # Pending and invoice rows do not move the budget
    await make_transaction(project["id"], type="payment", amount=300, status="pending")
    await make_transaction(project["id"], type="invoice", amount=50, status="completed")

    data = (await test_client.get(f"/api/projects/{project['id']}")).json()

    assert data["static_budget"] == 1000
    assert data["total_payments"] == 500
    assert data["total_expenses"] == 200
    assert data["budget"] == 1300


@pytest.mark.asyncio
async def test_not_started_project_with_open_task_reports_in_progress(
    test_client, make_client, make_project, make_task
):
    client = await make_client()
    project = await make_project(client["id"])
    await make_task(project, status="pending")

    listed = (await test_client.get("/api/projects")).json()
    detail = (await test_client.get(f"/api/projects/{project['id']}")).json()

    assert listed[0]["status"] == "in_progress"
    assert listed[0]["task_count"] == 1
    assert detail["status"] == "in_progress"
    assert len(detail["tasks"]) == 1
    assert detail["tasks"][0]["project_title"] == "Website"


@pytest.mark.asyncio
async def test_not_started_project_with_completed_tasks_stays_not_started(
    test_client, make_client, make_project, make_task
):
    client = await make_client()
    project = await make_project(client["id"])
    await make_task(project, status="completed")

    detail = (await test_client.get(f"/api/projects/{project['id']}")).json()

    assert detail["status"] == "not_started"
    assert detail["task_count"] == 1


@pytest.mark.asyncio
async def test_list_projects_filters(test_client, make_client, make_project):
    first = await make_client()
    second = await make_client()
    await make_project(first["id"], title="A", status="completed")
    await make_project(first["id"], title="B")
    await make_project(second["id"], title="C")

    by_client = (await test_client.get("/api/projects", params={"client_id": first["id"]})).json()
    by_status = (await test_client.get("/api/projects", params={"status": "completed"})).json()

    assert sorted(p["title"] for p in by_client) == ["A", "B"]
    assert [p["title"] for p in by_status] == ["A"]


@pytest.mark.asyncio
async def test_list_projects_filters_on_reported_status(test_client, make_client, make_project, make_task):
    client = await make_client()
    project = await make_project(client["id"], title="Busy")
    await make_project(client["id"], title="Idle")
    await make_task(project, status="pending")

    in_progress = (await test_client.get("/api/projects", params={"status": "in_progress"})).json()
    not_started = (await test_client.get("/api/projects", params={"status": "not_started"})).json()

    assert [(p["title"], p["status"]) for p in in_progress] == [("Busy", "in_progress")]
    assert [(p["title"], p["status"]) for p in not_started] == [("Idle", "not_started")]


@pytest.mark.asyncio
async def test_list_projects_rejects_unknown_status(test_client):
    response = await test_client.get("/api/projects", params={"status": "archived"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_project_partial(test_client, make_client, make_project):
    client = await make_client()
    project = await make_project(client["id"], budget=100, description="old")

    response = await test_client.put(
        f"/api/projects/{project['id']}",
        json={"status": "completed", "budget": 250},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "completed"
    assert data["budget"] == 250
    assert data["description"] == "old"


@pytest.mark.asyncio
async def test_update_project_checks_dates_against_stored_values(test_client, make_client, make_project):
    client = await make_client()
    project = await make_project(client["id"], start_date="2024-05-01")

    response = await test_client.put(f"/api/projects/{project['id']}", json={"end_date": "2024-04-01"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "End date must be after start date"


@pytest.mark.asyncio
async def test_update_project_to_missing_client(test_client, make_client, make_project):
    client = await make_client()
    project = await make_project(client["id"])

    response = await test_client.put(f"/api/projects/{project['id']}", json={"client_id": 404})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_project_cascades_to_tasks(
    test_client, make_client, make_project, make_task, make_transaction
):
    client = await make_client()
    project = await make_project(client["id"])
    task = await make_task(project)
    transaction = await make_transaction(project["id"])

    response = await test_client.delete(f"/api/projects/{project['id']}")

    assert response.status_code == 204
    assert (await test_client.get(f"/api/projects/{project['id']}")).status_code == 404
    assert (await test_client.get(f"/api/tasks/{task['id']}")).status_code == 404
    kept = (await test_client.get(f"/api/finance/transactions/{transaction['id']}")).json()
    assert kept["project_id"] is None
    assert kept["project_title"] is None


@pytest.mark.asyncio
async def test_delete_missing_project_returns_404(test_client):
    response = await test_client.delete("/api/projects/5")

    assert response.status_code == 404
