"""
Task endpoint tests.
"""

import pytest


@pytest.mark.asyncio
async def test_create_task_joins_names(test_client, make_client, make_project, make_user, make_task):
    client = await make_client(company_name="Acme")
    project = await make_project(client["id"], title="Website")
    user = await make_user(name="Nadia")

    task = await make_task(project, assigned_to=user["id"], type="round-r2", budget=75.5)

    assert task["client_name"] == "Acme"
    assert task["assigned_to_name"] == "Nadia"
    assert task["project_title"] == "Website"
    assert task["type"] == "round-r2"
    assert task["budget"] == 75.5


@pytest.mark.asyncio
async def test_create_task_defaults_type_to_development(make_client, make_project, make_task):
    client = await make_client()
    project = await make_project(client["id"])

    task = await make_task(project)

    assert task["type"] == "development"
    assert task["assigned_to"] is None
    assert task["assigned_to_name"] is None


@pytest.mark.asyncio
async def test_create_task_rejects_unknown_type(test_client, make_client, make_project):
    client = await make_client()
    project = await make_project(client["id"])

    response = await test_client.post(
        "/api/tasks",
        json={
            "title": "T",
            "project_id": project["id"],
            "client_id": client["id"],
            "status": "pending",
            "priority": "low",
            "due_date": "2030-01-01",
            "type": "research",
        },
    )

    assert response.status_code == 422
    assert (await test_client.get("/api/tasks")).json() == []


@pytest.mark.asyncio
async def test_create_task_requires_fields(test_client, make_client, make_project):
    client = await make_client()
    project = await make_project(client["id"])

    response = await test_client.post(
        "/api/tasks",
        json={"title": "T", "project_id": project["id"], "client_id": client["id"]},
    )

    assert response.status_code == 422
    missing = {tuple(e["loc"])[-1] for e in response.json()["error"]["details"]}
    assert {"status", "priority", "due_date"} <= missing


@pytest.mark.asyncio
async def test_create_task_with_missing_references(test_client, make_client, make_project):
    client = await make_client()
    project = await make_project(client["id"])
    base = {
        "title": "T",
        "project_id": project["id"],
        "client_id": client["id"],
        "status": "pending",
        "priority": "low",
        "due_date": "2030-01-01",
    }

    for field in ("project_id", "client_id", "assigned_to"):
        response = await test_client.post("/api/tasks", json={**base, field: 999})
        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"field": field}


@pytest.mark.asyncio
async def test_list_tasks_filters(test_client, make_client, make_project, make_task):
    client = await make_client()
    first = await make_project(client["id"], title="First")
    second = await make_project(client["id"], title="Second")
    await make_task(first, title="a", status="completed")
    await make_task(first, title="b")
    await make_task(second, title="c")

    by_project = (await test_client.get("/api/tasks", params={"project_id": first["id"]})).json()
    by_status = (await test_client.get("/api/tasks", params={"status": "completed"})).json()
    everything = (await test_client.get("/api/tasks")).json()

    assert sorted(t["title"] for t in by_project) == ["a", "b"]
    assert [t["title"] for t in by_status] == ["a"]
    # Newest first
    assert [t["title"] for t in everything] == ["c", "b", "a"]


@pytest.mark.asyncio
async def test_update_task(test_client, make_client, make_project, make_task, make_user):
    client = await make_client()
    project = await make_project(client["id"])
    task = await make_task(project, description="keep")
    user = await make_user(name="Tom")

    response = await test_client.put(
        f"/api/tasks/{task['id']}",
        json={"status": "completed", "priority": "high", "assigned_to": user["id"]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "completed"
    assert data["priority"] == "high"
    assert data["assigned_to_name"] == "Tom"
    assert data["description"] == "keep"


@pytest.mark.asyncio
async def test_update_task_cannot_clear_required_field(test_client, make_client, make_project, make_task):
    client = await make_client()
    project = await make_project(client["id"])
    task = await make_task(project)

    response = await test_client.put(f"/api/tasks/{task['id']}", json={"title": None})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_deleting_user_unassigns_tasks(test_client, make_client, make_project, make_task, make_user):
    client = await make_client()
    project = await make_project(client["id"])
    user = await make_user()
    task = await make_task(project, assigned_to=user["id"])

    assert (await test_client.delete(f"/api/users/{user['id']}")).status_code == 204

    data = (await test_client.get(f"/api/tasks/{task['id']}")).json()
    assert data["assigned_to"] is None
    assert data["assigned_to_name"] is None


@pytest.mark.asyncio
async def test_delete_task(test_client, make_client, make_project, make_task):
    client = await make_client()
    project = await make_project(client["id"])
    task = await make_task(project)

    assert (await test_client.delete(f"/api/tasks/{task['id']}")).status_code == 204
    assert (await test_client.get(f"/api/tasks/{task['id']}")).status_code == 404
    assert (await test_client.delete(f"/api/tasks/{task['id']}")).status_code == 404
