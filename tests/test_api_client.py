"""
API client tests against the in-process application.
"""

import httpx
import pytest

from bizdesk.client import ApiError, BizdeskApiClient, FinancialSummaryView, ProjectView, TransactionView
from bizdesk.utils.currency_converter import Currency


@pytest.fixture
async def api(app):
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with BizdeskApiClient(base_url="http://test/api", currency="BDT", transport=transport) as client:
        yield client


@pytest.fixture
async def seeded(api):
    client = await api.create_client({"company_name": "Acme", "contact_person": "Jane", "email": "jane@acme.test"})
    project = await api.create_project({"title": "Website", "client_id": client["id"], "budget": 100})
    await api.create_transaction(
        {"type": "payment", "amount": 50, "description": "Deposit", "project_id": project["id"], "status": "completed"}
    )
    await api.create_transaction(
        {"type": "expense", "amount": 10, "description": "Fonts", "project_id": project["id"]}
    )
    return {"client": client, "project": project}


@pytest.mark.asyncio
async def test_crud_round_trip(api, seeded):
    clients = await api.list_clients()
    assert [c["company_name"] for c in clients] == ["Acme"]
    assert clients[0]["projects"][0]["title"] == "Website"

    project_id = seeded["project"]["id"]
    updated = await api.update_project(project_id, {"status": "completed"})
    assert updated["status"] == "completed"

    await api.delete_project(project_id)
    assert await api.list_projects() == []


@pytest.mark.asyncio
async def test_error_carries_server_message(api):
    with pytest.raises(ApiError) as exc_info:
        await api.get_project(404)

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Project not found"
    assert exc_info.value.details == {"id": 404}


@pytest.mark.asyncio
async def test_project_views_are_converted(api, seeded):
    views = await api.get_project_views()

    assert len(views) == 1
    view = views[0]
    assert isinstance(view, ProjectView)
    assert view.currency is Currency.BDT
    assert view.budget == 150
    assert view.display_budget == 18000
    assert view.formatted_budget == "১৮,০০০.০০৳"
    assert view.formatted_static_budget == "১২,০০০.০০৳"
    assert view.status_label == "Not Started"
    assert view.client_name == "Acme"


@pytest.mark.asyncio
async def test_transaction_views_and_project_expenses(api, seeded):
    views = await api.get_transaction_views(type="all")
    assert {v.type_label for v in views} == {"Payment", "Expense"}
    assert all(isinstance(v, TransactionView) for v in views)
    deposit = next(v for v in views if v.description == "Deposit")
    assert deposit.formatted_amount == "৬,০০০.০০৳"
    assert deposit.status_label == "Completed"

    expenses = await api.get_project_expenses(seeded["project"]["id"])
    assert [t["description"] for t in expenses] == ["Fonts"]


@pytest.mark.asyncio
async def test_status_update_and_summary_view(api, seeded):
    transactions = await api.list_transactions(status="pending")
    updated = await api.update_transaction_status(transactions[0]["id"], "completed")
    assert updated["status"] == "completed"

    summary = await api.get_financial_summary_view()

    assert isinstance(summary, FinancialSummaryView)
    assert summary.gross_income == 50 * 120
    assert summary.total_expenses == 10 * 120
    assert summary.formatted["total_income"] == "৪,৮০০.০০৳"
    assert summary.pending_invoice_count == 1
    assert len(summary.recent_transactions) == 3


@pytest.mark.asyncio
async def test_error_message_fallback():
    def handler(request):
        return httpx.Response(502, text="bad gateway")

    async with BizdeskApiClient(base_url="http://test/api", transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(ApiError, match="HTTP error! status: 502"):
            await client.list_users()
