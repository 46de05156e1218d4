"""
Transaction export tests.
"""

import io

import pytest
from openpyxl import load_workbook


@pytest.mark.asyncio
async def test_export_transactions_in_bdt(test_client, make_client, make_project, make_transaction):
    client = await make_client()
    project = await make_project(client["id"], title="Website")
    await make_transaction(project["id"], type="payment", amount=100, description="Deposit")
    await make_transaction(project["id"], type="expense", amount=2.5, description="Domain")

    response = await test_client.get(
        "/api/finance/transactions/export",
        params={"currency": "BDT", "type": "all"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "transactions_bdt.xlsx" in response.headers["content-disposition"]

    ws = load_workbook(io.BytesIO(response.content)).active
    headers = [cell.value for cell in ws[1]]
    assert headers == [
        "Date", "Type", "Status", "Description", "Project", "Amount (USD)", "Amount (BDT)", "Formatted",
    ]
    rows = {row[3]: row for row in ws.iter_rows(min_row=2, max_row=3, values_only=True)}
    assert rows["Deposit"][1] == "Payment"
    assert rows["Deposit"][4] == "Website"
    assert rows["Deposit"][5] == 100
    assert rows["Deposit"][6] == 12000
    assert rows["Deposit"][7] == "১২,০০০.০০৳"
    assert rows["Domain"][6] == 300
    assert ws.cell(row=4, column=1).value == "Total"
    assert ws.cell(row=4, column=6).value == "=SUM(F2:F3)"


@pytest.mark.asyncio
async def test_export_filters_by_type(test_client, make_client, make_project, make_transaction):
    client = await make_client()
    project = await make_project(client["id"])
    await make_transaction(project["id"], type="payment", description="Deposit")
    await make_transaction(project["id"], type="invoice", description="Invoice 1")

    response = await test_client.get("/api/finance/transactions/export", params={"type": "invoice"})

    ws = load_workbook(io.BytesIO(response.content)).active
    assert ws.cell(row=2, column=4).value == "Invoice 1"
    assert ws.cell(row=3, column=1).value == "Total"
    assert ws.cell(row=1, column=7).value == "Amount (USD)"


@pytest.mark.asyncio
async def test_export_rejects_unknown_currency(test_client):
    response = await test_client.get("/api/finance/transactions/export", params={"currency": "EUR"})

    assert response.status_code == 422
