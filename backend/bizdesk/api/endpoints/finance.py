"""
Finance API endpoints: summary and transactions.
"""

from datetime import date
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.db.session import get_db
from bizdesk.controllers.finance_controller import FinanceController
from bizdesk.models.transaction import TransactionStatus, TransactionType
from bizdesk.schemas.finance import (
    FinancialSummaryResponse,
    TransactionCreate,
    TransactionResponse,
    TransactionStatusUpdate,
    TransactionUpdate,
)
from bizdesk.utils.currency_converter import Currency

router = APIRouter()

TypeFilter = Literal["all", "invoice", "payment", "expense"]

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _type_filter(value: Optional[str]) -> Optional[TransactionType]:
    """``all`` and a missing value both mean no type filter."""
    if value is None or value == "all":
        return None
    return TransactionType(value)


@router.get("/summary", response_model=FinancialSummaryResponse)
async def get_summary(
    db: AsyncSession = Depends(get_db),
) -> FinancialSummaryResponse:
    """Income, expense, budget and recent activity figures."""
    controller = FinanceController(db)
    return await controller.get_summary()


@router.get("/transactions", response_model=List[TransactionResponse])
async def list_transactions(
    type: Optional[TypeFilter] = Query(None),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    status: Optional[TransactionStatus] = Query(None),
    project_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> List[TransactionResponse]:
    """List transactions, latest first, with optional filters."""
    controller = FinanceController(db)
    return await controller.list_transactions(
        type=_type_filter(type),
        start_date=start_date,
        end_date=end_date,
        status=status,
        project_id=project_id,
    )


@router.post("/transactions", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_data: TransactionCreate,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    """Record a new transaction."""
    controller = FinanceController(db)
    return await controller.create_transaction(transaction_data)


@router.get("/transactions/export")
async def export_transactions(
    currency: Currency = Query(Currency.USD),
    type: Optional[TypeFilter] = Query(None),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    status: Optional[TransactionStatus] = Query(None),
    project_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Export the filtered transaction list as an Excel workbook."""
    controller = FinanceController(db)
    output = await controller.export_transactions(
        currency=currency,
        type=_type_filter(type),
        start_date=start_date,
        end_date=end_date,
        status=status,
        project_id=project_id,
    )
    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f"attachment; filename=transactions_{currency.value.lower()}.xlsx"
        },
    )


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    """Get transaction by ID."""
    controller = FinanceController(db)
    return await controller.get_transaction(transaction_id)


@router.put("/transactions/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: int,
    transaction_data: TransactionUpdate,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    """Update a transaction."""
    controller = FinanceController(db)
    return await controller.update_transaction(transaction_id, transaction_data)


@router.put("/transactions/{transaction_id}/status", response_model=TransactionResponse)
async def update_transaction_status(
    transaction_id: int,
    status_data: TransactionStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    """Change only the status of a transaction."""
    controller = FinanceController(db)
    return await controller.update_transaction_status(transaction_id, status_data.status)


@router.delete("/transactions/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a transaction."""
    controller = FinanceController(db)
    await controller.delete_transaction(transaction_id)
