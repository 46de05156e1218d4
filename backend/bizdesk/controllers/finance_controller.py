"""
Finance controller.
"""

import io
from datetime import date
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.controllers.base_controller import BaseController
from bizdesk.models.transaction import TransactionStatus, TransactionType
from bizdesk.services.excel_export_service import ExcelExportService
from bizdesk.services.finance_service import FinanceService
from bizdesk.schemas.finance import (
    FinancialSummaryResponse,
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
)
from bizdesk.utils.currency_converter import Currency


class FinanceController(BaseController):
    """Controller for transactions and the financial summary."""

    def __init__(self, session: AsyncSession):
        self.finance_service = FinanceService(session)
        self.excel_service = ExcelExportService(session)

    async def get_summary(self) -> FinancialSummaryResponse:
        return await self.finance_service.get_summary()

    async def list_transactions(
        self,
        type: Optional[TransactionType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[TransactionStatus] = None,
        project_id: Optional[int] = None,
    ) -> List[TransactionResponse]:
        """List transactions with optional filters."""
        return await self.finance_service.list_transactions(
            type=type,
            start_date=start_date,
            end_date=end_date,
            status=status,
            project_id=project_id,
        )

    async def export_transactions(
        self,
        currency: Currency,
        type: Optional[TransactionType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[TransactionStatus] = None,
        project_id: Optional[int] = None,
    ) -> io.BytesIO:
        return await self.excel_service.export_transactions_to_excel(
            currency=currency,
            type=type,
            start_date=start_date,
            end_date=end_date,
            status=status,
            project_id=project_id,
        )

    async def get_transaction(self, transaction_id: int) -> TransactionResponse:
        return await self.finance_service.get_transaction(transaction_id)

    async def create_transaction(self, transaction_data: TransactionCreate) -> TransactionResponse:
        """Create a new transaction."""
        return await self.finance_service.create_transaction(transaction_data)

    async def update_transaction(self, transaction_id: int, transaction_data: TransactionUpdate) -> TransactionResponse:
        """Update a transaction."""
        return await self.finance_service.update_transaction(transaction_id, transaction_data)

    async def update_transaction_status(self, transaction_id: int, status: TransactionStatus) -> TransactionResponse:
        return await self.finance_service.update_transaction_status(transaction_id, status)

    async def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        await self.finance_service.delete_transaction(transaction_id)
