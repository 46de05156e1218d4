"""
Excel export service for transactions.
"""

import io
from datetime import date
from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.core.logging import get_logger
from bizdesk.models.transaction import TransactionStatus, TransactionType
from bizdesk.services.finance_service import FinanceService
from bizdesk.utils.currency_converter import (
    Currency,
    convert_and_format_currency,
    convert_currency,
)
from bizdesk.utils.status_display import status_label

logger = get_logger(__name__)

HEADER_FILL = "1F4E78"

COLUMNS = [
    ("Date", 20),
    ("Type", 12),
    ("Status", 12),
    ("Description", 45),
    ("Project", 30),
    ("Amount (USD)", 16),
    ("Amount", 16),
    ("Formatted", 22),
]


class ExcelExportService:
    """Service for exporting transactions to Excel."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.finance_service = FinanceService(session)

    async def export_transactions_to_excel(
        self,
        currency: Currency = Currency.USD,
        type: Optional[TransactionType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[TransactionStatus] = None,
        project_id: Optional[int] = None,
    ) -> io.BytesIO:
        """
        Export the filtered transaction list.

        Stored amounts are US dollars; the ``Amount`` and ``Formatted``
        columns show them converted to ``currency``.
        """
        transactions = await self.finance_service.list_transactions(
            type=type,
            start_date=start_date,
            end_date=end_date,
            status=status,
            project_id=project_id,
        )

        wb = Workbook()
        ws = wb.active
        ws.title = "Transactions"
        self._write_headers(ws, currency)

        for row_idx, transaction in enumerate(transactions, start=2):
            ws.cell(row=row_idx, column=1, value=transaction.date)
            ws.cell(row=row_idx, column=1).number_format = "yyyy-mm-dd hh:mm"
            ws.cell(row=row_idx, column=2, value=status_label(transaction.type))
            ws.cell(row=row_idx, column=3, value=status_label(transaction.status))
            ws.cell(row=row_idx, column=4, value=transaction.description)
            ws.cell(row=row_idx, column=5, value=transaction.project_title or "")
            ws.cell(row=row_idx, column=6, value=transaction.amount).number_format = "#,##0.00"
            converted = convert_currency(transaction.amount, Currency.USD, currency)
            ws.cell(row=row_idx, column=7, value=round(converted, 2)).number_format = "#,##0.00"
            ws.cell(
                row=row_idx,
                column=8,
                value=convert_and_format_currency(transaction.amount, Currency.USD, currency),
            )

        totals_row = len(transactions) + 2
        ws.cell(row=totals_row, column=1, value="Total").font = Font(bold=True)
        if transactions:
            for column in (6, 7):
                letter = get_column_letter(column)
                cell = ws.cell(row=totals_row, column=column, value=f"=SUM({letter}2:{letter}{totals_row - 1})")
                cell.font = Font(bold=True)
                cell.number_format = "#,##0.00"

        ws.freeze_panes = "A2"

        output = io.BytesIO()
        wb.save(output)
        output.seek(0)
        logger.info(
            "Transactions exported",
            extra={"rows": len(transactions), "currency": currency.value},
        )
        return output

    def _write_headers(self, ws, currency: Currency) -> None:
        for col_idx, (title, width) in enumerate(COLUMNS, start=1):
            if title == "Amount":
                title = f"Amount ({currency.value})"
            cell = ws.cell(row=1, column=col_idx, value=title)
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = PatternFill(start_color=HEADER_FILL, end_color=HEADER_FILL, fill_type="solid")
            cell.alignment = Alignment(horizontal="center")
            ws.column_dimensions[get_column_letter(col_idx)].width = width
