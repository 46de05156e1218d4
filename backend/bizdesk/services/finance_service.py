"""
Finance service: transactions and the financial summary.
"""

from datetime import date, datetime, time
from typing import List, Optional

from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.core.exceptions import NotFoundError, ValidationError
from bizdesk.core.logging import get_logger
from bizdesk.db.base import utcnow
from bizdesk.db.repositories.finance_repository import FinanceRepository
from bizdesk.db.repositories.project_repository import ProjectRepository
from bizdesk.db.repositories.transaction_repository import TransactionRepository
from bizdesk.models.project import ProjectStatus
from bizdesk.models.task import TaskStatus
from bizdesk.models.transaction import Transaction, TransactionStatus, TransactionType
from bizdesk.schemas.finance import (
    FinancialSummaryResponse,
    PendingInvoices,
    RecentTransaction,
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
)
from bizdesk.services.base_service import BaseService, column_values, to_decimal, to_float

logger = get_logger(__name__)

INCOME_STATUSES = (TransactionStatus.COMPLETED, TransactionStatus.PENDING)
EXPENSE_TYPES = (TransactionType.INVOICE, TransactionType.EXPENSE)

RECENT_TRANSACTIONS = 5
RECENT_PROJECTS = 3
RECENT_TASKS = 3
RECENT_LIMIT = 10


def month_window(today: date):
    """[first day of the month, first day of the next month) as datetimes."""
    start = datetime(today.year, today.month, 1)
    if today.month == 12:
        end = datetime(today.year + 1, 1, 1)
    else:
        end = datetime(today.year, today.month + 1, 1)
    return start, end


def transaction_row_to_response(row: Row) -> TransactionResponse:
    values = column_values(row.Transaction)
    values["amount"] = to_float(values["amount"])
    return TransactionResponse(**values, project_title=row.project_title)


class FinanceService(BaseService):
    """Service for transactions and financial reporting."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.transaction_repo = TransactionRepository(session)
        self.project_repo = ProjectRepository(session)
        self.finance_repo = FinanceRepository(session)

    async def _ensure_project(self, project_id: Optional[int]) -> None:
        if project_id is None:
            raise ValidationError("Project is required", details={"field": "project_id"})
        if not await self.project_repo.exists(project_id):
            raise ValidationError(f"Project with id {project_id} does not exist", details={"field": "project_id"})

    async def _get_response(self, transaction_id: int) -> TransactionResponse:
        row = await self.transaction_repo.get_detailed(transaction_id)
        if row is None:
            raise NotFoundError("Transaction", transaction_id)
        return transaction_row_to_response(row)

    async def list_transactions(
        self,
        type: Optional[TransactionType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[TransactionStatus] = None,
        project_id: Optional[int] = None,
    ) -> List[TransactionResponse]:
        """
        List transactions, latest first.

        Date filters are inclusive whole days.
        """
        rows = await self.transaction_repo.list_filtered(
            type=type,
            start_date=datetime.combine(start_date, time.min) if start_date else None,
            end_date=datetime.combine(end_date, time.max) if end_date else None,
            status=status,
            project_id=project_id,
        )
        return [transaction_row_to_response(row) for row in rows]

    async def get_transaction(self, transaction_id: int) -> TransactionResponse:
        return await self._get_response(transaction_id)

    async def create_transaction(self, transaction_data: TransactionCreate) -> TransactionResponse:
        """Record a transaction against an existing project."""
        await self._ensure_project(transaction_data.project_id)

        transaction_dict = transaction_data.model_dump()
        transaction_dict["amount"] = to_decimal(transaction_dict["amount"])
        if transaction_dict.get("date") is None:
            transaction_dict["date"] = utcnow()

        transaction = await self.transaction_repo.create(**transaction_dict)
        await self.session.commit()
        logger.info(
            "Transaction created",
            extra={
                "transaction_id": transaction.id,
                "type": transaction.type.value,
                "project_id": transaction.project_id,
            },
        )
        return await self._get_response(transaction.id)

    async def update_transaction(self, transaction_id: int, transaction_data: TransactionUpdate) -> TransactionResponse:
        """Update the provided fields of a transaction."""
        if not await self.transaction_repo.exists(transaction_id):
            raise NotFoundError("Transaction", transaction_id)

        update_dict = transaction_data.model_dump(exclude_unset=True)
        cleared = [
            field for field in ("type", "amount", "description", "status", "date")
            if field in update_dict and update_dict[field] is None
        ]
        if cleared:
            raise ValidationError("Required fields cannot be cleared", details={"fields": cleared})
        if "project_id" in update_dict:
            await self._ensure_project(update_dict["project_id"])
        if "amount" in update_dict:
            update_dict["amount"] = to_decimal(update_dict["amount"])

        await self.transaction_repo.update(transaction_id, **update_dict)
        await self.session.commit()
        logger.info("Transaction updated", extra={"transaction_id": transaction_id, "fields": sorted(update_dict)})
        return await self._get_response(transaction_id)

    async def update_transaction_status(self, transaction_id: int, status: TransactionStatus) -> TransactionResponse:
        """Change only the status of a transaction."""
        transaction = await self.transaction_repo.update(transaction_id, status=status)
        if transaction is None:
            raise NotFoundError("Transaction", transaction_id)
        await self.session.commit()
        logger.info(
            "Transaction status updated",
            extra={"transaction_id": transaction_id, "status": status.value},
        )
        return await self._get_response(transaction_id)

    async def delete_transaction(self, transaction_id: int) -> None:
        if not await self.transaction_repo.delete(transaction_id):
            raise NotFoundError("Transaction", transaction_id)
        await self.session.commit()
        logger.info("Transaction deleted", extra={"transaction_id": transaction_id})

    async def _gross_income(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> float:
        payments = await self.finance_repo.sum_transactions(
            [TransactionType.PAYMENT], INCOME_STATUSES, start, end
        )
        project_budgets = await self.finance_repo.sum_project_budgets(
            status=ProjectStatus.COMPLETED, start=start, end=end
        )
        task_budgets = await self.finance_repo.sum_task_budgets(
            status=TaskStatus.COMPLETED, start=start, end=end
        )
        return payments + project_budgets + task_budgets

    async def _expenses(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> float:
        return await self.finance_repo.sum_transactions(
            EXPENSE_TYPES, [TransactionStatus.COMPLETED], start, end
        )

    async def _recent_activity(self) -> List[RecentTransaction]:
        entries = (
            await self.finance_repo.latest_transactions(RECENT_TRANSACTIONS)
            + await self.finance_repo.latest_budgeted_projects(RECENT_PROJECTS)
            + await self.finance_repo.latest_budgeted_tasks(RECENT_TASKS)
        )
        entries.sort(key=lambda entry: entry["date"] or datetime.min, reverse=True)
        return [RecentTransaction(**entry) for entry in entries[:RECENT_LIMIT]]

    async def get_summary(self, today: Optional[date] = None) -> FinancialSummaryResponse:
        """
        Compute the financial summary.

        Gross income counts completed and pending payments plus the budgets of
        completed projects and tasks; expenses are completed invoices and
        expenses. Monthly revenue applies the same net formula to the calendar
        month containing ``today``.

        Args:
            today: Reference date for the monthly figure (defaults to today)
        """
        today = today or utcnow().date()

        gross_income = await self._gross_income()
        total_expenses = await self._expenses()

        pending_count = (
            await self.finance_repo.count_open_projects()
            + await self.finance_repo.count_open_tasks()
            + await self.finance_repo.count_transactions(TransactionStatus.PENDING)
        )
        pending_total = (
            await self.finance_repo.sum_project_budgets(exclude_status=ProjectStatus.COMPLETED)
            + await self.finance_repo.sum_task_budgets(exclude_status=TaskStatus.COMPLETED)
            + await self.finance_repo.sum_transactions(
                list(TransactionType), [TransactionStatus.PENDING]
            )
        )

        total_budgets = (
            await self.finance_repo.sum_project_budgets()
            + await self.finance_repo.sum_task_budgets()
        )

        month_start, month_end = month_window(today)
        monthly_revenue = (
            await self._gross_income(month_start, month_end)
            - await self._expenses(month_start, month_end)
        )

        return FinancialSummaryResponse(
            total_income=gross_income - total_expenses,
            total_expenses=total_expenses,
            gross_income=gross_income,
            pending_invoices=PendingInvoices(count=pending_count, total=pending_total),
            total_budgets=total_budgets,
            monthly_revenue=monthly_revenue,
            recent_transactions=await self._recent_activity(),
            by_type=await self.finance_repo.totals_by(Transaction.type),
            by_status=await self.finance_repo.totals_by(Transaction.status),
        )
