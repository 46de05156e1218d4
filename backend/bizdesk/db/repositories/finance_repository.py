"""
Finance repository: cross-table aggregates behind the financial summary.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.models.project import Project, ProjectStatus
from bizdesk.models.task import Task, TaskStatus
from bizdesk.models.transaction import Transaction, TransactionStatus, TransactionType


def _in_window(column, start: Optional[datetime], end: Optional[datetime]) -> list:
    conditions = []
    if start is not None:
        conditions.append(column >= start)
    if end is not None:
        conditions.append(column < end)
    return conditions


class FinanceRepository:
    """Aggregate queries over transactions, project budgets and task budgets."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _scalar_float(self, query) -> float:
        value = await self.session.scalar(query)
        return float(value or 0)

    async def sum_transactions(
        self,
        types: Iterable[TransactionType],
        statuses: Iterable[TransactionStatus],
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> float:
        """Sum of transaction amounts of the given types and statuses, dated in [start, end)."""
        query = select(func.coalesce(func.sum(Transaction.amount), 0)).where(
            Transaction.type.in_(list(types)),
            Transaction.status.in_(list(statuses)),
            *_in_window(Transaction.date, start, end),
        )
        return await self._scalar_float(query)

    async def sum_project_budgets(
        self,
        status: Optional[ProjectStatus] = None,
        exclude_status: Optional[ProjectStatus] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> float:
        """Sum of project budgets, optionally by status and last update in [start, end)."""
        query = select(func.coalesce(func.sum(Project.budget), 0))
        if status is not None:
            query = query.where(Project.status == status)
        if exclude_status is not None:
            query = query.where(Project.status != exclude_status)
        query = query.where(*_in_window(Project.updated_at, start, end))
        return await self._scalar_float(query)

    async def sum_task_budgets(
        self,
        status: Optional[TaskStatus] = None,
        exclude_status: Optional[TaskStatus] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> float:
        """Sum of task budgets, optionally by status and last update in [start, end)."""
        query = select(func.coalesce(func.sum(Task.budget), 0))
        if status is not None:
            query = query.where(Task.status == status)
        if exclude_status is not None:
            query = query.where(Task.status != exclude_status)
        query = query.where(*_in_window(Task.updated_at, start, end))
        return await self._scalar_float(query)

    async def count_open_projects(self) -> int:
        return await self.session.scalar(
            select(func.count(Project.id)).where(Project.status != ProjectStatus.COMPLETED)
        ) or 0

    async def count_open_tasks(self) -> int:
        return await self.session.scalar(
            select(func.count(Task.id)).where(Task.status != TaskStatus.COMPLETED)
        ) or 0

    async def count_transactions(self, status: TransactionStatus) -> int:
        return await self.session.scalar(
            select(func.count(Transaction.id)).where(Transaction.status == status)
        ) or 0

    async def totals_by(self, column) -> Dict[str, float]:
        """Transaction amount totals grouped by ``Transaction.type`` or ``Transaction.status``."""
        result = await self.session.execute(
            select(column, func.coalesce(func.sum(Transaction.amount), 0)).group_by(column)
        )
        return {key.value: float(total) for key, total in result.all()}

    async def latest_transactions(self, limit: int) -> List[dict]:
        result = await self.session.execute(
            select(Transaction, Project.title.label("project_title"))
            .outerjoin(Project, Transaction.project_id == Project.id)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .limit(limit)
        )
        return [
            {
                "id": row.Transaction.id,
                "source": "transaction",
                "type": row.Transaction.type.value,
                "amount": float(row.Transaction.amount),
                "description": row.Transaction.description,
                "project_id": row.Transaction.project_id,
                "status": row.Transaction.status.value,
                "date": row.Transaction.date,
                "project_title": row.project_title,
            }
            for row in result.all()
        ]

    async def latest_budgeted_projects(self, limit: int) -> List[dict]:
        result = await self.session.execute(
            select(Project)
            .where(Project.budget.is_not(None))
            .order_by(Project.updated_at.desc(), Project.id.desc())
            .limit(limit)
        )
        return [
            {
                "id": project.id,
                "source": "project",
                "type": TransactionType.PAYMENT.value,
                "amount": float(project.budget),
                "description": f"Project: {project.title}",
                "project_id": project.id,
                "status": project.status.value,
                "date": project.updated_at,
                "project_title": project.title,
            }
            for project in result.scalars().all()
        ]

    async def latest_budgeted_tasks(self, limit: int) -> List[dict]:
        result = await self.session.execute(
            select(Task, Project.title.label("project_title"))
            .outerjoin(Project, Task.project_id == Project.id)
            .where(Task.budget.is_not(None))
            .order_by(Task.updated_at.desc(), Task.id.desc())
            .limit(limit)
        )
        return [
            {
                "id": row.Task.id,
                "source": "task",
                "type": TransactionType.PAYMENT.value,
                "amount": float(row.Task.budget),
                "description": f"Task: {row.Task.title}",
                "project_id": row.Task.project_id,
                "status": row.Task.status.value,
                "date": row.Task.updated_at,
                "project_title": row.project_title,
            }
            for row in result.all()
        ]
