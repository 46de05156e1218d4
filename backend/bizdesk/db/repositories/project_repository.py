"""
Project repository for database operations.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import select, func, case
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.db.repositories.base_repository import BaseRepository
from bizdesk.models.client import Client
from bizdesk.models.project import Project
from bizdesk.models.task import Task, TaskStatus
from bizdesk.models.transaction import Transaction, TransactionStatus, TransactionType


class ProjectRepository(BaseRepository[Project]):
    """Repository for project operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Project, session)

    def _base_query(self):
        """Projects left-joined to their client's company name."""
        return (
            select(Project, Client.company_name.label("client_name"))
            .outerjoin(Client, Project.client_id == Client.id)
        )

    async def list_with_client(
        self,
        client_id: Optional[int] = None,
    ) -> List[Tuple[Project, Optional[str]]]:
        """List (project, client_name) pairs, newest first."""
        query = self._base_query()
        if client_id is not None:
            query = query.where(Project.client_id == client_id)
        query = query.order_by(Project.created_at.desc(), Project.id.desc())
        result = await self.session.execute(query)
        return [(row.Project, row.client_name) for row in result.all()]

    async def get_with_client(self, id: int) -> Optional[Tuple[Project, Optional[str]]]:
        """Get (project, client_name) by ID."""
        result = await self.session.execute(self._base_query().where(Project.id == id))
        row = result.first()
        if row is None:
            return None
        return row.Project, row.client_name

    async def task_stats(self, project_ids: Iterable[int]) -> Dict[int, Tuple[int, int]]:
        """
        Task counts per project.

        Returns:
            Mapping of project id to (task_count, open_task_count), where open
            tasks are the ones not completed
        """
        ids = list(project_ids)
        if not ids:
            return {}
        result = await self.session.execute(
            select(
                Task.project_id,
                func.count(Task.id),
                func.sum(case((Task.status != TaskStatus.COMPLETED, 1), else_=0)),
            )
            .where(Task.project_id.in_(ids))
            .group_by(Task.project_id)
        )
        return {project_id: (count, int(open_count or 0)) for project_id, count, open_count in result.all()}

    async def transaction_totals(self, project_ids: Iterable[int]) -> Dict[int, Tuple[float, float]]:
        """
        Completed payment and expense totals per project.

        Returns:
            Mapping of project id to (total_payments, total_expenses)
        """
        ids = list(project_ids)
        if not ids:
            return {}
        result = await self.session.execute(
            select(
                Transaction.project_id,
                func.coalesce(
                    func.sum(case((Transaction.type == TransactionType.PAYMENT, Transaction.amount), else_=0)), 0
                ),
                func.coalesce(
                    func.sum(case((Transaction.type == TransactionType.EXPENSE, Transaction.amount), else_=0)), 0
                ),
            )
            .where(
                Transaction.project_id.in_(ids),
                Transaction.status == TransactionStatus.COMPLETED,
            )
            .group_by(Transaction.project_id)
        )
        return {
            project_id: (float(payments), float(expenses))
            for project_id, payments, expenses in result.all()
        }
