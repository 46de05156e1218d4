"""
Transaction repository for database operations.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.db.repositories.base_repository import BaseRepository
from bizdesk.models.project import Project
from bizdesk.models.transaction import Transaction, TransactionStatus, TransactionType


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for transaction operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Transaction, session)

    def _detailed_query(self):
        """Transactions left-joined to their project's title."""
        return (
            select(Transaction, Project.title.label("project_title"))
            .outerjoin(Project, Transaction.project_id == Project.id)
        )

    async def list_filtered(
        self,
        type: Optional[TransactionType] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        status: Optional[TransactionStatus] = None,
        project_id: Optional[int] = None,
    ) -> List[Row]:
        """List joined transaction rows matching the filters, latest first."""
        query = self._detailed_query()
        if type is not None:
            query = query.where(Transaction.type == type)
        if start_date is not None:
            query = query.where(Transaction.date >= start_date)
        if end_date is not None:
            query = query.where(Transaction.date <= end_date)
        if status is not None:
            query = query.where(Transaction.status == status)
        if project_id is not None:
            query = query.where(Transaction.project_id == project_id)

        query = query.order_by(Transaction.date.desc(), Transaction.id.desc())
        result = await self.session.execute(query)
        return list(result.all())

    async def get_detailed(self, id: int) -> Optional[Row]:
        """Get a joined transaction row by ID."""
        result = await self.session.execute(self._detailed_query().where(Transaction.id == id))
        return result.first()
