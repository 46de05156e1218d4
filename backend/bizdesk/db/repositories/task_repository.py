"""
Task repository for database operations.
"""

from typing import List, Optional

from sqlalchemy import select, case, literal
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.db.repositories.base_repository import BaseRepository
from bizdesk.models.client import Client
from bizdesk.models.project import Project
from bizdesk.models.task import Task, TaskStatus
from bizdesk.models.user import User

NO_PROJECT_TITLE = "No Project"


class TaskRepository(BaseRepository[Task]):
    """Repository for task operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Task, session)

    def _detailed_query(self):
        """Tasks joined to client, assignee and project names."""
        return (
            select(
                Task,
                Client.company_name.label("client_name"),
                User.name.label("assigned_to_name"),
                case(
                    (Project.id.is_not(None), Project.title),
                    else_=literal(NO_PROJECT_TITLE),
                ).label("project_title"),
            )
            .outerjoin(Client, Task.client_id == Client.id)
            .outerjoin(User, Task.assigned_to == User.id)
            .outerjoin(Project, Task.project_id == Project.id)
        )

    async def list_detailed(
        self,
        project_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
    ) -> List[Row]:
        """List joined task rows, newest first."""
        query = self._detailed_query()
        if project_id is not None:
            query = query.where(Task.project_id == project_id)
        if status is not None:
            query = query.where(Task.status == status)

        query = query.order_by(Task.created_at.desc(), Task.id.desc())
        result = await self.session.execute(query)
        return list(result.all())

    async def get_detailed(self, id: int) -> Optional[Row]:
        """Get a joined task row by ID."""
        result = await self.session.execute(self._detailed_query().where(Task.id == id))
        return result.first()
