"""
Client repository for database operations.
"""

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.db.repositories.base_repository import BaseRepository
from bizdesk.models.client import Client, ClientStatus
from bizdesk.models.project import Project, ProjectStatus


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    async def get_by_email(self, email: str) -> Optional[Client]:
        """Get client by email address."""
        result = await self.session.execute(
            select(Client).where(Client.email == email)
        )
        return result.scalar_one_or_none()

    async def get_dashboard_stats(self) -> dict:
        """Client and project counts for the dashboard."""
        total_clients = await self.session.scalar(select(func.count(Client.id)))
        active_clients = await self.session.scalar(
            select(func.count(Client.id)).where(Client.status == ClientStatus.ACTIVE)
        )
        total_projects = await self.session.scalar(select(func.count(Project.id)))
        active_projects = await self.session.scalar(
            select(func.count(Project.id)).where(Project.status == ProjectStatus.IN_PROGRESS)
        )
        return {
            "total_clients": total_clients or 0,
            "active_clients": active_clients or 0,
            "total_projects": total_projects or 0,
            "active_projects": active_projects or 0,
        }
