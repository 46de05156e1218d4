"""
Project controller.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.controllers.base_controller import BaseController
from bizdesk.models.project import ProjectStatus
from bizdesk.services.project_service import ProjectService
from bizdesk.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectDetailResponse,
)


class ProjectController(BaseController):
    """Controller for project operations."""

    def __init__(self, session: AsyncSession):
        self.project_service = ProjectService(session)

    async def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a new project."""
        return await self.project_service.create_project(project_data)

    async def get_project(self, project_id: int) -> ProjectDetailResponse:
        """Get project by ID, with its tasks."""
        return await self.project_service.get_project(project_id)

    async def list_projects(
        self,
        client_id: Optional[int] = None,
        status: Optional[ProjectStatus] = None,
    ) -> List[ProjectResponse]:
        """List projects with optional filters."""
        return await self.project_service.list_projects(client_id=client_id, status=status)

    async def update_project(self, project_id: int, project_data: ProjectUpdate) -> ProjectResponse:
        """Update a project."""
        return await self.project_service.update_project(project_id, project_data)

    async def delete_project(self, project_id: int) -> None:
        """Delete a project."""
        await self.project_service.delete_project(project_id)
