"""
Project service with business logic.
"""

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.core.exceptions import NotFoundError, ValidationError
from bizdesk.core.logging import get_logger
from bizdesk.db.repositories.client_repository import ClientRepository
from bizdesk.db.repositories.project_repository import ProjectRepository
from bizdesk.db.repositories.task_repository import TaskRepository
from bizdesk.models.project import Project, ProjectStatus
from bizdesk.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectDetailResponse,
)
from bizdesk.services.base_service import BaseService, column_values, to_decimal, to_float
from bizdesk.services.task_service import task_row_to_response

logger = get_logger(__name__)


def derive_status(status: ProjectStatus, open_task_count: int) -> ProjectStatus:
    """A project not yet started but with unfinished tasks is reported as in progress."""
    if status == ProjectStatus.NOT_STARTED and open_task_count > 0:
        return ProjectStatus.IN_PROGRESS
    return status


class ProjectService(BaseService):
    """Service for project operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.project_repo = ProjectRepository(session)
        self.client_repo = ClientRepository(session)
        self.task_repo = TaskRepository(session)

    async def _build_responses(self, pairs: List[Tuple[Project, Optional[str]]]) -> List[ProjectResponse]:
        """Attach task counts, transaction totals and the effective budget."""
        ids = [project.id for project, _ in pairs]
        task_stats = await self.project_repo.task_stats(ids)
        totals = await self.project_repo.transaction_totals(ids)

        responses = []
        for project, client_name in pairs:
            task_count, open_count = task_stats.get(project.id, (0, 0))
            total_payments, total_expenses = totals.get(project.id, (0.0, 0.0))
            static_budget = to_float(project.budget) or 0.0

            values = column_values(project)
            values.update(
                status=derive_status(project.status, open_count),
                budget=static_budget + total_payments - total_expenses,
            )
            responses.append(ProjectResponse(
                **values,
                client_name=client_name,
                task_count=task_count,
                static_budget=static_budget,
                total_payments=total_payments,
                total_expenses=total_expenses,
            ))
        return responses

    async def _get_response(self, project_id: int) -> ProjectResponse:
        pair = await self.project_repo.get_with_client(project_id)
        if pair is None:
            raise NotFoundError("Project", project_id)
        responses = await self._build_responses([pair])
        return responses[0]

    async def _ensure_client(self, client_id: int) -> None:
        if not await self.client_repo.exists(client_id):
            raise ValidationError(f"Client with id {client_id} does not exist", details={"field": "client_id"})

    async def list_projects(
        self,
        client_id: Optional[int] = None,
        status: Optional[ProjectStatus] = None,
    ) -> List[ProjectResponse]:
        """List projects newest first, optionally for one client or reported status."""
        pairs = await self.project_repo.list_with_client(client_id=client_id)
        responses = await self._build_responses(pairs)
        if status is None:
            return responses
        return [project for project in responses if project.status == status]

    async def get_project(self, project_id: int) -> ProjectDetailResponse:
        """Get a project with its tasks."""
        project = await self._get_response(project_id)
        rows = await self.task_repo.list_detailed(project_id=project_id)
        return ProjectDetailResponse(
            **project.model_dump(),
            tasks=[task_row_to_response(row) for row in rows],
        )

    async def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a project for an existing client."""
        await self._ensure_client(project_data.client_id)

        project_dict = project_data.model_dump()
        project_dict["budget"] = to_decimal(project_dict.get("budget"))
        project = await self.project_repo.create(**project_dict)
        await self.session.commit()
        logger.info(
            "Project created",
            extra={"project_id": project.id, "client_id": project.client_id, "title": project.title},
        )
        return await self._get_response(project.id)

    async def update_project(self, project_id: int, project_data: ProjectUpdate) -> ProjectResponse:
        """Update the provided fields of a project."""
        project = await self.project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project", project_id)

        update_dict = project_data.model_dump(exclude_unset=True)
        if "title" in update_dict and update_dict["title"] is None:
            raise ValidationError("Title cannot be cleared", details={"field": "title"})
        if update_dict.get("client_id") is not None:
            await self._ensure_client(update_dict["client_id"])

        # Dates may arrive one at a time; compare against the stored counterpart
        start_date = update_dict.get("start_date", project.start_date)
        end_date = update_dict.get("end_date", project.end_date)
        if start_date and end_date and end_date < start_date:
            raise ValidationError("End date must be after start date", details={"field": "end_date"})

        if "budget" in update_dict:
            update_dict["budget"] = to_decimal(update_dict["budget"])

        await self.project_repo.update(project_id, **update_dict)
        await self.session.commit()
        logger.info("Project updated", extra={"project_id": project_id, "fields": sorted(update_dict)})
        return await self._get_response(project_id)

    async def delete_project(self, project_id: int) -> None:
        """Delete a project together with its tasks."""
        if not await self.project_repo.delete(project_id):
            raise NotFoundError("Project", project_id)
        await self.session.commit()
        logger.info("Project deleted", extra={"project_id": project_id})
