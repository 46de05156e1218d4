"""
Task service with business logic.
"""

from typing import List, Optional

from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.core.exceptions import NotFoundError, ValidationError
from bizdesk.core.logging import get_logger
from bizdesk.db.repositories.client_repository import ClientRepository
from bizdesk.db.repositories.project_repository import ProjectRepository
from bizdesk.db.repositories.task_repository import TaskRepository
from bizdesk.db.repositories.user_repository import UserRepository
from bizdesk.models.task import TaskStatus
from bizdesk.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from bizdesk.services.base_service import BaseService, column_values, to_decimal, to_float

logger = get_logger(__name__)

REQUIRED_ON_UPDATE = ("title", "project_id", "client_id", "status", "priority", "due_date")


def task_row_to_response(row: Row) -> TaskResponse:
    """Build a response from a row of ``TaskRepository._detailed_query``."""
    values = column_values(row.Task)
    values["budget"] = to_float(values["budget"])
    return TaskResponse(
        **values,
        client_name=row.client_name,
        assigned_to_name=row.assigned_to_name,
        project_title=row.project_title,
    )


class TaskService(BaseService):
    """Service for task operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.task_repo = TaskRepository(session)
        self.project_repo = ProjectRepository(session)
        self.client_repo = ClientRepository(session)
        self.user_repo = UserRepository(session)

    async def _validate_references(
        self,
        project_id: Optional[int] = None,
        client_id: Optional[int] = None,
        assigned_to: Optional[int] = None,
    ) -> None:
        if project_id is not None and not await self.project_repo.exists(project_id):
            raise ValidationError(f"Project with id {project_id} does not exist", details={"field": "project_id"})
        if client_id is not None and not await self.client_repo.exists(client_id):
            raise ValidationError(f"Client with id {client_id} does not exist", details={"field": "client_id"})
        if assigned_to is not None and not await self.user_repo.exists(assigned_to):
            raise ValidationError(f"User with id {assigned_to} does not exist", details={"field": "assigned_to"})

    async def _get_response(self, task_id: int) -> TaskResponse:
        row = await self.task_repo.get_detailed(task_id)
        if row is None:
            raise NotFoundError("Task", task_id)
        return task_row_to_response(row)

    async def list_tasks(
        self,
        project_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
    ) -> List[TaskResponse]:
        """List tasks newest first, optionally for one project or status."""
        rows = await self.task_repo.list_detailed(project_id=project_id, status=status)
        return [task_row_to_response(row) for row in rows]

    async def get_task(self, task_id: int) -> TaskResponse:
        return await self._get_response(task_id)

    async def create_task(self, task_data: TaskCreate) -> TaskResponse:
        """Create a task after checking that its project, client and assignee exist."""
        await self._validate_references(task_data.project_id, task_data.client_id, task_data.assigned_to)

        task_dict = task_data.model_dump()
        task_dict["budget"] = to_decimal(task_dict.get("budget"))
        task = await self.task_repo.create(**task_dict)
        await self.session.commit()
        logger.info(
            "Task created",
            extra={"task_id": task.id, "project_id": task.project_id, "type": task.type.value},
        )
        return await self._get_response(task.id)

    async def update_task(self, task_id: int, task_data: TaskUpdate) -> TaskResponse:
        """Update the provided fields of a task."""
        if not await self.task_repo.exists(task_id):
            raise NotFoundError("Task", task_id)

        update_dict = task_data.model_dump(exclude_unset=True)
        cleared = [field for field in REQUIRED_ON_UPDATE if field in update_dict and update_dict[field] is None]
        if cleared:
            raise ValidationError("Required fields cannot be cleared", details={"fields": cleared})

        await self._validate_references(
            update_dict.get("project_id"),
            update_dict.get("client_id"),
            update_dict.get("assigned_to"),
        )
        if "budget" in update_dict:
            update_dict["budget"] = to_decimal(update_dict["budget"])

        await self.task_repo.update(task_id, **update_dict)
        await self.session.commit()
        logger.info("Task updated", extra={"task_id": task_id, "fields": sorted(update_dict)})
        return await self._get_response(task_id)

    async def delete_task(self, task_id: int) -> None:
        if not await self.task_repo.delete(task_id):
            raise NotFoundError("Task", task_id)
        await self.session.commit()
        logger.info("Task deleted", extra={"task_id": task_id})
