"""
Task controller.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.controllers.base_controller import BaseController
from bizdesk.models.task import TaskStatus
from bizdesk.services.task_service import TaskService
from bizdesk.schemas.task import TaskCreate, TaskUpdate, TaskResponse


class TaskController(BaseController):
    """Controller for task operations."""

    def __init__(self, session: AsyncSession):
        self.task_service = TaskService(session)

    async def create_task(self, task_data: TaskCreate) -> TaskResponse:
        """Create a new task."""
        return await self.task_service.create_task(task_data)

    async def get_task(self, task_id: int) -> TaskResponse:
        """Get task by ID."""
        return await self.task_service.get_task(task_id)

    async def list_tasks(
        self,
        project_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
    ) -> List[TaskResponse]:
        """List tasks with optional filters."""
        return await self.task_service.list_tasks(project_id=project_id, status=status)

    async def update_task(self, task_id: int, task_data: TaskUpdate) -> TaskResponse:
        """Update a task."""
        return await self.task_service.update_task(task_id, task_data)

    async def delete_task(self, task_id: int) -> None:
        """Delete a task."""
        await self.task_service.delete_task(task_id)
