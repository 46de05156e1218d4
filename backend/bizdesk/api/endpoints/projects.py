"""
Project API endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.db.session import get_db
from bizdesk.controllers.project_controller import ProjectController
from bizdesk.models.project import ProjectStatus
from bizdesk.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectDetailResponse,
)

router = APIRouter()


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    client_id: Optional[int] = Query(None),
    status: Optional[ProjectStatus] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> List[ProjectResponse]:
    """List projects with optional filters."""
    controller = ProjectController(db)
    return await controller.list_projects(client_id=client_id, status=status)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Create a new project."""
    controller = ProjectController(db)
    return await controller.create_project(project_data)


@router.get("/{project_id}", response_model=ProjectDetailResponse)
async def get_project(
    project_id: int,
    db: AsyncSession = Depends(get_db),
) -> ProjectDetailResponse:
    """Get project by ID, with its tasks."""
    controller = ProjectController(db)
    return await controller.get_project(project_id)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
) -> ProjectResponse:
    """Update a project."""
    controller = ProjectController(db)
    return await controller.update_project(project_id, project_data)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a project and its tasks."""
    controller = ProjectController(db)
    await controller.delete_project(project_id)
