"""
Project Pydantic schemas for request/response validation.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from bizdesk.models.project import ProjectStatus
from bizdesk.schemas.task import TaskResponse


class ProjectBase(BaseModel):
    """Base project schema with common fields."""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    client_id: Optional[int] = None
    status: ProjectStatus = ProjectStatus.NOT_STARTED
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = Field(None, ge=0)
    project_live_url: Optional[str] = Field(None, max_length=500)
    project_files: Optional[str] = None
    admin_login_url: Optional[str] = Field(None, max_length=500)
    username_email: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, max_length=255)


def _check_dates(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date is not None and end_date is not None and end_date < start_date:
        raise ValueError("End date must be after start date")


class ProjectCreate(ProjectBase):
    """Schema for creating a project."""
    client_id: int

    @model_validator(mode="after")
    def validate_dates(self):
        """Validate that end_date is after start_date."""
        _check_dates(self.start_date, self.end_date)
        return self


class ProjectUpdate(BaseModel):
    """Schema for updating a project (all fields optional)."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    client_id: Optional[int] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = Field(None, ge=0)
    project_live_url: Optional[str] = Field(None, max_length=500)
    project_files: Optional[str] = None
    admin_login_url: Optional[str] = Field(None, max_length=500)
    username_email: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, max_length=255)

    @model_validator(mode="after")
    def validate_dates(self):
        """Validate that end_date is after start_date when both are provided."""
        _check_dates(self.start_date, self.end_date)
        return self


class ProjectResponse(ProjectBase):
    """
    Schema for project response.

    ``budget`` is the effective budget: the stored ``static_budget`` plus
    completed payments minus completed expenses.
    """
    id: int
    budget: Optional[float] = None
    client_name: Optional[str] = None
    task_count: int = 0
    static_budget: float = 0.0
    total_payments: float = 0.0
    total_expenses: float = 0.0
    created_at: datetime
    updated_at: datetime


class ProjectDetailResponse(ProjectResponse):
    """Project with its tasks."""
    tasks: List[TaskResponse] = []
