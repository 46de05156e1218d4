"""
Task Pydantic schemas for request/response validation.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from bizdesk.models.task import TaskPriority, TaskStatus, TaskType


class TaskBase(BaseModel):
    """Base task schema with common fields."""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    project_id: int
    client_id: int
    assigned_to: Optional[int] = None
    status: TaskStatus
    type: TaskType = TaskType.DEVELOPMENT
    priority: TaskPriority
    due_date: date
    budget: Optional[float] = Field(None, ge=0)


class TaskCreate(TaskBase):
    """Schema for creating a task."""
    pass


class TaskUpdate(BaseModel):
    """Schema for updating a task (all fields optional)."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    project_id: Optional[int] = None
    client_id: Optional[int] = None
    assigned_to: Optional[int] = None
    status: Optional[TaskStatus] = None
    type: Optional[TaskType] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    budget: Optional[float] = Field(None, ge=0)


class TaskResponse(BaseModel):
    """Schema for task response, joined to client, assignee and project names."""
    id: int
    title: str
    description: Optional[str] = None
    project_id: Optional[int] = None
    client_id: Optional[int] = None
    assigned_to: Optional[int] = None
    status: TaskStatus
    type: TaskType
    priority: TaskPriority
    due_date: Optional[date] = None
    budget: Optional[float] = None
    client_name: Optional[str] = None
    assigned_to_name: Optional[str] = None
    project_title: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
