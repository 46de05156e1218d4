"""
Task model.
"""

import enum

from sqlalchemy import Column, Integer, String, Text, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from bizdesk.db.base import Base, TimestampMixin, enum_column


class TaskStatus(str, enum.Enum):
    """Task status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskType(str, enum.Enum):
    """Task type enumeration."""
    DEVELOPMENT = "development"
    DESIGN = "design"
    FIXING = "fixing"
    FEEDBACK = "feedback"
    ROUND_R1 = "round-r1"
    ROUND_R2 = "round-r2"
    ROUND_R3 = "round-r3"


class TaskPriority(str, enum.Enum):
    """Task priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(TimestampMixin, Base):
    """Unit of work inside a project."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True)
    assigned_to = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    status = Column(enum_column(TaskStatus, "task_status"), nullable=False, default=TaskStatus.PENDING)
    type = Column(enum_column(TaskType, "task_type"), nullable=False, default=TaskType.DEVELOPMENT)
    priority = Column(enum_column(TaskPriority, "task_priority"), nullable=False, default=TaskPriority.MEDIUM)
    due_date = Column(Date, nullable=True)
    budget = Column(Numeric(10, 2), nullable=True)

    # Relationships
    project = relationship("Project", back_populates="tasks")
    assignee = relationship("User", back_populates="tasks")

    def __repr__(self):
        return f"<Task(id={self.id}, title={self.title}, type={self.type})>"
