"""
Project model.
"""

import enum

from sqlalchemy import Column, Integer, String, Text, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from bizdesk.db.base import Base, TimestampMixin, enum_column


class ProjectStatus(str, enum.Enum):
    """Project status enumeration."""
    NOT_STARTED = "not_started"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Project(TimestampMixin, Base):
    """Project model with budget and hosting details."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True)
    status = Column(enum_column(ProjectStatus, "project_status"), nullable=False, default=ProjectStatus.NOT_STARTED)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    budget = Column(Numeric(10, 2), nullable=True)

    # Hosting details
    project_live_url = Column(String(500), nullable=True)
    project_files = Column(Text, nullable=True)
    admin_login_url = Column(String(500), nullable=True)
    username_email = Column(String(255), nullable=True)
    password = Column(String(255), nullable=True)

    # Relationships
    client = relationship("Client", back_populates="projects")
    tasks = relationship("Task", back_populates="project", passive_deletes=True)
    transactions = relationship("Transaction", back_populates="project", passive_deletes=True)

    def __repr__(self):
        return f"<Project(id={self.id}, title={self.title}, status={self.status})>"
