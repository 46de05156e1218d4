"""
User model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from bizdesk.db.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """Application user; tasks may be assigned to one."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)

    tasks = relationship("Task", back_populates="assignee", passive_deletes=True)
