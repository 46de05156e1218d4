"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from bizdesk.models.client import Client, ClientStatus
from bizdesk.models.project import Project, ProjectStatus
from bizdesk.models.task import Task, TaskStatus, TaskType, TaskPriority
from bizdesk.models.transaction import Transaction, TransactionType, TransactionStatus
from bizdesk.models.user import User

__all__ = [
    "Client",
    "ClientStatus",
    "Project",
    "ProjectStatus",
    "Task",
    "TaskStatus",
    "TaskType",
    "TaskPriority",
    "Transaction",
    "TransactionType",
    "TransactionStatus",
    "User",
]
