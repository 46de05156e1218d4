"""
Financial transaction model.
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, func
from sqlalchemy.orm import relationship

from bizdesk.db.base import Base, TimestampMixin, enum_column, utcnow


class TransactionType(str, enum.Enum):
    """Transaction type enumeration."""
    INVOICE = "invoice"
    PAYMENT = "payment"
    EXPENSE = "expense"


class TransactionStatus(str, enum.Enum):
    """Transaction status enumeration."""
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Transaction(TimestampMixin, Base):
    """Money moving in or out of a project."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(enum_column(TransactionType, "transaction_type"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String(500), nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="SET NULL"), nullable=True, index=True)
    status = Column(
        enum_column(TransactionStatus, "transaction_status"),
        nullable=False,
        default=TransactionStatus.PENDING,
    )
    date = Column(DateTime, nullable=False, default=utcnow, server_default=func.now(), index=True)

    project = relationship("Project", back_populates="transactions")

    def __repr__(self):
        return f"<Transaction(id={self.id}, type={self.type}, amount={self.amount})>"
