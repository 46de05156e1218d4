"""
Finance Pydantic schemas: transactions and the financial summary.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from bizdesk.models.transaction import TransactionStatus, TransactionType


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored without time zone, in UTC."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class TransactionCreate(BaseModel):
    """Schema for creating a transaction."""
    type: TransactionType
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1, max_length=500)
    project_id: int
    status: TransactionStatus = TransactionStatus.PENDING
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def naive_utc_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _naive_utc(value)


class TransactionUpdate(BaseModel):
    """Schema for updating a transaction (all fields optional)."""
    type: Optional[TransactionType] = None
    amount: Optional[float] = Field(None, gt=0)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    project_id: Optional[int] = None
    status: Optional[TransactionStatus] = None
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def naive_utc_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _naive_utc(value)


class TransactionStatusUpdate(BaseModel):
    """Body of the status-only update."""
    status: TransactionStatus


class TransactionResponse(BaseModel):
    """Schema for transaction response."""
    id: int
    type: TransactionType
    amount: float
    description: str
    project_id: Optional[int] = None
    status: TransactionStatus
    date: datetime
    project_title: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RecentTransaction(BaseModel):
    """
    Entry of the recent activity feed.
    Projects and tasks with a budget appear as ``payment`` rows.
    """
    id: int
    source: str
    type: str
    amount: Optional[float] = None
    description: Optional[str] = None
    project_id: Optional[int] = None
    status: str
    date: Optional[datetime] = None
    project_title: Optional[str] = None


class PendingInvoices(BaseModel):
    count: int = 0
    total: float = 0.0


class FinancialSummaryResponse(BaseModel):
    """Aggregate figures for the finance dashboard."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_income: float
    total_expenses: float
    gross_income: float
    pending_invoices: PendingInvoices
    total_budgets: float
    monthly_revenue: float
    recent_transactions: List[RecentTransaction] = []
    by_type: Dict[str, float] = {}
    by_status: Dict[str, float] = {}
