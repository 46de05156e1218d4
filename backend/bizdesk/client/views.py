"""
View models: API payloads shaped for display in one currency.

Amounts are stored in US dollars; every view carries the amount converted to
the display currency, its formatted string and human-readable labels.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from bizdesk.utils.currency_converter import (
    Currency,
    convert_and_format_currency,
    convert_currency,
)
from bizdesk.utils.status_display import status_label


def _converted(amount: Optional[float], currency: Currency) -> float:
    return float(convert_currency(amount or 0, Currency.USD, currency))


class TransactionView(BaseModel):
    id: int
    type: str
    type_label: str
    status: str
    status_label: str
    description: Optional[str] = None
    project_id: Optional[int] = None
    project_title: Optional[str] = None
    date: Optional[datetime] = None
    amount: float
    display_amount: float
    formatted_amount: str
    currency: Currency

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], currency: Currency) -> "TransactionView":
        amount = float(payload.get("amount") or 0)
        return cls(
            id=payload["id"],
            type=payload["type"],
            type_label=status_label(payload["type"]),
            status=payload["status"],
            status_label=status_label(payload["status"]),
            description=payload.get("description"),
            project_id=payload.get("project_id"),
            project_title=payload.get("project_title"),
            date=payload.get("date"),
            amount=amount,
            display_amount=_converted(amount, currency),
            formatted_amount=convert_and_format_currency(amount, Currency.USD, currency),
            currency=currency,
        )


class ProjectView(BaseModel):
    id: int
    title: str
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    status: str
    status_label: str
    task_count: int = 0
    budget: float
    display_budget: float
    formatted_budget: str
    formatted_static_budget: str
    formatted_payments: str
    formatted_expenses: str
    currency: Currency

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], currency: Currency) -> "ProjectView":
        budget = float(payload.get("budget") or 0)
        return cls(
            id=payload["id"],
            title=payload["title"],
            client_id=payload.get("client_id"),
            client_name=payload.get("client_name"),
            status=payload["status"],
            status_label=status_label(payload["status"]),
            task_count=payload.get("task_count", 0),
            budget=budget,
            display_budget=_converted(budget, currency),
            formatted_budget=convert_and_format_currency(budget, Currency.USD, currency),
            formatted_static_budget=convert_and_format_currency(payload.get("static_budget"), Currency.USD, currency),
            formatted_payments=convert_and_format_currency(payload.get("total_payments"), Currency.USD, currency),
            formatted_expenses=convert_and_format_currency(payload.get("total_expenses"), Currency.USD, currency),
            currency=currency,
        )


class FinancialSummaryView(BaseModel):
    currency: Currency
    total_income: float
    total_expenses: float
    gross_income: float
    total_budgets: float
    monthly_revenue: float
    pending_invoice_count: int
    pending_invoice_total: float
    formatted: Dict[str, str]
    recent_transactions: List[TransactionView] = []

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], currency: Currency) -> "FinancialSummaryView":
        pending = payload.get("pendingInvoices") or {}
        amounts = {
            "total_income": payload.get("totalIncome"),
            "total_expenses": payload.get("totalExpenses"),
            "gross_income": payload.get("grossIncome"),
            "total_budgets": payload.get("totalBudgets"),
            "monthly_revenue": payload.get("monthlyRevenue"),
            "pending_invoice_total": pending.get("total"),
        }
        return cls(
            currency=currency,
            pending_invoice_count=int(pending.get("count") or 0),
            formatted={
                name: convert_and_format_currency(value, Currency.USD, currency)
                for name, value in amounts.items()
            },
            recent_transactions=[
                TransactionView.from_payload(entry, currency)
                for entry in payload.get("recentTransactions", [])
            ],
            **{name: _converted(value, currency) for name, value in amounts.items()},
        )
