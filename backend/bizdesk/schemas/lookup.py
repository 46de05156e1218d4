"""
Lookup schemas: display options for enumerated columns and currency conversion.
"""

from typing import Dict, List

from pydantic import BaseModel

from bizdesk.utils.currency_converter import Currency


class StatusOptionResponse(BaseModel):
    value: str
    label: str
    color: str


class StatusLookupResponse(BaseModel):
    """Option tables keyed by enumerated column, e.g. ``project_status``."""
    options: Dict[str, List[StatusOptionResponse]]


class CurrencyConversionResponse(BaseModel):
    amount: float
    from_currency: Currency
    to_currency: Currency
    converted: float
    formatted: str
    symbol: str
