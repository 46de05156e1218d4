"""
Lookup endpoints: display options for enumerated columns and currency conversion.
"""

from fastapi import APIRouter, Query

from bizdesk.schemas.lookup import (
    CurrencyConversionResponse,
    StatusLookupResponse,
    StatusOptionResponse,
)
from bizdesk.utils.currency_converter import (
    Currency,
    convert_currency,
    format_currency,
    get_currency_symbol,
)
from bizdesk.utils.status_display import STATUS_OPTION_TABLES

router = APIRouter()


@router.get("/lookups/statuses", response_model=StatusLookupResponse)
async def get_status_options() -> StatusLookupResponse:
    """Labels and badge colors for every enumerated column."""
    return StatusLookupResponse(
        options={
            name: [
                StatusOptionResponse(value=option.value.value, label=option.label, color=option.color)
                for option in options
            ]
            for name, options in STATUS_OPTION_TABLES.items()
        }
    )


@router.get("/currency/convert", response_model=CurrencyConversionResponse)
async def convert(
    amount: float = Query(..., allow_inf_nan=False),
    from_currency: Currency = Query(Currency.USD, alias="from"),
    to_currency: Currency = Query(Currency.BDT, alias="to"),
) -> CurrencyConversionResponse:
    """Convert an amount at the fixed rate and format it for display."""
    converted = convert_currency(amount, from_currency, to_currency)
    return CurrencyConversionResponse(
        amount=amount,
        from_currency=from_currency,
        to_currency=to_currency,
        converted=converted,
        formatted=format_currency(converted, to_currency),
        symbol=get_currency_symbol(to_currency),
    )
