"""
Currency conversion and display formatting.

Rates are fixed constants; nothing is fetched at runtime. Only US dollars and
Bangladeshi taka are supported.
"""

import enum
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

Number = Union[int, float, Decimal]


class Currency(str, enum.Enum):
    """Supported display currencies."""
    USD = "USD"
    BDT = "BDT"


# 1 USD = 120 BDT (approximate)
USD_TO_BDT_RATE = 120

CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.BDT: "৳",
}

CURRENCY_NAMES = {
    Currency.USD: "US Dollar",
    Currency.BDT: "Bangladeshi Taka",
}

_BENGALI_DIGITS = str.maketrans("0123456789", "০১২৩৪৫৬৭৮৯")


def parse_currency(value: Union[Currency, str]) -> Currency:
    """
    Coerce a currency code to ``Currency``.

    Raises:
        ValueError: If the code is not a supported currency
    """
    if isinstance(value, Currency):
        return value
    try:
        return Currency(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Unsupported currency: {value}") from None


def convert_currency(
    amount: Number,
    from_currency: Union[Currency, str],
    to_currency: Union[Currency, str],
) -> Number:
    """
    Convert an amount between currencies.

    Returns the amount unchanged when both currencies are the same.
    """
    source = parse_currency(from_currency)
    target = parse_currency(to_currency)

    if source == target:
        return amount

    if source == Currency.USD and target == Currency.BDT:
        return amount * USD_TO_BDT_RATE

    # BDT -> USD
    return amount / USD_TO_BDT_RATE


def _is_missing(amount: Optional[Number]) -> bool:
    if amount is None:
        return True
    try:
        return not math.isfinite(float(amount))
    except (TypeError, ValueError, OverflowError):
        return True


def _group_western(integer_digits: str) -> str:
    return f"{int(integer_digits):,}"


def _group_south_asian(integer_digits: str) -> str:
    """Lakh/crore grouping: last three digits, then pairs (12,34,567)."""
    if len(integer_digits) <= 3:
        return integer_digits
    head, tail = integer_digits[:-3], integer_digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: Optional[Number], currency: Union[Currency, str] = Currency.USD) -> str:
    """
    Format an amount for display with two decimals.

    USD follows en-US conventions (``$1,234.56``); BDT follows bn-BD
    conventions (Bengali digits, lakh grouping, trailing ``৳``). None, NaN and
    infinities are formatted as zero.
    """
    currency = parse_currency(currency)
    value = Decimal(0) if _is_missing(amount) else Decimal(str(amount))
    with localcontext() as ctx:
        # Room for every integer digit plus the two decimals.
        ctx.prec = max(28, value.adjusted() + 3)
        value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    integer_digits, fraction = f"{abs(value):.2f}".split(".")

    if currency == Currency.USD:
        return f"{sign}{CURRENCY_SYMBOLS[currency]}{_group_western(integer_digits)}.{fraction}"

    grouped = _group_south_asian(integer_digits)
    return f"{sign}{grouped}.{fraction}".translate(_BENGALI_DIGITS) + CURRENCY_SYMBOLS[currency]


def convert_and_format_currency(
    amount: Optional[Number],
    from_currency: Union[Currency, str],
    to_currency: Union[Currency, str],
) -> str:
    """Convert and format currency amount for display."""
    if _is_missing(amount):
        return format_currency(0, to_currency)
    return format_currency(convert_currency(amount, from_currency, to_currency), to_currency)


def get_currency_symbol(currency: Union[Currency, str]) -> str:
    return CURRENCY_SYMBOLS[parse_currency(currency)]


def get_currency_name(currency: Union[Currency, str]) -> str:
    return CURRENCY_NAMES[parse_currency(currency)]
