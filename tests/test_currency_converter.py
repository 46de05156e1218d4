"""
Currency conversion and formatting tests.
"""

from decimal import Decimal

import pytest

from bizdesk.utils.currency_converter import (
    Currency,
    USD_TO_BDT_RATE,
    convert_and_format_currency,
    convert_currency,
    format_currency,
    get_currency_name,
    get_currency_symbol,
    parse_currency,
)


@pytest.mark.parametrize("amount", [0, 1, 12.5, 999999])
def test_convert_currency(amount):
    assert convert_currency(amount, Currency.USD, Currency.BDT) == amount * USD_TO_BDT_RATE
    assert convert_currency(amount, Currency.BDT, Currency.USD) == amount / USD_TO_BDT_RATE
    assert convert_currency(amount, Currency.USD, Currency.USD) == amount
    assert convert_currency(amount, "BDT", "bdt") == amount


def test_convert_currency_keeps_decimal():
    assert convert_currency(Decimal("1.50"), "USD", "BDT") == Decimal("180.00")


def test_unsupported_currency():
    with pytest.raises(ValueError, match="Unsupported currency"):
        parse_currency("EUR")
    with pytest.raises(ValueError):
        convert_currency(1, "USD", "EUR")


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "$0.00"),
        (1234.56, "$1,234.56"),
        (1234567.891, "$1,234,567.89"),
        (0.005, "$0.01"),
        (-42.5, "-$42.50"),
    ],
)
def test_format_usd(amount, expected):
    assert format_currency(amount, Currency.USD) == expected


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "০.০০৳"),
        (999, "৯৯৯.০০৳"),
        (1234.56, "১,২৩৪.৫৬৳"),
        (1234567.89, "১২,৩৪,৫৬৭.৮৯৳"),
        (120000000, "১২,০০,০০,০০০.০০৳"),
    ],
)
def test_format_bdt(amount, expected):
    assert format_currency(amount, Currency.BDT) == expected


def test_missing_amounts_format_as_zero():
    assert format_currency(float("nan"), Currency.USD) == format_currency(0, Currency.USD) == "$0.00"
    assert format_currency(None) == "$0.00"
    assert convert_and_format_currency(None, "USD", "BDT") == "০.০০৳"


def test_infinite_amounts_format_as_zero():
    assert format_currency(float("inf")) == "$0.00"
    assert format_currency(float("-inf"), Currency.BDT) == "০.০০৳"


def test_format_amount_beyond_default_decimal_precision():
    assert format_currency(1e30) == "$1," + ",".join(["000"] * 10) + ".00"
    assert format_currency(Decimal("12345678901234567890123456789.005")) == (
        "$12,345,678,901,234,567,890,123,456,789.01"
    )
    assert format_currency(10 ** 30, Currency.BDT).startswith("১০,০০,")


def test_convert_and_format():
    assert convert_and_format_currency(10, Currency.USD, Currency.BDT) == "১,২০০.০০৳"
    assert convert_and_format_currency(600, Currency.BDT, Currency.USD) == "$5.00"


def test_symbols_and_names():
    assert get_currency_symbol("USD") == "$"
    assert get_currency_symbol(Currency.BDT) == "৳"
    assert get_currency_name("usd") == "US Dollar"
    assert get_currency_name(Currency.BDT) == "Bangladeshi Taka"
