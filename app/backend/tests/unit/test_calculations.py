"""Unit tests for the parsing and rounding helpers."""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest

from app.backend.src.core.errors import (
    NegativeValueError,
    NotANumberError,
    ValueTooLargeError,
)
from app.backend.src.services import calculations


@pytest.mark.parametrize(
    ("text", "expected"),
    [("10.00", Decimal("10.00")), (" 5.5 ", Decimal("5.5")), ("0", Decimal("0"))],
)
def test_parse_price_accepts_decimal_text(text: str, expected: Decimal) -> None:
    assert calculations.parse_price(text) == expected


@pytest.mark.parametrize(
    "text", ["abc", "NaN", "Infinity", "1.2.3", "1e3", "1E+3", "1_000", "0x10", "."]
)
def test_parse_price_rejects_non_numbers(text: str) -> None:
    with pytest.raises(NotANumberError) as excinfo:
        calculations.parse_price(text)

    assert excinfo.value.field == "price"


def test_parse_price_rejects_negative_values() -> None:
    with pytest.raises(NegativeValueError):
        calculations.parse_price("-1")


def test_parse_quantity_accepts_whole_numbers() -> None:
    assert calculations.parse_quantity("3") == 3
    assert calculations.parse_quantity("4.0") == 4


def test_parse_quantity_rejects_fractions_and_text() -> None:
    with pytest.raises(NotANumberError):
        calculations.parse_quantity("2.5")
    with pytest.raises(NotANumberError):
        calculations.parse_quantity("abc")


def test_parse_quantity_rejects_negative_values() -> None:
    with pytest.raises(NegativeValueError) as excinfo:
        calculations.parse_quantity("-2")

    assert excinfo.value.field == "quantity"


def test_format_amount_rounds_half_up_without_grouping() -> None:
    assert calculations.format_amount(Decimal("1234567.005"), "$") == "$1234567.01"
    assert calculations.format_amount(Decimal("7.38")) == "7.38"
    assert calculations.format_amount(Decimal("3")) == "3.00"


def test_subtotal_of_nothing_is_zero() -> None:
    assert calculations.subtotal([]) == Decimal("0")


@pytest.mark.parametrize("text", ["1000000000000.01", "99999999999999999999999999999"])
def test_parse_price_rejects_amounts_above_limit(text: str) -> None:
    with pytest.raises(ValueTooLargeError) as excinfo:
        calculations.parse_price(text)

    assert excinfo.value.field == "price"


def test_parse_price_accepts_limit_and_keeps_plain_notation() -> None:
    assert calculations.parse_price(str(calculations.MAX_PRICE)) == calculations.MAX_PRICE
    assert str(calculations.parse_price("1000")) == "1000"
    assert calculations.parse_price(".5") == Decimal("0.5")


def test_parse_quantity_rejects_values_above_limit() -> None:
    with pytest.raises(ValueTooLargeError) as excinfo:
        calculations.parse_quantity(str(calculations.MAX_QUANTITY + 1))

    assert excinfo.value.field == "quantity"


def test_largest_accepted_line_still_rounds_to_cents() -> None:
    price = calculations.parse_price("999999999999.99")
    quantity = calculations.parse_quantity(str(calculations.MAX_QUANTITY))

    assert calculations.format_amount(price * quantity * Decimal("1.18")) == "1179999999999988200.00"
