"""Calculation helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Protocol

from app.backend.src.core.errors import (
    NegativeValueError,
    NotANumberError,
    ValueTooLargeError,
)

CENT = Decimal("0.01")
# Plain decimal notation only: no exponents, underscores or NaN/Infinity.
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
MAX_PRICE = Decimal("1000000000000")
MAX_QUANTITY = 1_000_000


class Priced(Protocol):
    price: Decimal
    quantity: int


def _parse_decimal(field: str, text: str) -> Decimal:
    candidate = text.strip()
    if not NUMBER_PATTERN.fullmatch(candidate):
        raise NotANumberError(field, "Price and quantity must be valid numbers.")
    try:
        return Decimal(candidate)
    except InvalidOperation as exc:
        raise NotANumberError(
            field, "Price and quantity must be valid numbers."
        ) from exc


def parse_price(text: str) -> Decimal:
    """Parse a unit price typed into the product form."""
    value = _parse_decimal("price", text)
    if value < 0:
        raise NegativeValueError("price", "Price cannot be negative.")
    if value > MAX_PRICE:
        raise ValueTooLargeError("price", f"Price cannot exceed {MAX_PRICE}.")
    return value


def parse_quantity(text: str) -> int:
    """Parse a quantity; only whole numbers are accepted."""
    value = _parse_decimal("quantity", text)
    if value != value.to_integral_value():
        raise NotANumberError("quantity", "Quantity must be a whole number.")
    if value < 0:
        raise NegativeValueError("quantity", "Quantity cannot be negative.")
    if value > MAX_QUANTITY:
        raise ValueTooLargeError("quantity", f"Quantity cannot exceed {MAX_QUANTITY}.")
    return int(value)


def line_total(item: Priced) -> Decimal:
    return item.price * item.quantity


def subtotal(items: Iterable[Priced]) -> Decimal:
    """Sum of price times quantity; ``Decimal(0)`` for no items."""
    return sum((line_total(item) for item in items), Decimal("0"))


def quantize_amount(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal, prefix: str = "") -> str:
    """Render an amount with two decimals and no digit grouping."""
    return f"{prefix}{quantize_amount(value):.2f}"


__all__ = [
    "format_amount",
    "line_total",
    "parse_price",
    "parse_quantity",
    "quantize_amount",
    "subtotal",
]
