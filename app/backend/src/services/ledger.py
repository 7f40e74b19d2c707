"""In-memory ledger of invoice line items."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

import structlog

from app.backend.src.core.config import get_settings
from app.backend.src.core.errors import EmptyFieldError
from app.backend.src.services import calculations
from app.backend.src.services.metrics import line_items_added_total

LOGGER = structlog.get_logger(__name__)

SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True, slots=True)
class LineItem:
    """One product entry on the invoice."""

    id: int
    name: str
    price: Decimal
    quantity: int

    @property
    def total(self) -> Decimal:
        return calculations.line_total(self)


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    """Totals rounded to cents for display."""

    subtotal: Decimal
    tax: Decimal
    total: Decimal


class Ledger:
    """Append-only collection of line items with derived totals.

    Items keep their insertion order; sorted views are computed on demand.
    Identifiers come from a counter owned by the ledger so they are unique
    for its lifetime and predictable in tests.
    """

    def __init__(self, gst_rate: Decimal | None = None) -> None:
        self.gst_rate = get_settings().gst_rate if gst_rate is None else gst_rate
        self._items: list[LineItem] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, name: str, price_text: str, quantity_text: str) -> LineItem:
        """Validate the form texts and append a new item."""

        for field, text in (
            ("name", name),
            ("price", price_text),
            ("quantity", quantity_text),
        ):
            if text is None or not text.strip():
                raise EmptyFieldError(field, f"Product {field} is required.")

        price = calculations.parse_price(price_text)
        quantity = calculations.parse_quantity(quantity_text)
        item = LineItem(id=next(self._ids), name=name, price=price, quantity=quantity)
        self._items.append(item)
        line_items_added_total.inc()
        LOGGER.info(
            "line_item_added",
            item_id=item.id,
            name=item.name,
            price=str(item.price),
            quantity=item.quantity,
        )
        return item

    def list_items(self, order: SortOrder = "asc") -> list[LineItem]:
        """Return items sorted by name; equal names keep insertion order."""

        if order not in ("asc", "desc"):
            raise ValueError(f"Unknown sort order: {order!r}")
        return sorted(self._items, key=lambda item: item.name, reverse=order == "desc")

    def snapshot(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    def subtotal(self) -> Decimal:
        return calculations.subtotal(self._items)

    def tax(self) -> Decimal:
        return self.subtotal() * self.gst_rate

    def total(self) -> Decimal:
        return self.subtotal() + self.tax()

    def totals(self) -> LedgerTotals:
        subtotal = calculations.quantize_amount(self.subtotal())
        tax = calculations.quantize_amount(self.tax())
        return LedgerTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


__all__ = ["Ledger", "LedgerTotals", "LineItem", "SortOrder"]
