"""Invoice schemas."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel

from app.backend.src.services.ledger import LedgerTotals

from .line_item import LineItemRead


class TotalsRead(BaseModel):
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    gst_rate: Decimal

    @classmethod
    def from_totals(cls, totals: LedgerTotals, gst_rate: Decimal) -> "TotalsRead":
        return cls(
            subtotal=totals.subtotal,
            tax=totals.tax,
            total=totals.total,
            gst_rate=gst_rate,
        )


class ProductListRead(BaseModel):
    """Sorted ledger view with its totals."""

    order: Literal["asc", "desc"]
    items: list[LineItemRead] = []
    totals: TotalsRead


class SortOrderRead(BaseModel):
    order: Literal["asc", "desc"]
