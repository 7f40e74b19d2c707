"""Product entry endpoints backed by the session ledger."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query, status

from app.backend.src.schemas.invoice import ProductListRead, SortOrderRead, TotalsRead
from app.backend.src.schemas.line_item import LineItemCreate, LineItemRead
from app.backend.src.services.sessions import DashboardSession, get_current_session

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=LineItemRead, status_code=status.HTTP_201_CREATED)
def add_product(
    payload: LineItemCreate,
    session: DashboardSession = Depends(get_current_session),
) -> LineItemRead:
    """Append a product to the caller's ledger."""

    item = session.ledger.add_item(payload.name, payload.price, payload.quantity)
    return LineItemRead.from_item(item)


@router.get("", response_model=ProductListRead)
def list_products(
    order: Literal["asc", "desc"] | None = Query(default=None),
    session: DashboardSession = Depends(get_current_session),
) -> ProductListRead:
    """Return products sorted by name along with the invoice totals.

    Without ``order`` the session's current sort toggle is used.
    """

    effective_order = order or session.sort_order
    ledger = session.ledger
    return ProductListRead(
        order=effective_order,
        items=[LineItemRead.from_item(item) for item in ledger.list_items(effective_order)],
        totals=TotalsRead.from_totals(ledger.totals(), ledger.gst_rate),
    )


@router.post("/sort/toggle", response_model=SortOrderRead)
def toggle_sort(session: DashboardSession = Depends(get_current_session)) -> SortOrderRead:
    return SortOrderRead(order=session.toggle_sort())
