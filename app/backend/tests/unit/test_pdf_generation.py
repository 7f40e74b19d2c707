"""Unit tests for invoice layout and PDF rendering."""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest

from app.backend.src.core.config import Settings
from app.backend.src.core.errors import EmptyLedgerError
from app.backend.src.services.ledger import Ledger, LedgerTotals
from app.backend.src.services.pdf_generation import (
    CONTENT_FLOOR,
    CONTINUATION_TABLE_TOP,
    FOOTER_BOTTOM,
    HEADER_ROW_HEIGHT,
    PAGE_HEIGHT,
    ROW_HEIGHT,
    TABLE_TOP,
    TOTALS_HEIGHT,
    TOTALS_MARGIN,
    CustomerInfo,
    compute_layout,
    render_invoice_pdf,
)


def _ledger_with(count: int) -> Ledger:
    ledger = Ledger(gst_rate=Decimal("0.18"))
    for idx in range(count):
        ledger.add_item(f"Product {idx:03d}", "12.50", str(idx + 1))
    return ledger


@pytest.mark.parametrize("rows", [1, 3, 12])
def test_totals_band_follows_table_end(rows: int) -> None:
    layout = compute_layout(rows)

    assert len(layout.pages) == 1
    assert layout.table_end == PAGE_HEIGHT - TABLE_TOP - HEADER_ROW_HEIGHT - rows * ROW_HEIGHT
    assert layout.totals_top == layout.table_end - TOTALS_MARGIN
    assert layout.page_count == 1


def test_totals_band_moves_down_as_rows_are_added() -> None:
    short = compute_layout(2)
    longer = compute_layout(5)

    assert short.totals_top - longer.totals_top == pytest.approx(3 * ROW_HEIGHT)


@pytest.mark.parametrize("rows", range(0, 70, 3))
def test_layout_never_overlaps_footer(rows: int) -> None:
    layout = compute_layout(rows)

    for page in layout.pages:
        assert page.bottom >= CONTENT_FLOOR
    assert layout.totals_top - TOTALS_HEIGHT >= CONTENT_FLOOR
    assert layout.footer_y == FOOTER_BOTTOM


def test_long_tables_continue_on_following_pages() -> None:
    layout = compute_layout(40)

    assert len(layout.pages) >= 2
    assert layout.pages[0].start == 0
    assert layout.pages[-1].stop == 40
    for previous, current in zip(layout.pages, layout.pages[1:]):
        assert current.start == previous.stop
        assert current.table_top == PAGE_HEIGHT - CONTINUATION_TABLE_TOP
    assert layout.page_count >= len(layout.pages)


def test_totals_move_to_new_page_when_they_do_not_fit() -> None:
    layout = compute_layout(15)

    assert len(layout.pages) == 1
    assert layout.totals_page == 1
    assert layout.totals_top == PAGE_HEIGHT - CONTINUATION_TABLE_TOP


def test_compute_layout_rejects_negative_rows() -> None:
    with pytest.raises(ValueError):
        compute_layout(-1)


def test_render_invoice_pdf_returns_pdf_bytes() -> None:
    ledger = _ledger_with(3)
    customer = CustomerInfo(name="Ada", email="ada@example.com", invoice_date="12/04/23")

    pdf = render_invoice_pdf(
        ledger.snapshot(),
        ledger.totals(),
        customer=customer,
        settings=Settings(),
    )

    assert pdf.filename == "invoice.pdf"
    assert pdf.content.startswith(b"%PDF")
    assert pdf.page_count == 1


def test_render_invoice_pdf_paginates_long_ledgers() -> None:
    ledger = _ledger_with(40)

    pdf = render_invoice_pdf(ledger.snapshot(), ledger.totals(), filename="big.pdf")

    assert pdf.filename == "big.pdf"
    assert pdf.page_count == compute_layout(40).page_count
    assert pdf.page_count > 1


def test_render_invoice_pdf_handles_long_names() -> None:
    ledger = Ledger(gst_rate=Decimal("0.18"))
    ledger.add_item("X" * 300, "1", "1")

    pdf = render_invoice_pdf(ledger.snapshot(), ledger.totals())

    assert pdf.content.startswith(b"%PDF")


def test_render_invoice_pdf_refuses_empty_ledger() -> None:
    zero = Decimal("0.00")

    with pytest.raises(EmptyLedgerError):
        render_invoice_pdf((), LedgerTotals(subtotal=zero, tax=zero, total=zero))


def test_customer_defaults_come_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CUSTOMER_NAME", "Grace")
    monkeypatch.setenv("INVOICE_DATE", "01/02/24")

    customer = CustomerInfo.from_settings(Settings())

    assert customer.name == "Grace"
    assert customer.email == "example@email.com"
    assert customer.invoice_date == "01/02/24"


def test_gst_label_reflects_rate() -> None:
    assert Settings().gst_label == "GST (18%)"
    assert Settings(GST_RATE="0.125").gst_label == "GST (12.5%)"
