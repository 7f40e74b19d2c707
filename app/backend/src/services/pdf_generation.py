"""Utilities for generating invoice PDFs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from io import BytesIO
from time import perf_counter

import structlog
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from app.backend.src.core.config import Settings, get_settings
from app.backend.src.core.errors import EmptyLedgerError
from app.backend.src.services.calculations import format_amount
from app.backend.src.services.ledger import LedgerTotals, LineItem
from app.backend.src.services.metrics import pdf_generation_seconds

LOGGER = structlog.get_logger(__name__)

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 42

# Vertical offsets are measured down from the top edge of the page.
HEADER_TOP = 42
CUSTOMER_TOP = 142
CUSTOMER_HEIGHT = 113
TABLE_TOP = 283
CONTINUATION_TABLE_TOP = 142

HEADER_ROW_HEIGHT = 26
ROW_HEIGHT = 22
TOTALS_MARGIN = 28
TOTALS_HEIGHT = 110
TOTALS_WIDTH = 213

# Footer is pinned relative to the bottom edge.
FOOTER_BOTTOM = 42
FOOTER_HEIGHT = 71
FOOTER_GAP = 16
CONTENT_FLOOR = FOOTER_BOTTOM + FOOTER_HEIGHT + FOOTER_GAP

FOOTER_LINES = (
    "We are pleased to provide any further information you may require and look forward to assisting with",
    "your next order. Rest assured, it will receive our prompt and dedicated attention.",
)
TABLE_HEADERS = ("Product", "Qty", "Rate", "Total Amount")
# Relative column widths: product, quantity, rate, line total.
COLUMN_WEIGHTS = (60, 30, 40, 50)
CELL_PADDING = 12

DARK_PANEL = HexColor("#1C2436")
TABLE_HEADER_FILL = HexColor("#232936")
ACCENT = HexColor("#CBFB45")
TOTAL_HIGHLIGHT = HexColor("#0072E5")
PRIMARY_TEXT = HexColor("#212529")
MUTED_TEXT = HexColor("#646464")
SUBTLE_TEXT = HexColor("#808080")
LIGHT_PANEL = HexColor("#FAFAFA")
ROW_SHADE = HexColor("#F1F3F5")
WHITE = HexColor("#FFFFFF")
BLACK = HexColor("#000000")


@dataclass(frozen=True, slots=True)
class InvoicePdf:
    """Representation of a generated invoice PDF."""

    filename: str
    content: bytes
    page_count: int


@dataclass(frozen=True, slots=True)
class CustomerInfo:
    """Details printed in the customer band."""

    name: str
    email: str
    invoice_date: str

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CustomerInfo":
        settings = settings or get_settings()
        invoice_date = settings.invoice_date or date.today().strftime("%d/%m/%y")
        return cls(
            name=settings.customer_name,
            email=settings.customer_email,
            invoice_date=invoice_date,
        )


@dataclass(frozen=True, slots=True)
class TablePage:
    """Slice of table rows drawn on one page."""

    page_index: int
    table_top: float
    start: int
    stop: int

    @property
    def row_count(self) -> int:
        return self.stop - self.start

    @property
    def bottom(self) -> float:
        return self.table_top - HEADER_ROW_HEIGHT - self.row_count * ROW_HEIGHT


@dataclass(frozen=True, slots=True)
class InvoiceLayout:
    """Vertical positions (reportlab coordinates, origin bottom-left)."""

    pages: tuple[TablePage, ...]
    table_end: float
    totals_page: int
    totals_top: float
    footer_y: float = FOOTER_BOTTOM

    @property
    def page_count(self) -> int:
        return self.totals_page + 1


def compute_layout(row_count: int, page_height: float = PAGE_HEIGHT) -> InvoiceLayout:
    """Lay out the table and totals band for ``row_count`` rows.

    Every position is a constant except the totals band, which sits
    ``TOTALS_MARGIN`` below wherever the table ends. Rows that would run into
    the footer continue on the next page under a repeated header row.
    """

    if row_count < 0:
        raise ValueError("row_count must be non-negative")

    pages: list[TablePage] = []
    table_top = page_height - TABLE_TOP
    start = 0
    while True:
        capacity = int((table_top - HEADER_ROW_HEIGHT - CONTENT_FLOOR) // ROW_HEIGHT)
        stop = min(row_count, start + capacity)
        pages.append(TablePage(len(pages), table_top, start, stop))
        start = stop
        if start >= row_count:
            break
        table_top = page_height - CONTINUATION_TABLE_TOP

    table_end = pages[-1].bottom
    totals_page = pages[-1].page_index
    totals_top = table_end - TOTALS_MARGIN
    if totals_top - TOTALS_HEIGHT < CONTENT_FLOOR:
        totals_page += 1
        totals_top = page_height - CONTINUATION_TABLE_TOP

    return InvoiceLayout(
        pages=tuple(pages),
        table_end=table_end,
        totals_page=totals_page,
        totals_top=totals_top,
    )


def _column_edges(width: float) -> list[float]:
    usable = width - 2 * MARGIN
    edges = [float(MARGIN)]
    total_weight = sum(COLUMN_WEIGHTS)
    for weight in COLUMN_WEIGHTS:
        edges.append(edges[-1] + usable * weight / total_weight)
    return edges


def _fit_text(text: str, font: str, size: float, max_width: float) -> str:
    if stringWidth(text, font, size) <= max_width:
        return text
    ellipsis = "..."
    while text and stringWidth(text + ellipsis, font, size) > max_width:
        text = text[:-1]
    return text + ellipsis


def render_invoice_pdf(
    items: Sequence[LineItem],
    totals: LedgerTotals,
    *,
    customer: CustomerInfo | None = None,
    filename: str | None = None,
    settings: Settings | None = None,
) -> InvoicePdf:
    """Render the invoice for a ledger snapshot and return the PDF bytes."""

    if not items:
        raise EmptyLedgerError()

    settings = settings or get_settings()
    customer = customer or CustomerInfo.from_settings(settings)
    filename = filename or settings.invoice_filename
    prefix = settings.currency_prefix

    start = perf_counter()
    buffer = BytesIO()
    pdf_canvas = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4
    layout = compute_layout(len(items), height)
    edges = _column_edges(width)

    def draw_brand_header() -> None:
        top = height - HEADER_TOP
        pdf_canvas.setFillColor(BLACK)
        pdf_canvas.rect(MARGIN + 15, top - 42, 42, 42, fill=1, stroke=0)

        pdf_canvas.setFont("Helvetica-Bold", 16)
        pdf_canvas.setFillColor(BLACK)
        pdf_canvas.drawString(MARGIN + 71, top - 20, settings.brand_name)
        pdf_canvas.setFont("Helvetica", 12)
        pdf_canvas.setFillColor(SUBTLE_TEXT)
        pdf_canvas.drawString(MARGIN + 71, top - 37, settings.brand_tagline)

        pdf_canvas.setFont("Helvetica-Bold", 22)
        pdf_canvas.setFillColor(PRIMARY_TEXT)
        pdf_canvas.drawRightString(width - MARGIN, top - 28, "INVOICE GENERATOR")
        pdf_canvas.setFont("Helvetica", 12)
        pdf_canvas.drawRightString(width - MARGIN, top - 52, f"Invoice for {customer.name}")

    def draw_customer_band() -> None:
        top = height - CUSTOMER_TOP
        bottom = top - CUSTOMER_HEIGHT
        pdf_canvas.setFillColor(DARK_PANEL)
        pdf_canvas.roundRect(MARGIN, bottom, width - 2 * MARGIN, CUSTOMER_HEIGHT, 8, fill=1, stroke=0)

        pdf_canvas.setFillColor(WHITE)
        pdf_canvas.setFont("Helvetica", 12)
        pdf_canvas.drawString(MARGIN + 28, top - 42, "Name")
        pdf_canvas.setFillColor(ACCENT)
        pdf_canvas.setFont("Helvetica-Bold", 14)
        pdf_canvas.drawString(MARGIN + 28, top - 70, customer.name)

        pill_width = 150
        pill_x = width - MARGIN - pill_width - 20
        pdf_canvas.setFillColor(WHITE)
        pdf_canvas.roundRect(pill_x, top - 50, pill_width, 22, 11, fill=1, stroke=0)
        pdf_canvas.setFillColor(PRIMARY_TEXT)
        pdf_canvas.setFont("Helvetica", 10)
        pdf_canvas.drawCentredString(
            pill_x + pill_width / 2,
            top - 42,
            _fit_text(customer.email, "Helvetica", 10, pill_width - 16),
        )

        pdf_canvas.setFillColor(WHITE)
        pdf_canvas.drawString(pill_x, top - 75, f"Date: {customer.invoice_date}")

    def draw_table_header(top: float) -> None:
        pdf_canvas.setFillColor(TABLE_HEADER_FILL)
        pdf_canvas.rect(MARGIN, top - HEADER_ROW_HEIGHT, width - 2 * MARGIN, HEADER_ROW_HEIGHT, fill=1, stroke=0)
        pdf_canvas.setFillColor(WHITE)
        pdf_canvas.setFont("Helvetica-Bold", 12)
        baseline = top - HEADER_ROW_HEIGHT + 9
        pdf_canvas.drawString(edges[0] + CELL_PADDING, baseline, TABLE_HEADERS[0])
        for idx, header in enumerate(TABLE_HEADERS[1:], start=2):
            pdf_canvas.drawRightString(edges[idx] - CELL_PADDING, baseline, header)

    def draw_rows(page: TablePage) -> None:
        y_position = page.table_top - HEADER_ROW_HEIGHT
        name_width = edges[1] - edges[0] - 2 * CELL_PADDING
        for idx in range(page.start, page.stop):
            item = items[idx]
            if idx % 2 == 1:
                pdf_canvas.setFillColor(ROW_SHADE)
                pdf_canvas.rect(MARGIN, y_position - ROW_HEIGHT, width - 2 * MARGIN, ROW_HEIGHT, fill=1, stroke=0)

            baseline = y_position - ROW_HEIGHT + 7
            pdf_canvas.setFillColor(PRIMARY_TEXT)
            pdf_canvas.setFont("Helvetica", 11)
            pdf_canvas.drawString(
                edges[0] + CELL_PADDING,
                baseline,
                _fit_text(item.name, "Helvetica", 11, name_width),
            )
            pdf_canvas.drawRightString(edges[2] - CELL_PADDING, baseline, str(item.quantity))
            pdf_canvas.drawRightString(edges[3] - CELL_PADDING, baseline, format_amount(item.price, prefix))
            pdf_canvas.drawRightString(edges[4] - CELL_PADDING, baseline, format_amount(item.total, prefix))
            y_position -= ROW_HEIGHT

    def draw_totals(top: float) -> None:
        box_x = width - MARGIN - TOTALS_WIDTH
        label_x = box_x + 24
        value_x = box_x + TOTALS_WIDTH - 24
        pdf_canvas.setFillColor(LIGHT_PANEL)
        pdf_canvas.roundRect(box_x, top - TOTALS_HEIGHT, TOTALS_WIDTH, TOTALS_HEIGHT, 8, fill=1, stroke=0)

        pdf_canvas.setFont("Helvetica", 12)
        pdf_canvas.setFillColor(MUTED_TEXT)
        pdf_canvas.drawString(label_x, top - 30, "Total Charges")
        pdf_canvas.drawRightString(value_x, top - 30, format_amount(totals.subtotal, prefix))
        pdf_canvas.drawString(label_x, top - 56, settings.gst_label)
        pdf_canvas.drawRightString(value_x, top - 56, format_amount(totals.tax, prefix))

        pdf_canvas.setFont("Helvetica-Bold", 14)
        pdf_canvas.setFillColor(PRIMARY_TEXT)
        pdf_canvas.drawString(label_x, top - 88, "Total Amount")
        pdf_canvas.setFillColor(TOTAL_HIGHLIGHT)
        pdf_canvas.drawRightString(value_x, top - 88, format_amount(totals.total, prefix))

    def draw_footer() -> None:
        pdf_canvas.setFillColor(DARK_PANEL)
        pdf_canvas.roundRect(MARGIN, layout.footer_y, width - 2 * MARGIN, FOOTER_HEIGHT, 8, fill=1, stroke=0)
        pdf_canvas.setFont("Helvetica", 9)
        pdf_canvas.setFillColor(WHITE)
        line_y = layout.footer_y + FOOTER_HEIGHT - 28
        for line in FOOTER_LINES:
            pdf_canvas.drawCentredString(width / 2, line_y, line)
            line_y -= 14

    for page_index in range(layout.page_count):
        if page_index:
            pdf_canvas.showPage()
        draw_brand_header()
        if page_index == 0:
            draw_customer_band()
        if page_index < len(layout.pages):
            page = layout.pages[page_index]
            draw_table_header(page.table_top)
            draw_rows(page)
        if page_index == layout.totals_page:
            draw_totals(layout.totals_top)
        draw_footer()

    pdf_canvas.save()

    pdf_bytes = buffer.getvalue()
    pdf_generation_seconds.observe(perf_counter() - start)
    LOGGER.info(
        "invoice_pdf_rendered",
        filename=filename,
        items=len(items),
        pages=layout.page_count,
        size=len(pdf_bytes),
    )
    return InvoicePdf(filename=filename, content=pdf_bytes, page_count=layout.page_count)


__all__ = [
    "CustomerInfo",
    "InvoiceLayout",
    "InvoicePdf",
    "TablePage",
    "compute_layout",
    "render_invoice_pdf",
]
