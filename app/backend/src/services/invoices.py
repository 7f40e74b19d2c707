"""Invoice generation from a session ledger."""

from __future__ import annotations

import structlog

from app.backend.src.core.config import Settings, get_settings
from app.backend.src.core.errors import EmptyLedgerError
from app.backend.src.services.ledger import Ledger
from app.backend.src.services.metrics import invoice_generations_total
from app.backend.src.services.pdf_generation import (
    CustomerInfo,
    InvoicePdf,
    render_invoice_pdf,
)
from app.backend.src.services.storage import save_invoice

LOGGER = structlog.get_logger(__name__)


def generate_invoice(
    ledger: Ledger,
    customer: CustomerInfo | None = None,
    *,
    settings: Settings | None = None,
) -> InvoicePdf:
    """Render an invoice from the ledger's current state.

    Refuses an empty ledger with :class:`EmptyLedgerError` rather than
    producing a document with an empty table. When ``INVOICE_OUTPUT_DIR`` is
    set, a copy of the PDF is also written there.
    """

    settings = settings or get_settings()
    items = ledger.snapshot()
    if not items:
        invoice_generations_total.labels(status="empty").inc()
        LOGGER.warning("invoice_generation_refused", reason="empty_ledger")
        raise EmptyLedgerError()

    try:
        pdf = render_invoice_pdf(
            items,
            ledger.totals(),
            customer=customer,
            settings=settings,
        )
    except Exception as exc:
        invoice_generations_total.labels(status="failure").inc()
        LOGGER.error("invoice_generation_failed", error=str(exc))
        raise

    if settings.invoice_output_dir:
        path = save_invoice(pdf, settings.invoice_output_dir)
        LOGGER.info("invoice_saved", path=str(path))

    invoice_generations_total.labels(status="success").inc()
    return pdf


__all__ = ["generate_invoice"]
