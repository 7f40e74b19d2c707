"""Invoice download endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from app.backend.src.services.invoices import generate_invoice
from app.backend.src.services.sessions import DashboardSession, get_current_session

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("/pdf")
def download_invoice(session: DashboardSession = Depends(get_current_session)) -> Response:
    """Render the session ledger as a PDF attachment."""

    pdf = generate_invoice(session.ledger, session.customer)
    return Response(
        content=pdf.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf.filename}"'},
    )
