"""Storage helpers for invoice artifacts."""

from __future__ import annotations

from pathlib import Path

from app.backend.src.services.pdf_generation import InvoicePdf


def save_invoice(pdf: InvoicePdf, directory: str | Path) -> Path:
    """Persist the PDF to local storage and return its path."""

    storage_dir = Path(directory)
    storage_dir.mkdir(parents=True, exist_ok=True)

    destination = storage_dir / Path(pdf.filename).name
    if destination.exists():
        destination.unlink()

    destination.write_bytes(pdf.content)
    return destination
