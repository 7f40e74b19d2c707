"""Prometheus metric definitions for ledger and invoice activity."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

line_items_added_total = Counter(
    "line_items_added_total",
    "Total line items appended to session ledgers.",
)

invoice_generations_total = Counter(
    "invoice_generations_total",
    "Total invoice generation requests by outcome.",
    labelnames=["status"],
)

pdf_generation_seconds = Histogram(
    "pdf_generation_seconds",
    "Time spent rendering a single invoice PDF.",
)

__all__ = [
    "invoice_generations_total",
    "line_items_added_total",
    "pdf_generation_seconds",
]
