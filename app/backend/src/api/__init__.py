"""Public API routers exposed by the FastAPI application."""

from . import auth, health, invoices, products

__all__ = [
    "auth",
    "health",
    "invoices",
    "products",
]
