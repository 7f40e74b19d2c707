"""Entrypoint for the FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import auth, health, invoices, products
from .core.errors import InvoiceError
from .core.logging import configure_logging


async def invoice_error_handler(request: Request, exc: InvoiceError) -> JSONResponse:
    """Return the error as a title/description notice."""

    return JSONResponse(status_code=exc.status_code, content={"detail": exc.as_notice()})


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Invoice Generator", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InvoiceError, invoice_error_handler)

    app.include_router(health.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(products.router, prefix="/api")
    app.include_router(invoices.router, prefix="/api")

    return app


app = create_app()
