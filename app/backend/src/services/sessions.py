"""Per-session dashboard state."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

import structlog
from fastapi import Depends, Header

from app.backend.src.core.errors import UnknownSessionError
from app.backend.src.core.security import AuthSession
from app.backend.src.services.ledger import Ledger, SortOrder
from app.backend.src.services.pdf_generation import CustomerInfo

LOGGER = structlog.get_logger(__name__)


@dataclass
class DashboardSession:
    """State owned by one logged-in user: their ledger and view toggles."""

    auth: AuthSession
    customer: CustomerInfo
    ledger: Ledger = field(default_factory=Ledger)
    sort_order: SortOrder = "asc"

    def toggle_sort(self) -> SortOrder:
        self.sort_order = "desc" if self.sort_order == "asc" else "asc"
        return self.sort_order


class SessionRegistry:
    """Maps session tokens to dashboard state for the process lifetime.

    Each email holds at most one session; logging in again replaces the
    previous session and its ledger.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, DashboardSession] = {}
        self._tokens_by_email: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def open(self, auth: AuthSession) -> DashboardSession:
        previous = self._tokens_by_email.get(auth.email.lower())
        if previous is not None:
            self.close(previous)

        defaults = CustomerInfo.from_settings()
        customer = CustomerInfo(
            name=auth.name or defaults.name,
            email=auth.email,
            invoice_date=defaults.invoice_date,
        )
        session = DashboardSession(auth=auth, customer=customer)
        self._sessions[auth.token] = session
        self._tokens_by_email[auth.email.lower()] = auth.token
        LOGGER.info("session_opened", email=auth.email)
        return session

    def get(self, token: str | None) -> DashboardSession:
        session = self._sessions.get(token) if token else None
        if session is None:
            raise UnknownSessionError()
        return session

    def close(self, token: str) -> None:
        session = self._sessions.pop(token, None)
        if session is not None:
            email_key = session.auth.email.lower()
            if self._tokens_by_email.get(email_key) == token:
                del self._tokens_by_email[email_key]
            LOGGER.info("session_closed", email=session.auth.email, items=len(session.ledger))


@lru_cache()
def get_session_registry() -> SessionRegistry:
    """Return the in-memory registry shared by all requests."""

    return SessionRegistry()


def get_current_session(
    x_session_token: str | None = Header(default=None),
    registry: SessionRegistry = Depends(get_session_registry),
) -> DashboardSession:
    """FastAPI dependency resolving the caller's dashboard session."""

    return registry.get(x_session_token)


__all__ = [
    "DashboardSession",
    "SessionRegistry",
    "get_current_session",
    "get_session_registry",
]
