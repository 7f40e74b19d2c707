"""Authentication collaborator for the dashboard.

There is no user store: :class:`SimulatedAuthenticator` only applies the
login and signup form rules and hands out an opaque session token. Swap in
another :class:`Authenticator` to talk to a real identity provider.
"""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

import structlog

from .config import get_settings
from .errors import InvalidEmailError, MissingCredentialsError, PasswordTooShortError

LOGGER = structlog.get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True, slots=True)
class Credentials:
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class Registration:
    name: str
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class AuthSession:
    """Result of a successful login or signup."""

    token: str
    email: str
    name: str | None = None


class Authenticator(Protocol):
    def authenticate(self, credentials: Credentials) -> AuthSession: ...

    def register(self, registration: Registration) -> AuthSession: ...


def _check_email(email: str) -> None:
    if "@" not in email:
        raise InvalidEmailError()


class SimulatedAuthenticator:
    """Accepts any well-formed credentials after an optional delay."""

    def __init__(self, delay_seconds: float | None = None) -> None:
        if delay_seconds is None:
            delay_seconds = get_settings().auth_delay_seconds
        self.delay_seconds = delay_seconds

    def _wait(self) -> None:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)

    def _issue(self, email: str, name: str | None = None) -> AuthSession:
        self._wait()
        return AuthSession(token=secrets.token_urlsafe(32), email=email, name=name)

    def authenticate(self, credentials: Credentials) -> AuthSession:
        email = (credentials.email or "").strip()
        if not email or not credentials.password:
            raise MissingCredentialsError()
        _check_email(email)

        session = self._issue(email)
        LOGGER.info("login_succeeded", email=email)
        return session

    def register(self, registration: Registration) -> AuthSession:
        name = (registration.name or "").strip()
        email = (registration.email or "").strip()
        if not name or not email or not registration.password:
            raise MissingCredentialsError()
        _check_email(email)
        if len(registration.password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(MIN_PASSWORD_LENGTH)

        session = self._issue(email, name)
        LOGGER.info("signup_succeeded", email=email)
        return session


@lru_cache()
def get_authenticator() -> Authenticator:
    """Return the process-wide authenticator."""

    return SimulatedAuthenticator()


__all__ = [
    "AuthSession",
    "Authenticator",
    "Credentials",
    "get_authenticator",
    "MIN_PASSWORD_LENGTH",
    "Registration",
    "SimulatedAuthenticator",
]
