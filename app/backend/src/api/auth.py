"""Login, signup and logout endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Response, status

from app.backend.src.core.security import (
    Authenticator,
    Credentials,
    Registration,
    get_authenticator,
)
from app.backend.src.schemas.user import LoginRequest, SessionRead, SignupRequest
from app.backend.src.services.sessions import SessionRegistry, get_session_registry

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=SessionRead)
def login(
    payload: LoginRequest,
    authenticator: Authenticator = Depends(get_authenticator),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionRead:
    """Validate the login form and open a dashboard session."""

    auth = authenticator.authenticate(
        Credentials(email=payload.email, password=payload.password)
    )
    registry.open(auth)
    return SessionRead(token=auth.token, email=auth.email, name=auth.name)


@router.post("/signup", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    authenticator: Authenticator = Depends(get_authenticator),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionRead:
    """Validate the signup form and open a dashboard session."""

    auth = authenticator.register(
        Registration(name=payload.name, email=payload.email, password=payload.password)
    )
    registry.open(auth)
    return SessionRead(token=auth.token, email=auth.email, name=auth.name)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    x_session_token: str | None = Header(default=None),
    registry: SessionRegistry = Depends(get_session_registry),
) -> Response:
    """Drop the session and its ledger."""

    if x_session_token:
        registry.close(x_session_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
