"""Pydantic schemas for login and signup."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class SignupRequest(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""


class SessionRead(BaseModel):
    """Token returned after a successful login or signup."""

    token: str
    email: str
    name: str | None = None
