"""Domain errors surfaced to users as notices."""

from __future__ import annotations


class InvoiceError(Exception):
    """Base class for recoverable, user-facing failures."""

    title = "Something went wrong"
    status_code = 400

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description

    def as_notice(self) -> dict[str, str]:
        return {"title": self.title, "description": self.description}


class ValidationError(InvoiceError):
    """A line item could not be built from the submitted form texts."""

    title = "Invalid input"

    def __init__(self, field: str, description: str) -> None:
        super().__init__(description)
        self.field = field


class EmptyFieldError(ValidationError):
    title = "All fields are required"


class NotANumberError(ValidationError):
    pass


class NegativeValueError(ValidationError):
    pass


class ValueTooLargeError(ValidationError):
    pass


class EmptyLedgerError(InvoiceError):
    """Invoice generation was requested for a ledger with no items."""

    title = "No products"

    def __init__(
        self,
        description: str = "Please add at least one product to generate an invoice.",
    ) -> None:
        super().__init__(description)


class AuthError(InvoiceError):
    title = "Authentication failed"


class MissingCredentialsError(AuthError):
    title = "All fields are required"

    def __init__(self) -> None:
        super().__init__("Please fill in all fields to continue.")


class InvalidEmailError(AuthError):
    title = "Invalid email"

    def __init__(self) -> None:
        super().__init__("Please enter a valid email address.")


class PasswordTooShortError(AuthError):
    title = "Password too short"

    def __init__(self, minimum: int) -> None:
        super().__init__(f"Password must be at least {minimum} characters long.")
        self.minimum = minimum


class UnknownSessionError(AuthError):
    title = "Session expired"
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Please log in again to continue.")


__all__ = [
    "AuthError",
    "EmptyFieldError",
    "EmptyLedgerError",
    "InvalidEmailError",
    "InvoiceError",
    "MissingCredentialsError",
    "NegativeValueError",
    "NotANumberError",
    "PasswordTooShortError",
    "UnknownSessionError",
    "ValidationError",
    "ValueTooLargeError",
]
