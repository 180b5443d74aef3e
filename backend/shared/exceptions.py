"""
Base exception classes for the identity backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any

from .messages import render_message


class IdentityError(Exception):
    """
    Base exception for all identity errors.

    All custom exceptions should inherit from this class. Errors that point
    at a specific client input carry the field name and the offending value.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        field: Optional[str] = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        self.field = field
        self.value = value

    def localized(self, locale: str) -> str:
        """Render this error's message in another catalog locale."""
        return render_message(self.code, field=self.field, locale=locale, **self.details)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        result: dict[str, Any] = {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }
        if self.field is not None:
            result["field"] = self.field
            result["value"] = self.value
        return result


class NotFoundError(IdentityError):
    """Resource not found."""

    pass


class ValidationError(IdentityError):
    """Input validation failed."""

    pass


class AuthenticationError(IdentityError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ExternalServiceError(IdentityError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
