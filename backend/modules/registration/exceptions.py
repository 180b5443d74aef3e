"""
Registration module exceptions.

InvalidCode and ExpiredCode both point at the ``code`` field and differ in
``is_expired`` so a client can offer "resend" rather than "retype".
"""

from shared.exceptions import ValidationError
from shared.messages import render_message


class InvalidCodeError(ValidationError):
    """Raised when no stored code matches the email and code."""

    def __init__(self, code: str):
        details = {"is_expired": False}
        super().__init__(
            render_message("INVALID_CODE", field="code"),
            code="INVALID_CODE",
            details=details,
            field="code",
            value=code,
        )


class ExpiredCodeError(ValidationError):
    """Raised when the matching code is past its expiry."""

    def __init__(self, code: str):
        details = {"is_expired": True}
        super().__init__(
            render_message("EXPIRED_CODE", field="code"),
            code="EXPIRED_CODE",
            details=details,
            field="code",
            value=code,
        )


class CooldownActiveError(ValidationError):
    """Raised when a code for the email is still live."""

    def __init__(self, email: str, seconds_left: int):
        details = {"seconds_left": seconds_left}
        super().__init__(
            render_message("COOLDOWN_ACTIVE", field="email", **details),
            code="COOLDOWN_ACTIVE",
            details=details,
            field="email",
            value=email,
        )
        self.seconds_left = seconds_left


class RegistrationNotConfirmedError(ValidationError):
    """Raised on signup when the email has no confirmed code."""

    def __init__(self, email: str):
        super().__init__(
            render_message("REGISTRATION_NOT_CONFIRMED", field="email"),
            code="REGISTRATION_NOT_CONFIRMED",
            field="email",
            value=email,
        )
