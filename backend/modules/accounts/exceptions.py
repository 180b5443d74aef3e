"""
Accounts module exceptions.

These exceptions are raised by the accounts module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import NotFoundError, ValidationError
from shared.messages import render_message


class AccountNotFoundError(NotFoundError):
    """Raised when no account matches the given email or id."""

    def __init__(self, value: str, field: str = "email"):
        super().__init__(
            render_message("NOT_FOUND", field=field),
            code="NOT_FOUND",
            field=field,
            value=value,
        )


class AlreadyRegisteredError(ValidationError):
    """Raised when an account with the email already exists."""

    def __init__(self, email: str):
        super().__init__(
            render_message("ALREADY_REGISTERED", field="email"),
            code="ALREADY_REGISTERED",
            field="email",
            value=email,
        )


class InvalidCredentialsError(ValidationError):
    """
    Raised when a password does not match the stored hash.

    The password itself is never echoed back in the error.
    """

    def __init__(self, field: str = "password"):
        super().__init__(
            render_message("INVALID_CREDENTIALS", field=field),
            code="INVALID_CREDENTIALS",
            field=field,
        )


class PasswordMismatchError(ValidationError):
    """Raised when the new password and its confirmation differ."""

    def __init__(self):
        super().__init__(
            render_message("MISMATCH", field="confirm_new_password"),
            code="MISMATCH",
            field="confirm_new_password",
        )


class PasswordUnchangedError(ValidationError):
    """Raised when the new password equals the current one."""

    def __init__(self):
        super().__init__(
            render_message("NO_OP_CHANGE", field="new_password"),
            code="NO_OP_CHANGE",
            field="new_password",
        )


class InvalidActivationLinkError(ValidationError):
    """Raised when no account carries the given activation link."""

    def __init__(self, activation_link: str):
        super().__init__(
            render_message("INVALID_ACTIVATION_LINK", field="activation_link"),
            code="INVALID_ACTIVATION_LINK",
            field="activation_link",
            value=activation_link,
        )
