"""
Sessions module exceptions.

Every refresh and access-token failure surfaces as the same
UnauthorizedError so callers cannot tell which check rejected the token.
"""

from shared.exceptions import AuthenticationError
from shared.messages import render_message


class UnauthorizedError(AuthenticationError):
    """Raised when a token is missing, unknown, expired or invalid."""

    def __init__(self, field: str = "refresh_token"):
        super().__init__(
            render_message("UNAUTHORIZED", field=field),
            code="UNAUTHORIZED",
            field=field,
        )
