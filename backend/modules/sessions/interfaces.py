"""
Sessions module interfaces.

Other modules should depend on ISessionIssuer, not the concrete
implementation. The session store and token signer are external
collaborators.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.accounts.models import UserAccount
from .models import AuthResult, SessionRecord, TokenClaims, TokenPair


@runtime_checkable
class ISessionStore(Protocol):
    """Refresh-token persistence, one record per user id."""

    def save(self, user_id: str, refresh_token: str) -> SessionRecord:
        """Store the token for a user, replacing any previous one."""
        ...

    def find_by_value(self, refresh_token: str) -> Optional[SessionRecord]: ...

    def remove_by_value(self, refresh_token: str) -> Optional[SessionRecord]:
        """
        Delete the record holding this token.

        Returns:
            The removed record, or None if nothing matched. When two callers
            race on the same token only one of them receives the record.
        """
        ...


@runtime_checkable
class ITokenSigner(Protocol):
    """Signs and validates access and refresh tokens."""

    def issue_pair(self, claims: TokenClaims) -> TokenPair: ...

    def validate_access(self, token: str) -> Optional[TokenClaims]: ...

    def validate_refresh(self, token: str) -> Optional[TokenClaims]: ...


@runtime_checkable
class ISessionIssuer(Protocol):
    """
    Interface for session lifecycle operations.

    All token failures raise UnauthorizedError.
    """

    async def issue_for_account(self, account: UserAccount) -> AuthResult: ...

    async def sign_up(self, email: str, password: str) -> AuthResult:
        """
        Create an account for an email with a confirmed registration code.

        Raises:
            AlreadyRegisteredError: If an account with this email exists
            RegistrationNotConfirmedError: If no confirmed code exists
        """
        ...

    async def sign_in(self, email: str, password: str) -> AuthResult:
        """
        Start a session for valid credentials.

        Raises:
            AccountNotFoundError: If no account has this email
            InvalidCredentialsError: If the password does not match
        """
        ...

    async def refresh(self, refresh_token: str) -> AuthResult:
        """
        Exchange a refresh token for a new pair. The old token is consumed
        whether or not the exchange succeeds.

        Raises:
            UnauthorizedError: On any failure
        """
        ...

    async def logout(self, refresh_token: str) -> None: ...

    async def authenticate(self, access_token: str) -> TokenClaims:
        """
        Validate an access token.

        Raises:
            UnauthorizedError: If the token is missing or invalid
        """
        ...
