"""
Session issuer implementation.

Mints access/refresh token pairs for signup and sign-in, and rotates
them on refresh. Refresh tokens are single-use: each refresh call
removes the stored token before it is validated.
"""

import logging
import uuid

from shared.addresses import normalize_email
from shared.privacy import redact_email
from modules.accounts.exceptions import AlreadyRegisteredError
from modules.accounts.interfaces import ICredentialHasher, ICredentialVerifier, IUserStore
from modules.accounts.models import UserAccount, UserDto
from modules.registration.exceptions import RegistrationNotConfirmedError
from modules.registration.interfaces import IRegistrationCodeStore

from .interfaces import ISessionIssuer, ISessionStore, ITokenSigner
from .models import AuthResult, TokenClaims
from .exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


class SessionIssuer(ISessionIssuer):
    """
    Session lifecycle: signup, sign-in, refresh rotation and logout.

    The session store holds one refresh token per user, so every new
    issuance replaces the previous session for that account.
    """

    def __init__(
        self,
        users: IUserStore,
        codes: IRegistrationCodeStore,
        sessions: ISessionStore,
        hasher: ICredentialHasher,
        signer: ITokenSigner,
        verifier: ICredentialVerifier,
    ):
        self._users = users
        self._codes = codes
        self._sessions = sessions
        self._hasher = hasher
        self._signer = signer
        self._verifier = verifier

    async def issue_for_account(self, account: UserAccount) -> AuthResult:
        user = UserDto.from_account(account)
        tokens = self._signer.issue_pair(TokenClaims.from_user(user))
        self._sessions.save(user.id, tokens.refresh_token)

        return AuthResult(
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            user=user,
        )

    async def sign_up(self, email: str, password: str) -> AuthResult:
        """
        Create a pre-activated account and its first session.

        Steps run in order without rollback: a failure after the account
        is created leaves it in place without a session.
        """
        email = normalize_email(email)
        if self._users.find_by_email(email) is not None:
            raise AlreadyRegisteredError(email)

        registration = self._codes.find_by_email(email)
        if registration is None or not registration.is_confirmed:
            raise RegistrationNotConfirmedError(email)

        account = self._users.create({
            "email": email,
            "password_hash": self._hasher.hash(password),
            "activation_link": str(uuid.uuid4()),
            "is_activated": True,
        })
        self._codes.delete_by_email(email)
        logger.info("Account %s registered for %s", account.id, redact_email(email))

        return await self.issue_for_account(account)

    async def sign_in(self, email: str, password: str) -> AuthResult:
        account = await self._verifier.verify(email, password)
        logger.info("User %s signed in", account.id)
        return await self.issue_for_account(account)

    async def refresh(self, refresh_token: str) -> AuthResult:
        if not refresh_token:
            raise UnauthorizedError()

        if self._sessions.find_by_value(refresh_token) is None:
            logger.info("Refresh rejected: token not on record")
            raise UnauthorizedError()

        # Consumed before validation so a rejected token cannot be replayed
        record = self._sessions.remove_by_value(refresh_token)
        if record is None:
            logger.info("Refresh rejected: token consumed concurrently")
            raise UnauthorizedError()

        claims = self._signer.validate_refresh(refresh_token)
        if claims is None or claims.id != record.user_id:
            logger.info("Refresh rejected for user %s: invalid token", record.user_id)
            raise UnauthorizedError()

        account = self._users.find_by_id(claims.id)
        if account is None:
            logger.info("Refresh rejected for user %s: account missing", claims.id)
            raise UnauthorizedError()

        return await self.issue_for_account(account)

    async def logout(self, refresh_token: str) -> None:
        if not refresh_token:
            return

        record = self._sessions.remove_by_value(refresh_token)
        if record is not None:
            logger.info("User %s logged out", record.user_id)

    async def authenticate(self, access_token: str) -> TokenClaims:
        if not access_token:
            raise UnauthorizedError(field="access_token")

        claims = self._signer.validate_access(access_token)
        if claims is None:
            raise UnauthorizedError(field="access_token")
        return claims
