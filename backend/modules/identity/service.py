"""
Identity service implementation.

Composes the registration gate, credential verifier, session issuer and
profile manager behind one object. Collaborators are injected; there is
no module-level instance.
"""

from typing import Optional

from shared.clock import Clock, utc_now
from shared.config import Settings, get_settings
from modules.accounts.hashing import Argon2CredentialHasher
from modules.accounts.interfaces import ICredentialHasher, IUserStore
from modules.accounts.models import PasswordChange, ProfileUpdate, UserDto
from modules.accounts.repository import SupabaseUserRepository
from modules.accounts.service import CredentialVerifier, ProfileManager
from modules.registration.interfaces import IMailSender, IRegistrationCodeStore
from modules.registration.mailer import SmtpMailSender
from modules.registration.models import RegCodeDto
from modules.registration.repository import SupabaseRegistrationCodeRepository
from modules.registration.service import RegistrationGate
from modules.sessions.interfaces import ISessionStore, ITokenSigner
from modules.sessions.models import AuthResult, TokenClaims
from modules.sessions.repository import SupabaseSessionRepository
from modules.sessions.service import SessionIssuer
from modules.sessions.tokens import JWTTokenSigner

from .interfaces import IIdentityService


class IdentityService(IIdentityService):
    """Public identity operations wired from injected collaborators."""

    def __init__(
        self,
        users: IUserStore,
        codes: IRegistrationCodeStore,
        sessions: ISessionStore,
        hasher: ICredentialHasher,
        signer: ITokenSigner,
        mailer: IMailSender,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
    ):
        settings = settings or get_settings()

        self.gate = RegistrationGate(
            users=users,
            codes=codes,
            mailer=mailer,
            code_ttl_seconds=settings.registration_code_ttl_seconds,
            code_length=settings.registration_code_length,
            clock=clock,
        )
        self.verifier = CredentialVerifier(users, hasher)
        self.issuer = SessionIssuer(
            users=users,
            codes=codes,
            sessions=sessions,
            hasher=hasher,
            signer=signer,
            verifier=self.verifier,
        )
        self.profiles = ProfileManager(users, hasher)

    async def send_registration_code(self, email: str) -> RegCodeDto:
        return await self.gate.issue(email)

    async def verify_registration_code(self, email: str, code: str) -> RegCodeDto:
        return await self.gate.verify(email, code)

    async def sign_up(self, email: str, password: str) -> AuthResult:
        return await self.issuer.sign_up(email, password)

    async def activate(self, activation_link: str) -> UserDto:
        return await self.profiles.activate(activation_link)

    async def sign_in(self, email: str, password: str) -> AuthResult:
        return await self.issuer.sign_in(email, password)

    async def refresh(self, refresh_token: str) -> AuthResult:
        return await self.issuer.refresh(refresh_token)

    async def logout(self, refresh_token: str) -> None:
        await self.issuer.logout(refresh_token)

    async def authenticate(self, access_token: str) -> TokenClaims:
        return await self.issuer.authenticate(access_token)

    async def update_profile(self, fields: ProfileUpdate, user_id: str) -> UserDto:
        return await self.profiles.update_profile(fields, user_id)

    async def update_password(self, change: PasswordChange, user_id: str) -> UserDto:
        return await self.profiles.update_password(change, user_id)


def create_identity_service(settings: Optional[Settings] = None) -> IdentityService:
    """
    Build an IdentityService backed by Supabase, Argon2, JWT and SMTP.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        A fully wired IdentityService
    """
    from shared.database import get_supabase_client

    settings = settings or get_settings()
    db = get_supabase_client()

    return IdentityService(
        users=SupabaseUserRepository(db),
        codes=SupabaseRegistrationCodeRepository(db),
        sessions=SupabaseSessionRepository(db),
        hasher=Argon2CredentialHasher(),
        signer=JWTTokenSigner.from_settings(settings),
        mailer=SmtpMailSender.from_settings(settings),
        settings=settings,
    )
