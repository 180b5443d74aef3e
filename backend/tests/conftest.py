"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory stores, a controllable clock, a recording mail sender, and a fully
wired IdentityService.
"""

import pytest
from datetime import datetime, timedelta, timezone

from shared.addresses import normalize_email
from shared.config import Settings, get_settings
from shared.exceptions import ExternalServiceError
from modules.accounts.hashing import Argon2CredentialHasher
from modules.accounts.repository import InMemoryUserStore
from modules.identity.service import IdentityService
from modules.registration.repository import InMemoryRegistrationCodeStore
from modules.sessions.repository import InMemorySessionStore
from modules.sessions.tokens import JWTTokenSigner


TEST_ACCESS_SECRET = "test-access-secret-for-testing-only"
TEST_REFRESH_SECRET = "test-refresh-secret-for-testing-only"


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class RecordingMailSender:
    """Mail sender that keeps every code it is asked to deliver."""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []
        self.fail = False

    async def send_registration_code(self, email: str, code: str) -> None:
        if self.fail:
            raise ExternalServiceError("SMTP unavailable", service="smtp")
        self.sent.append((email, code))

    def last_code(self, email: str) -> str:
        email = normalize_email(email)
        return [code for to, code in self.sent if to == email][-1]


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_access_secret=TEST_ACCESS_SECRET,
        jwt_refresh_secret=TEST_REFRESH_SECRET,
        registration_code_ttl_seconds=60,
        registration_code_length=6,
        message_locale="en",
    )


@pytest.fixture
def clock() -> FakeClock:
    # Tokens are checked against the real clock by PyJWT, so start from now
    return FakeClock(datetime.now(timezone.utc))


@pytest.fixture(scope="session")
def hasher() -> Argon2CredentialHasher:
    """Argon2 hasher with minimal cost parameters to keep tests fast."""
    return Argon2CredentialHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def signer(clock) -> JWTTokenSigner:
    return JWTTokenSigner(
        access_secret=TEST_ACCESS_SECRET,
        refresh_secret=TEST_REFRESH_SECRET,
        clock=clock,
    )


@pytest.fixture
def users() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def codes() -> InMemoryRegistrationCodeStore:
    return InMemoryRegistrationCodeStore()


@pytest.fixture
def sessions() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def mailer() -> RecordingMailSender:
    return RecordingMailSender()


@pytest.fixture
def identity(users, codes, sessions, hasher, signer, mailer, settings, clock) -> IdentityService:
    """IdentityService wired to in-memory collaborators."""
    return IdentityService(
        users=users,
        codes=codes,
        sessions=sessions,
        hasher=hasher,
        signer=signer,
        mailer=mailer,
        settings=settings,
        clock=clock,
    )


@pytest.fixture
def register(identity, mailer):
    """Run the full code-gated signup for an email and return the AuthResult."""

    async def _register(email: str = "a@x.com", password: str = "correct-horse"):
        await identity.send_registration_code(email)
        await identity.verify_registration_code(email, mailer.last_code(email))
        return await identity.sign_up(email, password)

    return _register


@pytest.fixture
def existing_account(users, hasher):
    """Create an account directly in the store with password 'old-password'."""
    return users.create({
        "email": "member@example.com",
        "password_hash": hasher.hash("old-password"),
        "activation_link": "link-123",
        "is_activated": False,
        "display_name": "Member",
    })


@pytest.fixture
def make_signer():
    """Build a JWTTokenSigner whose clock is shifted from now, e.g. into the past."""

    def _make(offset: timedelta = timedelta(0)) -> JWTTokenSigner:
        return JWTTokenSigner(
            access_secret=TEST_ACCESS_SECRET,
            refresh_secret=TEST_REFRESH_SECRET,
            clock=FakeClock(datetime.now(timezone.utc) + offset),
        )

    return _make
