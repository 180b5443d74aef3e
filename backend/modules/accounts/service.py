"""
Accounts service implementation.

CredentialVerifier checks login credentials; ProfileManager handles
profile edits, password changes and link activation.
"""

import logging

from shared.addresses import normalize_email
from shared.privacy import redact_email

from .interfaces import ICredentialHasher, ICredentialVerifier, IProfileManager, IUserStore
from .models import PasswordChange, ProfileUpdate, UserAccount, UserDto
from .exceptions import (
    AccountNotFoundError,
    InvalidActivationLinkError,
    InvalidCredentialsError,
    PasswordMismatchError,
    PasswordUnchangedError,
)

logger = logging.getLogger(__name__)


class CredentialVerifier(ICredentialVerifier):
    """
    Validates an email/password pair against the stored account.

    A missing account still costs one hash comparison, against a digest
    computed at construction, so the hashing step takes the same time
    whether or not the email is registered.
    """

    def __init__(self, users: IUserStore, hasher: ICredentialHasher):
        self._users = users
        self._hasher = hasher
        self._dummy_digest = hasher.hash("credential-verifier-placeholder")

    async def verify(self, email: str, password: str) -> UserAccount:
        email = normalize_email(email)
        account = self._users.find_by_email(email)

        if account is None:
            self._hasher.compare(password, self._dummy_digest)
            logger.info("Sign-in rejected for %s: no such account", redact_email(email))
            raise AccountNotFoundError(email)

        if not self._hasher.compare(password, account.password_hash):
            logger.info("Sign-in rejected for %s: wrong password", redact_email(email))
            raise InvalidCredentialsError()

        return account


class ProfileManager(IProfileManager):
    """
    Account self-service operations.

    The user_id passed in is trusted: it comes from an access token that
    the caller has already validated.
    """

    def __init__(self, users: IUserStore, hasher: ICredentialHasher):
        self._users = users
        self._hasher = hasher

    async def update_profile(self, fields: ProfileUpdate, user_id: str) -> UserDto:
        """
        Apply supplied profile fields.

        Email uniqueness is not re-checked here; the store's unique
        constraint is the only guard.
        """
        account = self._users.update(user_id, fields.to_patch())
        return UserDto.from_account(account)

    async def update_password(self, change: PasswordChange, user_id: str) -> UserDto:
        if change.new_password != change.confirm_new_password:
            raise PasswordMismatchError()

        account = self._users.find_by_id(user_id)
        if account is None:
            raise AccountNotFoundError(user_id, field="id")

        if not self._hasher.compare(change.old_password, account.password_hash):
            raise InvalidCredentialsError(field="old_password")

        if self._hasher.compare(change.new_password, account.password_hash):
            raise PasswordUnchangedError()

        account = self._users.update(
            user_id, {"password_hash": self._hasher.hash(change.new_password)}
        )
        logger.info("Password changed for user %s", user_id)
        return UserDto.from_account(account)

    async def activate(self, activation_link: str) -> UserDto:
        account = self._users.find_by_activation_link(activation_link)
        if account is None:
            raise InvalidActivationLinkError(activation_link)

        account = self._users.update(account.id, {"is_activated": True})
        logger.info("Account %s activated", account.id)
        return UserDto.from_account(account)
