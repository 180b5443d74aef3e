"""
Accounts module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. The stores and the hasher are external collaborators;
tests substitute in-memory versions.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import PasswordChange, ProfileUpdate, UserAccount, UserDto


@runtime_checkable
class IUserStore(Protocol):
    """Keyed persistence for user accounts."""

    def find_by_email(self, email: str) -> Optional[UserAccount]: ...

    def find_by_id(self, user_id: str) -> Optional[UserAccount]: ...

    def find_by_activation_link(self, activation_link: str) -> Optional[UserAccount]: ...

    def create(self, data: dict[str, Any]) -> UserAccount:
        """
        Create an account from a field dict.

        Returns:
            The stored account with its generated id
        """
        ...

    def update(self, user_id: str, data: dict[str, Any]) -> UserAccount:
        """
        Apply a field patch to an account.

        Returns:
            The account as stored after the update

        Raises:
            AccountNotFoundError: If no account has this id
        """
        ...


@runtime_checkable
class ICredentialHasher(Protocol):
    """One-way password hashing with constant-time comparison."""

    def hash(self, plaintext: str) -> str: ...

    def compare(self, plaintext: str, digest: str) -> bool: ...


@runtime_checkable
class ICredentialVerifier(Protocol):
    """Interface for checking an email/password pair."""

    async def verify(self, email: str, password: str) -> UserAccount:
        """
        Resolve the account for a login attempt.

        Raises:
            AccountNotFoundError: If no account has this email
            InvalidCredentialsError: If the password does not match
        """
        ...


@runtime_checkable
class IProfileManager(Protocol):
    """Interface for account self-service operations."""

    async def update_profile(self, fields: ProfileUpdate, user_id: str) -> UserDto: ...

    async def update_password(self, change: PasswordChange, user_id: str) -> UserDto:
        """
        Replace the account password.

        Raises:
            PasswordMismatchError: If new and confirmation differ
            InvalidCredentialsError: If the old password is wrong
            PasswordUnchangedError: If the new password equals the current one
        """
        ...

    async def activate(self, activation_link: str) -> UserDto:
        """
        Mark the account carrying this activation link as activated.

        Raises:
            InvalidActivationLinkError: If no account carries the link
        """
        ...
