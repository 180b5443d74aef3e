"""
Accounts module.

Owns user accounts: credential checks, profile and password changes,
and link activation.

Public API:
- ICredentialVerifier, IProfileManager: Service interfaces
- IUserStore, ICredentialHasher: Collaborator contracts
- UserAccount, UserDto, ProfileUpdate, PasswordChange: Models
- Account exceptions: AccountNotFoundError, InvalidCredentialsError, etc.
"""

from .interfaces import ICredentialHasher, ICredentialVerifier, IProfileManager, IUserStore
from .models import PasswordChange, ProfileUpdate, UserAccount, UserDto
from .exceptions import (
    AccountNotFoundError,
    AlreadyRegisteredError,
    InvalidActivationLinkError,
    InvalidCredentialsError,
    PasswordMismatchError,
    PasswordUnchangedError,
)

__all__ = [
    # Interfaces
    "ICredentialHasher",
    "ICredentialVerifier",
    "IProfileManager",
    "IUserStore",
    # Models
    "PasswordChange",
    "ProfileUpdate",
    "UserAccount",
    "UserDto",
    # Exceptions
    "AccountNotFoundError",
    "AlreadyRegisteredError",
    "InvalidActivationLinkError",
    "InvalidCredentialsError",
    "PasswordMismatchError",
    "PasswordUnchangedError",
]
