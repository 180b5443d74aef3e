"""
Registration module.

Gates signup behind an emailed one-time passcode.

Public API:
- IRegistrationGate: Interface for issuing and verifying codes
- IRegistrationCodeStore, IMailSender: Collaborator contracts
- RegistrationCode, RegCodeDto: Models
- Registration exceptions: InvalidCodeError, ExpiredCodeError, etc.
"""

from .interfaces import IMailSender, IRegistrationCodeStore, IRegistrationGate
from .models import RegCodeDto, RegistrationCode
from .exceptions import (
    CooldownActiveError,
    ExpiredCodeError,
    InvalidCodeError,
    RegistrationNotConfirmedError,
)

__all__ = [
    # Interfaces
    "IMailSender",
    "IRegistrationCodeStore",
    "IRegistrationGate",
    # Models
    "RegCodeDto",
    "RegistrationCode",
    # Exceptions
    "CooldownActiveError",
    "ExpiredCodeError",
    "InvalidCodeError",
    "RegistrationNotConfirmedError",
]
