"""
Registration module interfaces.

Other modules should depend on IRegistrationGate, not the concrete
implementation. The code store and mail sender are external collaborators.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from .models import RegCodeDto, RegistrationCode


@runtime_checkable
class IRegistrationCodeStore(Protocol):
    """Keyed persistence for registration codes, one record per email."""

    def find_by_email(self, email: str) -> Optional[RegistrationCode]: ...

    def upsert(
        self,
        email: str,
        otp: str,
        expires_at: datetime,
        is_confirmed: bool,
    ) -> RegistrationCode:
        """
        Insert or overwrite the record for an email.

        Implementations must make this atomic per email so concurrent
        issuance never leaves two live codes.
        """
        ...

    def delete_by_email(self, email: str) -> None: ...


@runtime_checkable
class IMailSender(Protocol):
    """Outbound delivery of registration codes."""

    async def send_registration_code(self, email: str, code: str) -> None:
        """
        Deliver a code to an email address.

        Raises:
            ExternalServiceError: If delivery fails
        """
        ...


@runtime_checkable
class IRegistrationGate(Protocol):
    """
    Interface for the OTP gate in front of account creation.

    Confirming a code does not create the account; signup consumes the
    confirmed record.
    """

    async def issue(self, email: str) -> RegCodeDto:
        """
        Issue and send a fresh code.

        Raises:
            AlreadyRegisteredError: If an account with this email exists
            CooldownActiveError: If the previous code has not expired yet
        """
        ...

    async def verify(self, email: str, code: str) -> RegCodeDto:
        """
        Confirm a code.

        Raises:
            InvalidCodeError: If email and code do not match a record
            ExpiredCodeError: If the matching record has expired
        """
        ...
