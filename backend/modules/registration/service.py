"""
Registration gate implementation.

Issues and verifies the one-time passcodes that must be confirmed before
an account can be created for an email address.
"""

import hmac
import logging
from datetime import timedelta

from shared.addresses import normalize_email
from shared.clock import Clock, utc_now
from shared.exceptions import ExternalServiceError
from shared.privacy import redact_email
from modules.accounts.exceptions import AlreadyRegisteredError
from modules.accounts.interfaces import IUserStore

from .codes import generate_code
from .interfaces import IMailSender, IRegistrationCodeStore, IRegistrationGate
from .models import RegCodeDto
from .exceptions import CooldownActiveError, ExpiredCodeError, InvalidCodeError

logger = logging.getLogger(__name__)


class RegistrationGate(IRegistrationGate):
    """
    OTP gate in front of account creation.

    A code lives for ``code_ttl_seconds``; while it is live a new one cannot
    be issued for the same email, which doubles as the resend rate limit.
    """

    def __init__(
        self,
        users: IUserStore,
        codes: IRegistrationCodeStore,
        mailer: IMailSender,
        code_ttl_seconds: int = 60,
        code_length: int = 6,
        clock: Clock = utc_now,
    ):
        self._users = users
        self._codes = codes
        self._mailer = mailer
        self._code_ttl = timedelta(seconds=code_ttl_seconds)
        self._code_length = code_length
        self._clock = clock

    async def issue(self, email: str) -> RegCodeDto:
        email = normalize_email(email)
        if self._users.find_by_email(email) is not None:
            raise AlreadyRegisteredError(email)

        now = self._clock()
        current = self._codes.find_by_email(email)
        if current is not None and current.expires_at > now:
            raise CooldownActiveError(email, current.seconds_left(now))

        otp = generate_code(self._code_length)
        record = self._codes.upsert(
            email=email,
            otp=otp,
            expires_at=now + self._code_ttl,
            is_confirmed=False,
        )
        logger.info("Registration code issued for %s", redact_email(email))

        try:
            await self._mailer.send_registration_code(email, otp)
        except ExternalServiceError as e:
            # The code stays valid; the client can retry after the cooldown
            logger.warning("Registration code delivery failed: %s", e.message)
        except Exception:
            logger.exception(
                "Unexpected error delivering registration code to %s", redact_email(email)
            )

        return RegCodeDto.from_code(record)

    async def verify(self, email: str, code: str) -> RegCodeDto:
        email = normalize_email(email)
        # One record per email; the code is checked after the lookup
        record = self._codes.find_by_email(email)
        if record is None or not hmac.compare_digest(record.otp.encode(), code.encode()):
            raise InvalidCodeError(code)

        if record.is_expired(self._clock()):
            raise ExpiredCodeError(code)

        record = self._codes.upsert(
            email=email,
            otp=record.otp,
            expires_at=record.expires_at,
            is_confirmed=True,
        )
        logger.info("Registration code confirmed for %s", redact_email(email))
        return RegCodeDto.from_code(record)
