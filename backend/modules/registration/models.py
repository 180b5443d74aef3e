"""
Registration module data models.
"""

import math
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field


class RegistrationCode(BaseModel):
    """
    One-time passcode issued to an email address before signup.

    There is at most one record per email; issuing again overwrites it.
    """

    email: EmailStr = Field(..., description="Email the code was sent to")
    otp: str = Field(..., description="Numeric one-time passcode")
    expires_at: datetime = Field(..., description="Expiry (timezone-aware UTC)")
    is_confirmed: bool = Field(default=False, description="Whether the code was verified")

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now

    def seconds_left(self, now: datetime) -> int:
        """Whole seconds until expiry, rounded up and never below 1."""
        return max(1, math.ceil((self.expires_at - now).total_seconds()))


class RegCodeDto(BaseModel):
    """Public projection of a RegistrationCode; never includes the OTP."""

    email: EmailStr
    expires_at: datetime
    is_confirmed: bool

    model_config = {"frozen": True}

    @classmethod
    def from_code(cls, code: RegistrationCode) -> "RegCodeDto":
        return cls(
            email=code.email,
            expires_at=code.expires_at,
            is_confirmed=code.is_confirmed,
        )
