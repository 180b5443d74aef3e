"""
Registration code stores.

SupabaseRegistrationCodeRepository persists codes in the
``registration_codes`` table, which has a unique constraint on ``email``.
InMemoryRegistrationCodeStore keeps them in a dict keyed by email.
"""

from datetime import datetime
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import RegistrationCode


class SupabaseRegistrationCodeRepository(BaseRepository[RegistrationCode]):
    """Repository for registration code data access."""

    table = "registration_codes"

    def find_by_email(self, email: str) -> Optional[RegistrationCode]:
        result = self._db.table(self.table).select("*").eq("email", email).execute()
        return self._first(result.data)

    def upsert(
        self,
        email: str,
        otp: str,
        expires_at: datetime,
        is_confirmed: bool,
    ) -> RegistrationCode:
        """
        Insert or overwrite the code for an email.

        Relies on the unique ``email`` constraint so the write is a single
        atomic INSERT ... ON CONFLICT statement.
        """
        data = {
            "email": email,
            "otp": otp,
            "expires_at": expires_at.isoformat(),
            "is_confirmed": is_confirmed,
        }
        result = self._db.table(self.table).upsert(data, on_conflict="email").execute()
        return self._map_row(result.data[0])

    def delete_by_email(self, email: str) -> None:
        self._db.table(self.table).delete().eq("email", email).execute()

    def _map_row(self, row: dict[str, Any]) -> RegistrationCode:
        return RegistrationCode.model_validate(row)


class InMemoryRegistrationCodeStore:
    """Dict-backed registration code store."""

    def __init__(self):
        self._codes: dict[str, RegistrationCode] = {}

    def find_by_email(self, email: str) -> Optional[RegistrationCode]:
        code = self._codes.get(email)
        return code.model_copy() if code else None

    def upsert(
        self,
        email: str,
        otp: str,
        expires_at: datetime,
        is_confirmed: bool,
    ) -> RegistrationCode:
        code = RegistrationCode(
            email=email,
            otp=otp,
            expires_at=expires_at,
            is_confirmed=is_confirmed,
        )
        self._codes[code.email] = code
        return code.model_copy()

    def delete_by_email(self, email: str) -> None:
        self._codes.pop(email, None)
