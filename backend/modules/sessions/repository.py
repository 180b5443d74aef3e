"""
Session stores.

SupabaseSessionRepository persists refresh tokens in the ``tokens`` table,
which has a unique constraint on ``user_id``. InMemorySessionStore keeps
them in a dict keyed by user id.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import SessionRecord


class SupabaseSessionRepository(BaseRepository[SessionRecord]):
    """Repository for refresh-token data access."""

    table = "tokens"

    def save(self, user_id: str, refresh_token: str) -> SessionRecord:
        """Store the user's refresh token, overwriting any existing one."""
        data = {"user_id": user_id, "refresh_token": refresh_token}
        result = self._db.table(self.table).upsert(data, on_conflict="user_id").execute()
        return self._map_row(result.data[0])

    def find_by_value(self, refresh_token: str) -> Optional[SessionRecord]:
        result = (
            self._db.table(self.table)
            .select("*")
            .eq("refresh_token", refresh_token)
            .execute()
        )
        return self._first(result.data)

    def remove_by_value(self, refresh_token: str) -> Optional[SessionRecord]:
        """
        Delete the record holding this token.

        DELETE ... RETURNING hands the row to exactly one of any concurrent
        callers; the others get an empty result.
        """
        result = (
            self._db.table(self.table)
            .delete()
            .eq("refresh_token", refresh_token)
            .execute()
        )
        return self._first(result.data)

    def _map_row(self, row: dict[str, Any]) -> SessionRecord:
        return SessionRecord(user_id=str(row["user_id"]), refresh_token=row["refresh_token"])


class InMemorySessionStore:
    """Dict-backed session store."""

    def __init__(self):
        self._tokens: dict[str, str] = {}

    def save(self, user_id: str, refresh_token: str) -> SessionRecord:
        self._tokens[user_id] = refresh_token
        return SessionRecord(user_id=user_id, refresh_token=refresh_token)

    def find_by_value(self, refresh_token: str) -> Optional[SessionRecord]:
        for user_id, token in self._tokens.items():
            if token == refresh_token:
                return SessionRecord(user_id=user_id, refresh_token=token)
        return None

    def remove_by_value(self, refresh_token: str) -> Optional[SessionRecord]:
        record = self.find_by_value(refresh_token)
        if record is not None:
            del self._tokens[record.user_id]
        return record
