"""
User account stores.

SupabaseUserRepository persists accounts in the ``users`` table.
InMemoryUserStore keeps them in a dict for tests and local runs.
Both return detached model copies; callers change an account only
through ``update``.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from .exceptions import AccountNotFoundError
from .models import UserAccount


class SupabaseUserRepository(BaseRepository[UserAccount]):
    """
    Repository for user account data access.

    Note: This repository does NOT enforce email uniqueness beyond the
    table's unique constraint; the service layer checks before creating.
    """

    table = "users"

    def find_by_email(self, email: str) -> Optional[UserAccount]:
        result = self._db.table(self.table).select("*").eq("email", email).execute()
        return self._first(result.data)

    def find_by_id(self, user_id: str) -> Optional[UserAccount]:
        result = self._db.table(self.table).select("*").eq("id", user_id).execute()
        return self._first(result.data)

    def find_by_activation_link(self, activation_link: str) -> Optional[UserAccount]:
        result = (
            self._db.table(self.table)
            .select("*")
            .eq("activation_link", activation_link)
            .execute()
        )
        return self._first(result.data)

    def create(self, data: dict[str, Any]) -> UserAccount:
        """
        Create a new account record.

        Args:
            data: Account fields (email, password_hash, is_activated, ...)

        Returns:
            Created UserAccount with generated ID and timestamps.
        """
        result = self._db.table(self.table).insert(data).execute()
        return self._map_row(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> UserAccount:
        """
        Update account fields.

        Args:
            user_id: The account UUID.
            data: Fields to overwrite.

        Returns:
            The updated UserAccount.

        Raises:
            AccountNotFoundError: If no row has this id.
        """
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table(self.table).update(data).eq("id", user_id).execute()
        account = self._first(result.data)
        if account is None:
            raise AccountNotFoundError(user_id, field="id")
        return account

    def _map_row(self, row: dict[str, Any]) -> UserAccount:
        return UserAccount.model_validate(row)


class InMemoryUserStore:
    """Dict-backed user store."""

    def __init__(self):
        self._accounts: dict[str, UserAccount] = {}

    def find_by_email(self, email: str) -> Optional[UserAccount]:
        return self._find(lambda a: a.email == email)

    def find_by_id(self, user_id: str) -> Optional[UserAccount]:
        account = self._accounts.get(user_id)
        return account.model_copy() if account else None

    def find_by_activation_link(self, activation_link: str) -> Optional[UserAccount]:
        return self._find(lambda a: a.activation_link == activation_link)

    def create(self, data: dict[str, Any]) -> UserAccount:
        now = datetime.now(timezone.utc)
        account = UserAccount(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **data,
        )
        self._accounts[account.id] = account
        return account.model_copy()

    def update(self, user_id: str, data: dict[str, Any]) -> UserAccount:
        current = self._accounts.get(user_id)
        if current is None:
            raise AccountNotFoundError(user_id, field="id")
        updated = UserAccount.model_validate(
            {**current.model_dump(), **data, "updated_at": datetime.now(timezone.utc)}
        )
        self._accounts[user_id] = updated
        return updated.model_copy()

    def _find(self, predicate) -> Optional[UserAccount]:
        for account in self._accounts.values():
            if predicate(account):
                return account.model_copy()
        return None
