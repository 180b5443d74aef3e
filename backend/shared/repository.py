"""
Base repository class for database access.

Provides a common abstraction layer for all store adapters, encapsulating
Supabase client access and the row-to-model mapping convention.
"""

from typing import Any, Optional, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses set ``table`` and implement ``_map_row`` to turn a database
    row into the module's Pydantic model.

    Example:
        class UserRepository(BaseRepository[UserAccount]):
            table = "users"

            def find_by_id(self, user_id: str) -> Optional[UserAccount]:
                result = self._db.table(self.table).select("*").eq("id", user_id).execute()
                return self._first(result.data)
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _map_row(self, row: dict[str, Any]) -> T:
        raise NotImplementedError

    def _first(self, rows: Optional[list[dict[str, Any]]]) -> Optional[T]:
        """Map the first row of a result, or None for an empty result."""
        if not rows:
            return None
        return self._map_row(rows[0])
