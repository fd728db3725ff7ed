"""
Base repository class for document access.

Wraps the Supabase client so every repository reads and writes rows of
a single table through the same helpers.
"""

from typing import Any, Generic, Optional, TypeVar

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DOCUMENT_STORE, ExternalServiceError


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses set the table name and implement the mapping from row
    dicts to their Pydantic model.

    Example:
        class TipRepository(BaseRepository[Tip]):
            def get_by_day(self, day: int) -> Optional[Tip]:
                row = self._first(self._table().select("*").eq("day", day))
                return self._map_to_tip(row) if row else None
    """

    def __init__(self, db: Client, table: str) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
            table: Name of the table backing this repository.
        """
        self._db = db
        self._table_name = table

    def _table(self):
        return self._db.table(self._table_name)

    def _execute(self, query) -> list[dict[str, Any]]:
        """Run a PostgREST query, wrapping SDK errors."""
        try:
            result = query.execute()
        except APIError as e:
            raise ExternalServiceError(
                f"Query on {self._table_name} failed: {e.message}",
                service=DOCUMENT_STORE,
                details={"table": self._table_name},
            )
        return result.data or []

    def _first(self, query) -> Optional[dict[str, Any]]:
        rows = self._execute(query)
        return rows[0] if rows else None
