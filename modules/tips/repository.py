"""
Tips repositories for document access.

Encapsulates all Supabase queries for the tips tables:
- user_tips: one progress row per user, keyed by user_id
- tips: static tips, keyed by day
"""

import logging
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import FIRST_DAY, Progress, Tip

logger = logging.getLogger(__name__)


class ProgressRepository(BaseRepository[Progress]):
    """
    Repository for per-user progress documents.

    Note: This repository does NOT perform authorization checks.
    Routes are responsible for passing the signed-in user's id.
    """

    def get(self, user_id: str) -> Optional[Progress]:
        """Get a user's progress, or None if no document exists."""
        row = self._first(self._table().select("*").eq("user_id", user_id))
        return self._map_to_progress(row) if row else None

    def ensure(self, user_id: str) -> None:
        """Insert a day-1 document unless one already exists."""
        self._execute(
            self._table().upsert(
                {"user_id": user_id, "day": FIRST_DAY},
                on_conflict="user_id",
                ignore_duplicates=True,
            )
        )

    def compare_and_set_day(self, user_id: str, expected_day: int, new_day: int) -> bool:
        """
        Set the day only if it still equals expected_day.

        Returns:
            True if the row was updated, False if another writer changed it first.
        """
        rows = self._execute(
            self._table()
            .update({"day": new_day})
            .eq("user_id", user_id)
            .eq("day", expected_day)
        )
        if not rows:
            logger.debug("Progress for %s moved past day %d", user_id, expected_day)
        return bool(rows)

    def _map_to_progress(self, row: dict[str, Any]) -> Progress:
        return Progress(user_id=str(row["user_id"]), day=int(row.get("day") or FIRST_DAY))


class TipRepository(BaseRepository[Tip]):
    """Repository for the seeded tips."""

    def get_by_day(self, day: int) -> Optional[Tip]:
        row = self._first(self._table().select("*").eq("day", day))
        if not row:
            return None
        return Tip(day=int(row["day"]), tips=row.get("tips") or "")
