"""
Tips module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Progress, TipsResponse


@runtime_checkable
class ITipsService(Protocol):
    """Interface for daily tip operations."""

    async def get_progress(self, user_id: str) -> Progress:
        """
        Get a user's progress, defaulting to day 1 when none is stored.

        Does not write anything.
        """
        ...

    async def ensure_progress(self, user_id: str) -> None:
        """Create the progress document if the user has none yet."""
        ...

    async def complete_tip(self, user_id: str) -> Progress:
        """
        Advance the user's day by one.

        Raises:
            ProgressConflictError: If concurrent updates exhaust the retries
        """
        ...

    async def get_tip_of_the_day(
        self, user_id: str, display_name: Optional[str]
    ) -> TipsResponse:
        """
        Get the tip for the user's current day.

        Raises:
            TipNotFoundError: If no tip is seeded for that day
        """
        ...
