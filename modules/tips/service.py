"""
Tips service implementation.

Reads and advances per-user tip progress. The day counter is advanced
with a compare-and-set update so concurrent completions never overwrite
each other.
"""

import logging
from typing import Optional

from .interfaces import ITipsService
from .models import FIRST_DAY, Progress, TipsResponse
from .repository import ProgressRepository, TipRepository
from .exceptions import ProgressConflictError, TipNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5


class TipsService(ITipsService):
    """Daily tip service backed by Supabase repositories."""

    def __init__(
        self,
        progress: ProgressRepository,
        tips: TipRepository,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        self._progress = progress
        self._tips = tips
        self._max_retries = max(1, max_retries)

    async def get_progress(self, user_id: str) -> Progress:
        progress = self._progress.get(user_id)
        if progress is None:
            return Progress(user_id=user_id, day=FIRST_DAY)
        return progress

    async def ensure_progress(self, user_id: str) -> None:
        self._progress.ensure(user_id)

    async def complete_tip(self, user_id: str) -> Progress:
        for attempt in range(1, self._max_retries + 1):
            current = self._progress.get(user_id)
            if current is None:
                self._progress.ensure(user_id)
                current = self._progress.get(user_id) or Progress(user_id=user_id)

            next_day = current.day + 1
            if self._progress.compare_and_set_day(user_id, current.day, next_day):
                logger.debug("User %s advanced to day %d", user_id, next_day)
                return Progress(user_id=user_id, day=next_day)

            logger.debug(
                "Progress conflict for %s (attempt %d/%d)",
                user_id,
                attempt,
                self._max_retries,
            )

        raise ProgressConflictError(user_id, self._max_retries)

    async def get_tip_of_the_day(
        self, user_id: str, display_name: Optional[str]
    ) -> TipsResponse:
        progress = await self.get_progress(user_id)
        tip = self._tips.get_by_day(progress.day)
        if tip is None:
            raise TipNotFoundError(progress.day)

        return TipsResponse(
            tips=f"hello {display_name or 'N/A'}: The tips of the day are: {tip.tips}",
            day=progress.day,
        )
