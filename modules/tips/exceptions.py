"""
Tips module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class TipNotFoundError(NotFoundError):
    """Raised when no tip has been seeded for a day."""

    def __init__(self, day: int):
        super().__init__(
            f"No tip for day {day}",
            code="TIP_NOT_FOUND",
            details={"day": day},
        )


class ProgressConflictError(ConflictError):
    """Raised when concurrent writers keep beating a progress update."""

    def __init__(self, user_id: str, attempts: int):
        super().__init__(
            f"Progress update for {user_id} conflicted {attempts} times",
            code="PROGRESS_CONFLICT",
            details={"user_id": user_id, "attempts": attempts},
        )
