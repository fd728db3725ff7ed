"""
Daily tips module.

Tracks how far each user has got through the seeded tips.

Public API:
- ITipsService: Interface for tip operations
- Progress, Tip, TipsResponse: Tip models
- Tip exceptions: TipNotFoundError, ProgressConflictError
"""

from .interfaces import ITipsService
from .models import Progress, Tip, TipsResponse
from .exceptions import TipNotFoundError, ProgressConflictError

__all__ = [
    "ITipsService",
    "Progress",
    "Tip",
    "TipsResponse",
    "TipNotFoundError",
    "ProgressConflictError",
]
