"""
API response models shared by the route modules.
"""

from .errors import ErrorResponse

__all__ = ["ErrorResponse"]
