"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    The user behind a verified session cookie.

    Route handlers receive this through dependency injection and must use
    its id as the acting identity.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: str = Field(default="", description="User's email address")
    auth_time: int = Field(..., description="When the user last signed in (epoch seconds)")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
