"""
Tips module data models.
"""

from pydantic import BaseModel, Field

FIRST_DAY = 1


class Progress(BaseModel):
    """
    A user's progress document: the day of tips they have reached.

    Serialized with the camelCase keys the profile page links expect.
    """

    user_id: str = Field(..., serialization_alias="userId")
    day: int = Field(default=FIRST_DAY, ge=0)


class Tip(BaseModel):
    """A seeded tip for one day."""

    day: int
    tips: str


class TipsResponse(BaseModel):
    """Response for GET /tips/{id}."""

    tips: str = Field(..., description="Greeting followed by the tip text")
    day: int = Field(..., description="Day the tip belongs to")
