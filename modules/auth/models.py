"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, Field


class IdTokenClaims(BaseModel):
    """
    Decoded identity token (a Supabase Auth access token).

    Only the claims this server relies on are modelled; the rest are ignored.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    auth_time: int = Field(..., description="Time of the sign-in that produced the token")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = {"extra": "ignore"}


class SessionClaims(BaseModel):
    """
    Claims carried by a session cookie.

    A session cookie keeps the identity token's subject and auth_time so
    that revocation can be checked against the user record later.
    """

    sub: str
    email: Optional[str] = None
    auth_time: int
    iat: int
    exp: int

    model_config = {"extra": "ignore"}


class UserRecord(BaseModel):
    """A user as stored by the identity provider."""

    uid: str = Field(..., description="User ID (UUID)")
    email: Optional[str] = Field(None, description="Email address")
    email_verified: bool = Field(default=False)
    display_name: Optional[str] = Field(None, description="Display name")
    photo_url: Optional[str] = Field(None, description="Avatar URL")
    sessions_valid_after: Optional[int] = Field(
        None,
        description="Sessions signed in before this epoch second are revoked",
    )


class SessionLoginRequest(BaseModel):
    """Body of POST /sessionLogin (JSON or form encoded)."""

    id_token: str = Field(default="", alias="idToken")
    csrf_token: str = Field(default="", alias="csrfToken")

    model_config = {"populate_by_name": True}


class SessionLoginResponse(BaseModel):
    """Response from a successful session login."""

    status: str = "success"
