"""
Authentication service implementation.

Verifies Supabase Auth access tokens, mints and verifies this server's
session cookies, and manages users through the Supabase admin API.
"""

import logging
import time
from typing import Any, Optional

import jwt
from supabase import AuthApiError, AuthError, Client

from shared.config import Settings, get_settings
from shared.exceptions import IDENTITY_PROVIDER, ExternalServiceError

from .interfaces import IAuthService
from .models import IdTokenClaims, SessionClaims, UserRecord
from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    RevokedSessionError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

ID_TOKEN_AUDIENCE = "authenticated"
SESSION_ISSUER = "simply-happy"
SESSION_AUDIENCE = "session"

# Allowed session lifetimes, in seconds
MIN_SESSION_DURATION = 5 * 60
MAX_SESSION_DURATION = 14 * 24 * 60 * 60

REVOCATION_METADATA_KEY = "sessions_valid_after"


def extract_auth_time(payload: dict[str, Any]) -> int:
    """
    Work out when the user signed in from a Supabase access token payload.

    Supabase records each authentication method in the `amr` claim with a
    timestamp. Refreshed tokens keep the original timestamps, so the latest
    one is the actual sign-in. Tokens without `amr` fall back to `iat`.

    Raises:
        InvalidTokenError: If a timestamp is not a number
    """
    try:
        if "auth_time" in payload:
            return int(payload["auth_time"])
        timestamps = [
            int(entry["timestamp"])
            for entry in payload.get("amr") or []
            if isinstance(entry, dict) and entry.get("timestamp") is not None
        ]
        if timestamps:
            return max(timestamps)
        return int(payload["iat"])
    except (TypeError, ValueError):
        raise InvalidTokenError("Token has a malformed sign-in time")


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Identity tokens are Supabase JWTs checked against the project's JWT
    secret. Session cookies are HS256 JWTs signed with SESSION_SECRET.
    Revocation is recorded on the user's app_metadata.
    """

    def __init__(self, supabase_client: Client, settings: Optional[Settings] = None):
        self._db = supabase_client
        self._settings = settings or get_settings()

    # -------------------------------------------------------------------------
    # Tokens and sessions
    # -------------------------------------------------------------------------

    async def verify_id_token(self, id_token: str) -> IdTokenClaims:
        if not id_token:
            raise MissingTokenError()
        if not self._settings.supabase_jwt_secret:
            raise RuntimeError(
                "Identity token verification not configured. "
                "Set SUPABASE_JWT_SECRET in your environment."
            )

        try:
            payload = jwt.decode(
                id_token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience=ID_TOKEN_AUDIENCE,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug("Identity token rejected: %s", e)
            raise InvalidTokenError(str(e))

        return IdTokenClaims(
            sub=payload["sub"],
            email=payload.get("email"),
            auth_time=extract_auth_time(payload),
            iat=payload["iat"],
            exp=payload["exp"],
        )

    async def create_session_cookie(self, id_token: str, expires_in: int) -> str:
        if not MIN_SESSION_DURATION <= expires_in <= MAX_SESSION_DURATION:
            raise ValueError(
                f"Session duration must be between {MIN_SESSION_DURATION} "
                f"and {MAX_SESSION_DURATION} seconds"
            )
        secret = self._session_secret()
        claims = await self.verify_id_token(id_token)

        now = int(time.time())
        payload = {
            "iss": SESSION_ISSUER,
            "aud": SESSION_AUDIENCE,
            "sub": claims.sub,
            "email": claims.email,
            "auth_time": claims.auth_time,
            "iat": now,
            "exp": now + expires_in,
        }
        logger.debug("Minted session for user %s", claims.sub)
        return jwt.encode(payload, secret, algorithm="HS256")

    async def verify_session_cookie(
        self, session_cookie: str, check_revoked: bool = False
    ) -> SessionClaims:
        if not session_cookie:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                session_cookie,
                self._session_secret(),
                algorithms=["HS256"],
                audience=SESSION_AUDIENCE,
                issuer=SESSION_ISSUER,
                options={"require": ["exp", "iat", "sub", "auth_time"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError("Session has expired")
        except jwt.InvalidTokenError as e:
            logger.debug("Session cookie rejected: %s", e)
            raise InvalidTokenError(str(e))

        claims = SessionClaims(**payload)

        if check_revoked:
            try:
                user = await self.get_user(claims.sub)
            except UserNotFoundError:
                raise RevokedSessionError(claims.sub)
            # Both sides are whole seconds, so a sign-in in the revoking second is revoked too
            if (
                user.sessions_valid_after is not None
                and claims.auth_time <= user.sessions_valid_after
            ):
                raise RevokedSessionError(claims.sub)

        return claims

    async def revoke_sessions(self, user_id: str) -> None:
        response = self._call_admin(user_id, lambda admin: admin.get_user_by_id(user_id))
        app_metadata = dict(response.user.app_metadata or {})
        app_metadata[REVOCATION_METADATA_KEY] = int(time.time())
        self._call_admin(
            user_id,
            lambda admin: admin.update_user_by_id(user_id, {"app_metadata": app_metadata}),
        )
        logger.info("Revoked all sessions for user %s", user_id)

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    async def get_user(self, user_id: str) -> UserRecord:
        response = self._call_admin(user_id, lambda admin: admin.get_user_by_id(user_id))
        if response is None or response.user is None:
            raise UserNotFoundError(user_id)
        return self._map_to_user_record(response.user)

    async def delete_user(self, user_id: str) -> None:
        self._call_admin(user_id, lambda admin: admin.delete_user(user_id))
        logger.info("Deleted user %s", user_id)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _session_secret(self) -> str:
        if not self._settings.session_secret:
            raise RuntimeError(
                "Session signing not configured. Set SESSION_SECRET in your environment."
            )
        return self._settings.session_secret

    def _call_admin(self, user_id: str, call):
        """Run a Supabase admin API call, translating SDK errors."""
        try:
            return call(self._db.auth.admin)
        except AuthApiError as e:
            if e.status == 404:
                raise UserNotFoundError(user_id)
            raise ExternalServiceError(
                f"Identity provider error: {e.message}",
                service=IDENTITY_PROVIDER,
                status=e.status,
            )
        except AuthError as e:
            raise ExternalServiceError(
                f"Identity provider error: {e.message}",
                service=IDENTITY_PROVIDER,
            )

    def _map_to_user_record(self, user: Any) -> UserRecord:
        """Map a Supabase User to a UserRecord."""
        user_metadata = user.user_metadata or {}
        app_metadata = user.app_metadata or {}
        valid_after = app_metadata.get(REVOCATION_METADATA_KEY)
        return UserRecord(
            uid=str(user.id),
            email=user.email,
            email_verified=user.email_confirmed_at is not None,
            display_name=user_metadata.get("full_name") or user_metadata.get("name"),
            photo_url=user_metadata.get("avatar_url") or user_metadata.get("picture"),
            sessions_valid_after=int(valid_after) if valid_after is not None else None,
        )
