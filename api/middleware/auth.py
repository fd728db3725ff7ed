"""
Session cookie authentication dependencies.

Resolves the signed-in user from the session cookie. The user id found
here is the only identity routes may act on.
"""

import logging
from typing import Optional

from fastapi import Depends, Request

from modules.auth.exceptions import UserMismatchError
from modules.auth.interfaces import IAuthService
from shared.config import Settings, get_settings
from shared.exceptions import SimplyHappyError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)


def read_session_cookie(request: Request, settings: Settings) -> str:
    return request.cookies.get(settings.session_cookie_name, "")


async def get_current_user(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """
    Dependency that requires a valid, non-revoked session.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}

    Raises:
        AuthenticationError: Rendered as 401 by the API error handlers
    """
    claims = await auth.verify_session_cookie(
        read_session_cookie(request, settings), check_revoked=True
    )
    return AuthenticatedUser(id=claims.sub, email=claims.email or "", auth_time=claims.auth_time)


async def get_optional_user(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that extracts the user if a valid session is present.

    Use this for pages that behave differently for signed-in visitors.
    """
    session_cookie = read_session_cookie(request, settings)
    if not session_cookie:
        return None

    try:
        claims = await auth.verify_session_cookie(session_cookie, check_revoked=True)
    except SimplyHappyError as e:
        logger.debug("Ignoring unusable session cookie: %s", e.code)
        return None
    return AuthenticatedUser(id=claims.sub, email=claims.email or "", auth_time=claims.auth_time)


async def get_acting_user(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """
    Dependency for routes that carry a user id in the path.

    The path id must name the signed-in user.

    Raises:
        UserMismatchError: If the path names someone else
    """
    if user_id != user.id:
        raise UserMismatchError(requested_id=user_id, user_id=user.id)
    return user
