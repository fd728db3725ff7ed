"""
Session endpoints.

Serves the login page, exchanges identity tokens for session cookies,
and signs users out or deletes their accounts.
"""

import logging
import time
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, RedirectResponse, Response

from modules.auth.csrf import CsrfGuard
from modules.auth.exceptions import StaleSignInError
from modules.auth.interfaces import IAuthService
from modules.auth.models import SessionLoginRequest, SessionLoginResponse
from shared.config import Settings, get_settings
from shared.exceptions import SimplyHappyError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service, get_csrf_guard
from ..middleware.auth import get_optional_user, read_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_login_request(request: Request) -> SessionLoginRequest:
    """Parse a login body sent either as JSON or as a URL-encoded form."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            data = {}
    else:
        data = dict(await request.form())

    if not isinstance(data, dict):
        data = {}
    return SessionLoginRequest(
        idToken=str(data.get("idToken") or ""),
        csrfToken=str(data.get("csrfToken") or ""),
    )


@router.get("/", include_in_schema=False)
async def login_page(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    csrf: CsrfGuard = Depends(get_csrf_guard),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Serve the login page, or send signed-in users to their profile.

    Every anonymous page load gets a fresh CSRF cookie.
    """
    if user is not None:
        return RedirectResponse("/profile", status_code=302)

    response = FileResponse(Path(settings.static_dir) / "index.html", media_type="text/html")
    csrf.issue(response)
    return response


@router.post("/sessionLogin", response_model=SessionLoginResponse)
async def session_login(
    response: Response,
    login: SessionLoginRequest = Depends(read_login_request),
    csrf: CsrfGuard = Depends(get_csrf_guard),
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> SessionLoginResponse:
    """
    Exchange a fresh identity token for a session cookie.

    Only sign-ins from the last few minutes are accepted, so a stolen
    identity token cannot be turned into a long-lived session later.
    """
    csrf.validate(login.csrf_token)

    claims = await auth.verify_id_token(login.id_token)
    age = int(time.time()) - claims.auth_time
    if age >= settings.recent_sign_in_seconds:
        raise StaleSignInError(age, settings.recent_sign_in_seconds)

    expires_in = settings.session_expires_in_seconds
    session_cookie = await auth.create_session_cookie(login.id_token, expires_in)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_cookie,
        max_age=expires_in,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
    )
    logger.info("Session started for user %s", claims.sub)
    return SessionLoginResponse(status="success")


@router.get("/logout", include_in_schema=False)
async def logout(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> RedirectResponse:
    """Clear the session cookie and revoke all of the user's sessions."""
    session_cookie = read_session_cookie(request, settings)
    if session_cookie:
        try:
            claims = await auth.verify_session_cookie(session_cookie, check_revoked=True)
            await auth.revoke_sessions(claims.sub)
        except SimplyHappyError as e:
            logger.warning("Logout could not revoke sessions: %s", e.message)

    response = RedirectResponse("/", status_code=302)
    response.delete_cookie(settings.session_cookie_name, path="/")
    return response


@router.get("/delete", include_in_schema=False)
async def delete_account(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> RedirectResponse:
    """Clear the session cookie and delete the signed-in user's account."""
    session_cookie = read_session_cookie(request, settings)
    if session_cookie:
        try:
            claims = await auth.verify_session_cookie(session_cookie, check_revoked=True)
            await auth.delete_user(claims.sub)
        except SimplyHappyError as e:
            logger.warning("Account deletion failed: %s", e.message)

    response = RedirectResponse("/", status_code=302)
    response.delete_cookie(settings.session_cookie_name, path="/")
    return response
