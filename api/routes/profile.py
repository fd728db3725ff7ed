"""
Profile page endpoint.

Renders the signed-in user's profile with links to the daily tip actions.
"""

import logging
from html import escape

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from modules.auth.interfaces import IAuthService
from modules.auth.models import UserRecord
from modules.tips.interfaces import ITipsService
from shared.config import Settings, get_settings
from shared.exceptions import SimplyHappyError

from ..dependencies import get_auth_service, get_tips_service
from ..middleware.auth import read_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter()


def render_profile_page(user: UserRecord) -> str:
    """Build the profile HTML for a user. All user fields are escaped."""
    display_name = escape(user.display_name or "N/A")
    uid = escape(user.uid, quote=True)
    photo = (
        f'<img id="photo" src="{escape(user.photo_url, quote=True)}">'
        if user.photo_url
        else ""
    )
    verified = "verified" if user.email_verified else "unverified"

    return (
        "<!DOCTYPE html>"
        "<html>"
        '<meta charset="UTF-8">'
        '<link href="style.css" rel="stylesheet" type="text/css" media="screen" />'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        "<title>Sample Profile Page</title>"
        "<body>"
        '<div id="container">'
        f"  <h3>Welcome to Session Management Example App, {display_name}</h3>"
        '  <div id="loaded">'
        '    <div id="main">'
        '      <div id="user-signed-in">'
        '        <div id="user-info">'
        f'          <div id="photo-container">{photo}</div>'
        f'          <div id="name">{display_name}</div>'
        f'          <div id="email">{escape(user.email or "")} ({verified})</div>'
        '          <div class="clearfix"></div>'
        "        </div>"
        f'        <div><a href="tips/{uid}">display actions of the day</a></div>'
        f'        <div><a href="complete_tip/{uid}">complete tip of the day</a></div>'
        "        <p>"
        "          <button id=\"sign-out\" onClick=\"window.location.assign('/logout')\">Sign Out</button>"
        "          <button id=\"delete-account\" onClick=\"window.location.assign('/delete')\">"
        "Delete account</button>"
        "        </p>"
        "      </div>"
        "    </div>"
        "  </div>"
        "</div>"
        "</body>"
        "</html>"
    )


@router.get("/profile", response_class=HTMLResponse, include_in_schema=False)
async def profile(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
    tips: ITipsService = Depends(get_tips_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Show the profile page for the session's user.

    Any failure (no session, revoked session, provider errors) sends the
    visitor back to the login page. Viewing the profile also creates the
    user's progress document if it does not exist yet.
    """
    try:
        claims = await auth.verify_session_cookie(
            read_session_cookie(request, settings), check_revoked=True
        )
        user = await auth.get_user(claims.sub)
        await tips.ensure_progress(user.uid)
    except SimplyHappyError as e:
        logger.debug("Profile unavailable, redirecting to login: %s", e.code)
        return RedirectResponse("/", status_code=302)

    return HTMLResponse(render_profile_page(user))
