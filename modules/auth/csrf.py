"""
Double-submit CSRF protection for the login form.

Every time the login page is served a fresh nonce is written to a
readable cookie; the page posts it back alongside the identity token.
"""

import hmac
import secrets

from fastapi import Request, Response

from shared.config import Settings

from .exceptions import CsrfTokenMismatchError

CSRF_TOKEN_BYTES = 32


class CsrfGuard:
    """Issues and checks CSRF nonces for the current request."""

    def __init__(self, request: Request, settings: Settings):
        self._request = request
        self._settings = settings

    @property
    def cookie_value(self) -> str:
        return self._request.cookies.get(self._settings.csrf_cookie_name, "")

    def issue(self, response: Response) -> str:
        """Mint a new nonce and set it as the CSRF cookie on the response."""
        token = secrets.token_urlsafe(CSRF_TOKEN_BYTES)
        response.set_cookie(
            key=self._settings.csrf_cookie_name,
            value=token,
            httponly=False,  # The login page script reads it
            secure=self._settings.cookie_secure,
            samesite="strict",
            path="/",
        )
        return token

    def validate(self, submitted: str) -> None:
        """
        Check a submitted token against the cookie.

        Raises:
            CsrfTokenMismatchError: If either side is missing or they differ
        """
        expected = self.cookie_value
        if not submitted or not expected:
            raise CsrfTokenMismatchError()
        if not hmac.compare_digest(submitted.encode(), expected.encode()):
            raise CsrfTokenMismatchError()
