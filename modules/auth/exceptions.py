"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers (or by routes that redirect instead).
"""

from shared.exceptions import AuthenticationError, AuthorizationError, NotFoundError


class InvalidTokenError(AuthenticationError):
    """Raised when an identity token or session cookie is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when an identity token or session cookie has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no token or session cookie is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class RevokedSessionError(AuthenticationError):
    """Raised when a session cookie predates the user's last revocation."""

    def __init__(self, user_id: str):
        super().__init__(
            "Session has been revoked",
            code="SESSION_REVOKED",
            details={"user_id": user_id},
        )


class StaleSignInError(AuthenticationError):
    """Raised when the identity token comes from an old sign-in."""

    def __init__(self, age_seconds: int, max_age_seconds: int):
        super().__init__(
            "Recent sign-in required",
            code="STALE_SIGN_IN",
            details={"age_seconds": age_seconds, "max_age_seconds": max_age_seconds},
        )


class CsrfTokenMismatchError(AuthenticationError):
    """Raised when the submitted CSRF token does not match the cookie."""

    def __init__(self):
        super().__init__("CSRF token mismatch", code="CSRF_MISMATCH")


class UserNotFoundError(NotFoundError):
    """Raised when the identity provider has no such user."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UserMismatchError(AuthorizationError):
    """Raised when a request names a user other than the signed-in one."""

    def __init__(self, requested_id: str, user_id: str):
        super().__init__(
            "Cannot act on behalf of another user",
            code="USER_MISMATCH",
            details={"requested_id": requested_id, "user_id": user_id},
        )
