"""
Authentication module.

Handles identity token verification, session cookies, CSRF protection
and user records.

Public API:
- IAuthService: Interface for auth operations
- CsrfGuard: Request-scoped CSRF nonce issuing and checking
- IdTokenClaims, SessionClaims, UserRecord: Auth models
- Auth exceptions: InvalidTokenError, RevokedSessionError, etc.
"""

from .interfaces import IAuthService
from .csrf import CsrfGuard
from .models import (
    IdTokenClaims,
    SessionClaims,
    UserRecord,
    SessionLoginRequest,
    SessionLoginResponse,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    RevokedSessionError,
    StaleSignInError,
    CsrfTokenMismatchError,
    UserNotFoundError,
    UserMismatchError,
)

__all__ = [
    # Interface
    "IAuthService",
    "CsrfGuard",
    # Models
    "IdTokenClaims",
    "SessionClaims",
    "UserRecord",
    "SessionLoginRequest",
    "SessionLoginResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "RevokedSessionError",
    "StaleSignInError",
    "CsrfTokenMismatchError",
    "UserNotFoundError",
    "UserMismatchError",
]
