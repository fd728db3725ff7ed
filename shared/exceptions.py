"""
Error types shared by the auth and tips modules.

Modules raise subclasses of these; api/errors.py turns each base into a
status code. Authentication failures render as the fixed 401 text the
login page expects, everything else as a JSON ErrorResponse.
"""

from typing import Optional, Any

# The two remote services this server talks to
DOCUMENT_STORE = "supabase"
IDENTITY_PROVIDER = "supabase-auth"

_SERVICE_ERROR_CODES = {
    DOCUMENT_STORE: "DOCUMENT_STORE_ERROR",
    IDENTITY_PROVIDER: "IDENTITY_PROVIDER_ERROR",
}


class SimplyHappyError(Exception):
    """
    Root of every error the server raises on purpose.

    `code` is the machine-readable name sent to clients; it defaults to
    the class name. `details` carries ids that help trace the failure and
    must never hold tokens or cookie values.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(SimplyHappyError):
    """A user or a tip does not exist."""


class ConflictError(SimplyHappyError):
    """Progress changed under us more often than we are willing to retry."""


class AuthenticationError(SimplyHappyError):
    """No usable identity: bad, expired or revoked token, stale sign-in, CSRF mismatch."""


class AuthorizationError(SimplyHappyError):
    """Signed in, but the request names another user."""


class ExternalServiceError(SimplyHappyError):
    """
    A Supabase call failed.

    Args:
        message: Human readable description
        service: DOCUMENT_STORE for PostgREST tables, IDENTITY_PROVIDER for
            the auth admin API
        code: Overrides the per-service default code
        details: Extra context; the service name and any upstream HTTP
            status are added to it
        status: HTTP status reported by Supabase, if any
    """

    def __init__(
        self,
        message: str,
        service: str = DOCUMENT_STORE,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        status: Optional[int] = None,
    ):
        super().__init__(message, code or _SERVICE_ERROR_CODES.get(service), details)
        self.service = service
        self.status = status
        self.details["service"] = service
        if status is not None:
            self.details["status"] = status
