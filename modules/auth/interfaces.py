"""
Authentication module interface.

Other modules and routes depend on IAuthService, not the concrete
implementation. This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import IdTokenClaims, SessionClaims, UserRecord


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity and session operations.

    Implementations must provide all these methods.
    """

    async def verify_id_token(self, id_token: str) -> IdTokenClaims:
        """
        Verify an identity token issued by the identity provider.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...

    async def create_session_cookie(self, id_token: str, expires_in: int) -> str:
        """
        Exchange a verified identity token for a session cookie value.

        Args:
            id_token: Identity token from the browser sign-in
            expires_in: Session lifetime in seconds

        Raises:
            AuthenticationError: If the identity token does not verify
        """
        ...

    async def verify_session_cookie(
        self, session_cookie: str, check_revoked: bool = False
    ) -> SessionClaims:
        """
        Verify a session cookie value.

        With check_revoked, the user record is also fetched: a deleted user
        or a session older than the last revocation fails verification.

        Raises:
            AuthenticationError: If the cookie is missing, invalid, expired or revoked
        """
        ...

    async def revoke_sessions(self, user_id: str) -> None:
        """Revoke every session of the user issued up to now."""
        ...

    async def get_user(self, user_id: str) -> UserRecord:
        """
        Fetch a user record.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def delete_user(self, user_id: str) -> None:
        """
        Delete a user account.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...
