"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from modules.auth.csrf import CsrfGuard
from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.tips.interfaces import ITipsService
    from modules.tips.repository import ProgressRepository, TipRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._tips_service: "ITipsService | None" = None
        self._progress_repository: "ProgressRepository | None" = None
        self._tip_repository: "TipRepository | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            from shared.database import get_supabase_client
            self._auth_service = AuthService(get_supabase_client())
        return self._auth_service

    @property
    def progress_repository(self) -> "ProgressRepository":
        """Get the progress repository instance."""
        if self._progress_repository is None:
            from modules.tips.repository import ProgressRepository
            from shared.database import get_supabase_client
            self._progress_repository = ProgressRepository(
                get_supabase_client(), get_settings().progress_table
            )
        return self._progress_repository

    @property
    def tip_repository(self) -> "TipRepository":
        """Get the tip repository instance."""
        if self._tip_repository is None:
            from modules.tips.repository import TipRepository
            from shared.database import get_supabase_client
            self._tip_repository = TipRepository(
                get_supabase_client(), get_settings().tips_table
            )
        return self._tip_repository

    @property
    def tips(self) -> "ITipsService":
        """Get the tips service instance."""
        if self._tips_service is None:
            from modules.tips.service import TipsService
            self._tips_service = TipsService(
                progress=self.progress_repository,
                tips=self.tip_repository,
                max_retries=get_settings().progress_max_retries,
            )
        return self._tips_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._tips_service = None
        self._progress_repository = None
        self._tip_repository = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() will create a fresh container with
    new service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_tips_service() -> "ITipsService":
    """FastAPI dependency for tips service."""
    return get_container().tips


def get_csrf_guard(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> CsrfGuard:
    """FastAPI dependency for the request's CSRF guard."""
    return CsrfGuard(request, settings)
