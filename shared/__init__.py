"""
Shared infrastructure for the Simply Happy server.

This package contains cross-cutting concerns used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base class for table-backed repositories

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    SimplyHappyError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    DOCUMENT_STORE,
    IDENTITY_PROVIDER,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "SimplyHappyError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "DOCUMENT_STORE",
    "IDENTITY_PROVIDER",
    "AuthenticatedUser",
]
