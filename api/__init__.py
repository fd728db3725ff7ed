"""
Simply Happy API package.

Provides the FastAPI application: login page, session endpoints,
profile page and daily tips.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
