"""
Shared test fixtures and utilities.

Provides token helpers and in-memory stand-ins for the Supabase admin
API and the tips tables, so routes and services can be exercised
end to end without a network.
"""

import time
from types import SimpleNamespace
from typing import Optional

import jwt  # PyJWT
import pytest
from supabase import AuthApiError

from api.dependencies import reset_container
from modules.tips.models import FIRST_DAY, Progress, Tip
from shared.config import Settings, get_settings
from shared.database import reset_client_cache


# Test secrets (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_SESSION_SECRET = "test-session-secret-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    signed_in_at: Optional[int] = None,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a Supabase-style access token.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        signed_in_at: Sign-in time recorded in the amr claim (defaults to now)
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = int(time.time())
    exp = now - 3600 if expired else now + 3600
    payload = {
        "sub": user_id,
        "email": email,
        "aud": "authenticated",
        "role": "authenticated",
        "amr": [{"method": "password", "timestamp": signed_in_at or now}],
        "exp": exp,
        "iat": now if not expired else now - 7200,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_supabase_user(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    full_name: Optional[str] = "Test User",
    avatar_url: Optional[str] = None,
    confirmed: bool = True,
    app_metadata: Optional[dict] = None,
) -> SimpleNamespace:
    """Build an object shaped like a Supabase auth User."""
    user_metadata = {}
    if full_name:
        user_metadata["full_name"] = full_name
    if avatar_url:
        user_metadata["avatar_url"] = avatar_url
    return SimpleNamespace(
        id=user_id,
        email=email,
        email_confirmed_at="2024-01-01T00:00:00Z" if confirmed else None,
        user_metadata=user_metadata,
        app_metadata=app_metadata or {"provider": "email"},
    )


class FakeAuthAdmin:
    """In-memory replacement for supabase.auth.admin."""

    def __init__(self, *users: SimpleNamespace):
        self.users = {u.id: u for u in users}

    def _lookup(self, user_id: str) -> SimpleNamespace:
        if user_id not in self.users:
            raise AuthApiError("User not found", 404, "user_not_found")
        return self.users[user_id]

    def get_user_by_id(self, user_id: str) -> SimpleNamespace:
        return SimpleNamespace(user=self._lookup(user_id))

    def update_user_by_id(self, user_id: str, attributes: dict) -> SimpleNamespace:
        user = self._lookup(user_id)
        if "app_metadata" in attributes:
            user.app_metadata = {**(user.app_metadata or {}), **attributes["app_metadata"]}
        return SimpleNamespace(user=user)

    def delete_user(self, user_id: str) -> None:
        self._lookup(user_id)
        del self.users[user_id]


def make_supabase_client(*users: SimpleNamespace) -> SimpleNamespace:
    """A client exposing only client.auth.admin."""
    return SimpleNamespace(auth=SimpleNamespace(admin=FakeAuthAdmin(*users)))


class InMemoryProgressRepository:
    """Dict-backed stand-in for ProgressRepository with conflict injection."""

    def __init__(self):
        self.rows: dict[str, int] = {}
        self.writes = 0
        # Each entry is applied by a concurrent writer just before our next update
        self.interleaved_writes: list[int] = []

    def get(self, user_id: str) -> Optional[Progress]:
        if user_id not in self.rows:
            return None
        return Progress(user_id=user_id, day=self.rows[user_id])

    def ensure(self, user_id: str) -> None:
        self.rows.setdefault(user_id, FIRST_DAY)

    def compare_and_set_day(self, user_id: str, expected_day: int, new_day: int) -> bool:
        if self.interleaved_writes:
            self.rows[user_id] = self.interleaved_writes.pop(0)
        if self.rows.get(user_id) != expected_day:
            return False
        self.rows[user_id] = new_day
        self.writes += 1
        return True


class InMemoryTipRepository:
    """Dict-backed stand-in for TipRepository seeded like the migrations."""

    def __init__(self):
        self.tips = {
            1: "tip number one",
            2: "tip number two",
            3: "tip number three",
        }

    def get_by_day(self, day: int) -> Optional[Tip]:
        if day not in self.tips:
            return None
        return Tip(day=day, tips=self.tips[day])


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached services, clients and settings around each test."""
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()
    yield
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with test secrets, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        supabase_jwt_secret=TEST_JWT_SECRET,
        session_secret=TEST_SESSION_SECRET,
    )


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def supabase_user(test_user_id: str) -> SimpleNamespace:
    return make_supabase_user(user_id=test_user_id)


@pytest.fixture
def supabase_client(supabase_user: SimpleNamespace) -> SimpleNamespace:
    return make_supabase_client(supabase_user)


@pytest.fixture
def id_token(test_user_id: str) -> str:
    """Create a fresh identity token for the test user."""
    return create_test_token(user_id=test_user_id)
