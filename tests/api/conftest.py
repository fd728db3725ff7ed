"""
Fixtures for API tests.

Wires a fresh application to the real auth and tips services running
over in-memory Supabase stand-ins.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_tips_service
from modules.auth.service import AuthService
from modules.tips.service import TipsService
from shared.config import get_settings

from tests.conftest import InMemoryProgressRepository, InMemoryTipRepository


@pytest.fixture
def progress_repo() -> InMemoryProgressRepository:
    return InMemoryProgressRepository()


@pytest.fixture
def auth_service(supabase_client, test_settings) -> AuthService:
    return AuthService(supabase_client, test_settings)


@pytest.fixture
def tips_service(progress_repo) -> TipsService:
    return TipsService(progress=progress_repo, tips=InMemoryTipRepository())


@pytest.fixture
def app(test_settings, auth_service, tips_service):
    """Create a fresh app for each test."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_tips_service] = lambda: tips_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def signed_in_client(client, auth_service, id_token) -> TestClient:
    """A client holding a valid session cookie for the test user."""
    cookie = asyncio.run(auth_service.create_session_cookie(id_token, 5 * 24 * 60 * 60))
    client.cookies.set("session", cookie)
    return client
