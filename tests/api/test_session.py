"""
Tests for the login page and session endpoints.
"""

import asyncio
import time

import pytest

from modules.auth.exceptions import UserNotFoundError

from tests.conftest import create_test_token


def login(client, id_token: str, csrf_cookie: str = "csrf-123", csrf_field: str = "csrf-123", as_json=False):
    client.cookies.set("csrfToken", csrf_cookie)
    body = {"idToken": id_token, "csrfToken": csrf_field}
    if as_json:
        return client.post("/sessionLogin", json=body)
    return client.post("/sessionLogin", data=body)


class TestLoginPage:
    def test_anonymous_visitor_gets_page_and_csrf_cookie(self, client):
        response = client.get("/", follow_redirects=False)
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert response.cookies.get("csrfToken")

    def test_csrf_cookie_changes_per_visit(self, client):
        first = client.get("/").cookies.get("csrfToken")
        second = client.get("/").cookies.get("csrfToken")
        assert first != second

    def test_signed_in_visitor_is_redirected(self, signed_in_client):
        response = signed_in_client.get("/", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/profile"

    def test_garbage_session_shows_login(self, client):
        client.cookies.set("session", "garbage")
        response = client.get("/", follow_redirects=False)
        assert response.status_code == 200

    def test_static_assets_are_served(self, client):
        response = client.get("/style.css")
        assert response.status_code == 200


class TestSessionLogin:
    def test_success_sets_http_only_session_cookie(self, client, id_token):
        response = login(client, id_token)

        assert response.status_code == 200
        assert response.json() == {"status": "success"}
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("session=")
        assert "HttpOnly" in set_cookie
        assert "Max-Age=432000" in set_cookie

    def test_json_body(self, client, id_token):
        response = login(client, id_token, as_json=True)
        assert response.status_code == 200
        assert response.cookies.get("session")

    @pytest.mark.parametrize("id_token_kind", ["valid", "invalid"])
    def test_csrf_mismatch_is_unauthorized(self, client, id_token, id_token_kind):
        """A CSRF mismatch fails regardless of the identity token."""
        token = id_token if id_token_kind == "valid" else "not-a-token"
        response = login(client, token, csrf_field="something-else")
        assert response.status_code == 401
        assert response.text == "UNAUTHORIZED REQUEST!"
        assert "session" not in response.cookies

    def test_missing_csrf_cookie(self, client, id_token):
        response = client.post("/sessionLogin", data={"idToken": id_token, "csrfToken": "x"})
        assert response.status_code == 401

    def test_missing_fields(self, client):
        client.cookies.set("csrfToken", "csrf-123")
        response = client.post("/sessionLogin", data={})
        assert response.status_code == 401

    def test_invalid_id_token(self, client):
        response = login(client, "not-a-token")
        assert response.status_code == 401
        assert response.text == "UNAUTHORIZED REQUEST!"

    def test_expired_id_token(self, client):
        response = login(client, create_test_token(expired=True))
        assert response.status_code == 401

    def test_stale_sign_in(self, client):
        """Identity tokens from a sign-in over 5 minutes ago are refused."""
        token = create_test_token(signed_in_at=int(time.time()) - 301)
        response = login(client, token)
        assert response.status_code == 401
        assert "session" not in response.cookies

    def test_recent_sign_in_within_window(self, client):
        token = create_test_token(signed_in_at=int(time.time()) - 200)
        response = login(client, token)
        assert response.status_code == 200


class TestLogout:
    def test_logout_revokes_old_session(self, client, auth_service):
        token = create_test_token(signed_in_at=int(time.time()) - 60)
        old_cookie = asyncio.run(auth_service.create_session_cookie(token, 5 * 24 * 60 * 60))
        client.cookies.set("session", old_cookie)
        assert client.get("/profile", follow_redirects=False).status_code == 200

        response = client.get("/logout", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"
        assert 'session=""' in response.headers["set-cookie"]

        client.cookies.set("session", old_cookie)
        response = client.get("/profile", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"

    def test_logout_right_after_sign_in(self, client):
        """A session started and ended within the same second stays ended."""
        response = login(client, create_test_token())
        assert response.status_code == 200
        old_cookie = response.cookies.get("session")

        client.cookies.set("session", old_cookie)
        assert client.get("/logout", follow_redirects=False).status_code == 302

        client.cookies.set("session", old_cookie)
        response = client.get("/profile", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"

    def test_logout_without_session(self, client):
        response = client.get("/logout", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"

    def test_logout_with_invalid_session(self, client):
        client.cookies.set("session", "garbage")
        response = client.get("/logout", follow_redirects=False)
        assert response.status_code == 302


class TestDeleteAccount:
    def test_delete_removes_user(self, signed_in_client, auth_service, test_user_id):
        response = signed_in_client.get("/delete", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"

        with pytest.raises(UserNotFoundError):
            asyncio.run(auth_service.get_user(test_user_id))

    def test_delete_without_session(self, client, supabase_client, test_user_id):
        response = client.get("/delete", follow_redirects=False)
        assert response.status_code == 302
        assert test_user_id in supabase_client.auth.admin.users

    def test_delete_twice_still_redirects(self, signed_in_client):
        cookie = signed_in_client.cookies.get("session")
        signed_in_client.get("/delete", follow_redirects=False)
        signed_in_client.cookies.set("session", cookie)
        response = signed_in_client.get("/delete", follow_redirects=False)
        assert response.status_code == 302
