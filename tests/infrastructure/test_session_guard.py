"""Tests for SessionGuard: login, header injection, refresh-on-401."""

import json

import httpx
import pytest

from heritage.domain.exceptions import AuthenticationError
from heritage.domain.model.session import AdminUser, Session
from heritage.infrastructure.http.session_guard import SessionGuard
from tests.fakes import FakeSessionRepository

SESSION = Session(user=AdminUser(id=1, username="curator", is_admin=True), access="old", refresh="r1")


class FakeBackend:
    """Tiny scripted backend: accepts only the current access token."""

    def __init__(self, valid_token: str = "old", refresh_ok: bool = True) -> None:
        self.valid_token = valid_token
        self.refresh_ok = refresh_ok
        self.calls: list[tuple[str, str, str | None]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        auth = request.headers.get("Authorization")
        self.calls.append((request.method, request.url.path, auth))
        path = request.url.path

        if path == "/api/admin/login/":
            body = json.loads(request.content)
            if body["password"] != "s3cret":
                return httpx.Response(401, json={"error": "Invalid credentials"})
            return httpx.Response(200, json={
                "success": True,
                "user": {"id": 1, "username": body["username"], "email": "c@shop.test", "is_admin": True},
                "tokens": {"access": "old", "refresh": "r1"},
            })
        if path == "/api/token/refresh/":
            if not self.refresh_ok:
                return httpx.Response(401, json={"detail": "Token is invalid"})
            self.valid_token = "new"
            return httpx.Response(200, json={"access": "new"})
        if auth != f"Bearer {self.valid_token}":
            return httpx.Response(401)
        return httpx.Response(200, json={"ok": True})


def _guard(backend: FakeBackend, session: Session | None = SESSION) -> tuple[SessionGuard, FakeSessionRepository]:
    sessions = FakeSessionRepository(session)
    client = httpx.Client(base_url="http://shop.test", transport=httpx.MockTransport(backend))
    return SessionGuard(client, sessions), sessions


class TestLogin:

    def test_login_stores_session(self):
        guard, sessions = _guard(FakeBackend(), session=None)
        user = guard.login("curator", "s3cret")
        assert user.username == "curator"
        assert guard.is_authenticated
        assert guard.get_access_token() == "old"
        assert sessions.get().refresh == "r1"

    def test_bad_credentials(self):
        guard, _ = _guard(FakeBackend(), session=None)
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            guard.login("curator", "nope")
        assert not guard.is_authenticated

    def test_logout(self):
        guard, _ = _guard(FakeBackend())
        guard.logout()
        assert guard.current_user is None
        assert guard.auth_headers() == {}


class TestAuthenticatedRequests:

    def test_injects_bearer_header(self):
        backend = FakeBackend()
        guard, _ = _guard(backend)
        response = guard.request("GET", "/api/admin/banners/")
        assert response.status_code == 200
        assert backend.calls == [("GET", "/api/admin/banners/", "Bearer old")]

    def test_refreshes_once_and_retries_once(self):
        backend = FakeBackend(valid_token="new")
        guard, sessions = _guard(backend)
        response = guard.request("GET", "/api/admin/banners/")
        assert response.status_code == 200
        assert [path for _, path, _ in backend.calls] == [
            "/api/admin/banners/",
            "/api/token/refresh/",
            "/api/admin/banners/",
        ]
        assert sessions.get().access == "new"

    def test_failed_refresh_fails_the_call(self):
        backend = FakeBackend(valid_token="other", refresh_ok=False)
        guard, _ = _guard(backend)
        with pytest.raises(AuthenticationError, match="refresh failed"):
            guard.request("GET", "/api/admin/banners/")
        assert len(backend.calls) == 2

    def test_second_401_is_not_retried_again(self):
        class StubbornBackend(FakeBackend):
            def __call__(self, request):
                response = super().__call__(request)
                self.valid_token = "never"
                return response

        backend = StubbornBackend(valid_token="never")
        guard, _ = _guard(backend)
        with pytest.raises(AuthenticationError, match="rejected after token refresh"):
            guard.request("GET", "/api/admin/banners/")
        assert len(backend.calls) == 3

    def test_signed_out_request_refused(self):
        guard, _ = _guard(FakeBackend(), session=None)
        with pytest.raises(AuthenticationError, match="Not signed in"):
            guard.request("GET", "/api/admin/banners/")


class TestCheck:

    def test_valid_session(self):
        guard, _ = _guard(FakeBackend())
        assert guard.check().username == "curator"

    def test_expired_session_is_cleared(self):
        guard, sessions = _guard(FakeBackend(valid_token="other", refresh_ok=False))
        assert guard.check() is None
        assert sessions.get() is None
