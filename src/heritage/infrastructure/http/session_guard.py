"""Admin session guard — bearer tokens with a single refresh-on-401.

Anything that needs an authenticated call goes through
``SessionGuard.request()``: it injects the ``Authorization`` header and,
when the backend answers 401, refreshes the access token once and retries
once before giving up.
"""

from __future__ import annotations

import httpx
import pydantic
import structlog

from heritage.domain.exceptions import AuthenticationError
from heritage.domain.model.session import AdminUser, Session
from heritage.domain.repository.session_repository import SessionRepository
from heritage.infrastructure.http.schemas import (
    LoginResponseSchema,
    RefreshResponseSchema,
)

logger = structlog.get_logger(__name__)

LOGIN_PATH = "/api/admin/login/"
REFRESH_PATH = "/api/token/refresh/"
PROFILE_PATH = "/api/user/profile/"


class SessionGuard:

    def __init__(self, http: httpx.Client, sessions: SessionRepository) -> None:
        self._http = http
        self._sessions = sessions

    # --- State ----------------------------------------------------------------

    @property
    def is_authenticated(self) -> bool:
        return self._sessions.get() is not None

    @property
    def current_user(self) -> AdminUser | None:
        session = self._sessions.get()
        return session.user if session else None

    def get_access_token(self) -> str | None:
        session = self._sessions.get()
        return session.access if session else None

    def auth_headers(self) -> dict[str, str]:
        token = self.get_access_token()
        return {"Authorization": f"Bearer {token}"} if token else {}

    # --- Login / logout -------------------------------------------------------

    def login(self, username: str, password: str) -> AdminUser:
        try:
            response = self._http.post(
                LOGIN_PATH, json={"username": username, "password": password}
            )
        except httpx.HTTPError as exc:
            raise AuthenticationError(f"Login failed: {exc}") from exc

        if not response.is_success:
            raise AuthenticationError(_error_message(response, "Login failed"))

        try:
            parsed = LoginResponseSchema.model_validate(response.json())
        except ValueError as exc:
            raise AuthenticationError("Invalid response format") from exc
        if not parsed.success:
            raise AuthenticationError("Login failed")

        session = parsed.to_domain()
        self._sessions.save(session)
        logger.info("Signed in", username=session.user.username)
        return session.user

    def logout(self) -> None:
        self._sessions.clear()

    # --- Refresh --------------------------------------------------------------

    def refresh(self) -> bool:
        """Swap the stored access token for a fresh one. False on any failure."""
        session = self._sessions.get()
        if session is None or not session.refresh:
            return False

        try:
            response = self._http.post(REFRESH_PATH, json={"refresh": session.refresh})
        except httpx.HTTPError as exc:
            logger.warning("Token refresh failed", error=str(exc))
            return False
        if not response.is_success:
            logger.info("Token refresh refused", status=response.status_code)
            return False

        try:
            access = RefreshResponseSchema.model_validate(response.json()).access
        except ValueError:
            logger.warning("Token refresh returned malformed body")
            return False

        self._sessions.save(session.with_access(access))
        logger.info("Access token refreshed", username=session.user.username)
        return True

    # --- Authenticated requests -----------------------------------------------

    def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send an authenticated request, refreshing and retrying once on 401."""
        if not self.is_authenticated:
            raise AuthenticationError("Not signed in")

        response = self._send(method, path, **kwargs)
        if response.status_code != 401:
            return response

        if not self.refresh():
            raise AuthenticationError("Session expired and refresh failed")

        response = self._send(method, path, **kwargs)
        if response.status_code == 401:
            raise AuthenticationError("Session rejected after token refresh")
        return response

    def check(self) -> AdminUser | None:
        """Verify the stored session against the backend.

        Clears the session and returns None if the backend no longer
        accepts it.
        """
        if not self.is_authenticated:
            return None
        try:
            response = self.request("GET", PROFILE_PATH)
        except AuthenticationError as exc:
            logger.info("Session check failed", reason=str(exc))
            self.logout()
            return None
        if not response.is_success:
            logger.info("Profile fetch failed", status=response.status_code)
            self.logout()
            return None
        return self.current_user

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        headers = dict(kwargs.pop("headers", None) or {})
        headers.update(self.auth_headers())
        try:
            return self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise AuthenticationError(f"Authenticated request failed: {exc}") from exc


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict):
        return str(body.get("error") or body.get("detail") or default)
    return default
