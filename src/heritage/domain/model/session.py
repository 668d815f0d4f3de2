"""Admin session — the signed-in user and their bearer tokens."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class AdminUser:
    id: int
    username: str
    email: str = ""
    is_admin: bool = False
    is_staff: bool = False


@dataclass(frozen=True)
class Session:
    """A stored login. ``access`` is rotated by token refresh; ``refresh`` is not."""

    user: AdminUser
    access: str
    refresh: str

    def with_access(self, access: str) -> Session:
        return replace(self, access=access)
