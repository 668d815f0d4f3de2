"""Abstract repository for the admin Session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from heritage.domain.model.session import Session


class SessionRepository(ABC):

    @abstractmethod
    def get(self) -> Session | None:
        """Return the stored session, or None when signed out."""

    @abstractmethod
    def save(self, session: Session) -> None:
        """Persist a new or refreshed session."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored session."""
