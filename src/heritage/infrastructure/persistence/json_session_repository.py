"""JSON-file-backed implementation of SessionRepository."""

from __future__ import annotations

import json
from pathlib import Path

import pydantic
import structlog

from heritage.domain.model.session import Session
from heritage.domain.repository.session_repository import SessionRepository
from heritage.infrastructure.http.schemas import SessionRecord

logger = structlog.get_logger(__name__)


class JsonSessionRepository(SessionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get(self) -> Session | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return SessionRecord.model_validate(raw).to_domain()
        except (ValueError, pydantic.ValidationError):
            logger.warning("Ignoring unreadable session file", path=str(self._file_path))
            return None

    def save(self, session: Session) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        record = SessionRecord.from_domain(session)
        self._file_path.write_text(
            json.dumps(record.model_dump(), indent=2) + "\n", encoding="utf-8"
        )

    def clear(self) -> None:
        self._file_path.unlink(missing_ok=True)
