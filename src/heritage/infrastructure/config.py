"""Client configuration, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "http://127.0.0.1:8000"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the storefront client.

    ``api_url`` is the only setting that changes what the client talks to;
    the rest only affect where local state lives and how chatty it is.
    """

    api_url: str = DEFAULT_API_URL
    data_dir: Path = Path("data")
    http_timeout: float = 10.0
    log_level: str = "WARNING"
    log_json: bool = False

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        timeout_raw = env.get("HERITAGE_HTTP_TIMEOUT", "10")
        try:
            timeout = float(timeout_raw)
        except ValueError:
            raise ValueError(f"HERITAGE_HTTP_TIMEOUT must be a number, got {timeout_raw!r}")
        return Settings(
            api_url=(env.get("HERITAGE_API_URL") or DEFAULT_API_URL).strip().rstrip("/"),
            data_dir=Path(env.get("HERITAGE_DATA_DIR", "data")),
            http_timeout=timeout,
            log_level=env.get("HERITAGE_LOG_LEVEL", "WARNING").upper(),
            log_json=env.get("HERITAGE_LOG_FORMAT", "console").lower() == "json",
        )
