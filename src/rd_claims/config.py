"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rd_claims.api import DEFAULT_API_URL


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number, got {raw!r}"
        raise ValueError(msg) from exc


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        msg = f"{name} must be a logging level name, got {raw!r}"
        raise ValueError(msg)
    return level


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    api_url: str = DEFAULT_API_URL
    state_dir: Path = Path("~/.rd_claims")
    http_timeout: float = 30.0
    log_level: str = "WARNING"

    @property
    def state_file(self) -> Path:
        return self.state_dir.expanduser() / "state.json"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("RD_CLAIMS_ENV", cls.environment),
            api_url=os.getenv("RD_CLAIMS_API_URL") or cls.api_url,
            state_dir=Path(os.getenv("RD_CLAIMS_STATE_DIR", str(cls.state_dir))),
            http_timeout=_env_float("RD_CLAIMS_HTTP_TIMEOUT", cls.http_timeout),
            log_level=_env_log_level("RD_CLAIMS_LOG_LEVEL", cls.log_level),
        )


__all__ = ["AppSettings"]
