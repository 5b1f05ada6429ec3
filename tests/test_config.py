from __future__ import annotations

from pathlib import Path

import pytest

from rd_claims.config import AppSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "RD_CLAIMS_ENV",
        "RD_CLAIMS_API_URL",
        "RD_CLAIMS_STATE_DIR",
        "RD_CLAIMS_HTTP_TIMEOUT",
        "RD_CLAIMS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings.from_env()

    assert settings.environment == "development"
    assert settings.api_url == "http://localhost:3001"
    assert settings.http_timeout == 30.0
    assert settings.log_level == "WARNING"


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("RD_CLAIMS_ENV", "staging")
    monkeypatch.setenv("RD_CLAIMS_API_URL", "https://claims.example.com")
    monkeypatch.setenv("RD_CLAIMS_STATE_DIR", str(tmp_path))
    monkeypatch.setenv("RD_CLAIMS_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("RD_CLAIMS_LOG_LEVEL", "debug")

    settings = AppSettings.from_env()

    assert settings.environment == "staging"
    assert settings.api_url == "https://claims.example.com"
    assert settings.state_file == tmp_path / "state.json"
    assert settings.http_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_empty_api_url_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RD_CLAIMS_API_URL", "")

    assert AppSettings.from_env().api_url == "http://localhost:3001"


def test_invalid_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RD_CLAIMS_HTTP_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="RD_CLAIMS_HTTP_TIMEOUT"):
        AppSettings.from_env()


def test_invalid_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RD_CLAIMS_LOG_LEVEL", "loud")

    with pytest.raises(ValueError, match="RD_CLAIMS_LOG_LEVEL"):
        AppSettings.from_env()
