"""Tests for client settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from hr_portal_client.config import ClientSettings
from hr_portal_client.enums import Environment


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("API_BASE_URL", "TOKEN_KEY", "ROLE_KEY", "STRICT_PARSING", "FALLBACK_COLLECTION"):
        monkeypatch.delenv(f"HR_PORTAL_{name}", raising=False)

    config = ClientSettings(_env_file=None)

    assert config.TOKEN_KEY == "token"
    assert config.ROLE_KEY == "rol"
    assert config.FALLBACK_COLLECTION == "employees"
    assert config.STRICT_PARSING is False
    assert config.HTTP_TIMEOUT_SECONDS is None
    assert config.ENVIRONMENT is Environment.DEVELOPMENT


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HR_PORTAL_API_BASE_URL", "https://hr.example.com/api/")
    monkeypatch.setenv("HR_PORTAL_STRICT_PARSING", "true")
    monkeypatch.setenv("HR_PORTAL_CREDENTIAL_STORE_PATH", str(tmp_path / "c.json"))
    monkeypatch.setenv("HR_PORTAL_ENVIRONMENT", "production")

    config = ClientSettings(_env_file=None)

    assert config.API_BASE_URL == "https://hr.example.com/api"
    assert config.STRICT_PARSING is True
    assert config.CREDENTIAL_STORE_PATH == tmp_path / "c.json"
    assert config.ENVIRONMENT is Environment.PRODUCTION


@pytest.mark.parametrize("path", ["/employees", "employees"])
def test_url_for_joins_paths(path: str) -> None:
    config = ClientSettings(_env_file=None, API_BASE_URL="http://hr.test/")

    assert config.url_for(path) == "http://hr.test/employees"
