"""Tests for Settings validation."""

import pytest

from app.core.config import Settings


def test_secret_key_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "")
    with pytest.raises(ValueError, match="SECRET_KEY is required"):
        Settings(_env_file=None)


def test_non_hmac_algorithm_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "k")
    monkeypatch.setenv("ALGORITHM", "RS256")
    with pytest.raises(ValueError, match="HMAC"):
        Settings(_env_file=None)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "k")
    settings = Settings(_env_file=None)
    assert settings.app_name == "taskdesk"
    assert settings.algorithm == "HS256"
    assert settings.firebase_service_account_key is None
