"""Tests for Settings validation and defaults."""

import pytest
from pydantic import ValidationError

from viewcache.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.cache_expiration_time >= 0
    assert settings.cache_key_prefix == "view"
    assert settings.block_templates_path == "blocks"


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CACHE_EXPIRATION_TIME", "60")
    monkeypatch.setenv("CACHE_USE_DEVICE", "true")
    settings = Settings(_env_file=None)
    assert settings.cache_expiration_time == 60
    assert settings.cache_use_device is True


def test_block_templates_path_trailing_slash_stripped() -> None:
    assert Settings(_env_file=None, block_templates_path="blocks/").block_templates_path == "blocks"


@pytest.mark.parametrize("prefix", ["", "view:v2"])
def test_invalid_key_prefix(prefix: str) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, cache_key_prefix=prefix)


def test_negative_expiration_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, cache_expiration_time=-1)


def test_log_level_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert Settings(_env_file=None).log_level == "WARNING"


def test_empty_log_level_is_unset() -> None:
    assert Settings(_env_file=None, log_level="").log_level is None


def test_unknown_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "FOO")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
