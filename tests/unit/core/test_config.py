"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import NaifuruConfig
from core.errors import NaifuruConfigParseError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to info logging and utf-8 text."""
    monkeypatch.delenv("NAIFURU_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NAIFURU_TEXT_ENCODING", raising=False)

    config = NaifuruConfig.from_env()

    assert (config.log_level, config.text_encoding) == ("info", "utf-8")


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Log level should be case-insensitive."""
    monkeypatch.setenv("NAIFURU_LOG_LEVEL", " DEBUG ")

    config = NaifuruConfig.from_env()

    assert config.log_level == "debug"


def test_from_env_normalizes_encoding_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    """Encoding aliases should resolve to the canonical codec name."""
    monkeypatch.setenv("NAIFURU_TEXT_ENCODING", "SJIS")

    config = NaifuruConfig.from_env()

    assert config.text_encoding == "shift_jis"


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unsupported log level."""
    monkeypatch.setenv("NAIFURU_LOG_LEVEL", "verbose")

    with pytest.raises(NaifuruConfigParseError) as error_info:
        NaifuruConfig.from_env()

    assert error_info.value.exit_code == 5


def test_from_env_raises_for_unknown_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unknown text codec."""
    monkeypatch.setenv("NAIFURU_TEXT_ENCODING", "not-a-codec")

    with pytest.raises(NaifuruConfigParseError):
        NaifuruConfig.from_env()
