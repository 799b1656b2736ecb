"""Tests for settings and logging configuration."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from stackmask.settings import Settings, configure_logging, get_settings, reset_settings


class TestSettings:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.host == "null"
        assert settings.repl_marker == "<stdin>"
        assert settings.max_clip_length == 6
        assert settings.min_clip_length == 2
        assert settings.log_level == "WARNING"

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STACKMASK_REPL_MARKER", "repl")
        monkeypatch.setenv("STACKMASK_MAX_CLIP_LENGTH", "4")
        settings = Settings(_env_file=None)
        assert settings.repl_marker == "repl"
        assert settings.max_clip_length == 4

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("STACKMASK_HOST", "python")
        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.host == "python"

    def test_configure_logging(self) -> None:
        with patch("logging.basicConfig") as basic_config:
            configure_logging(Settings(_env_file=None, log_level="debug"))
        basic_config.assert_called_once_with(level="DEBUG")

    def test_min_clip_above_max_rejected(self) -> None:
        with pytest.raises(ValidationError, match="min_clip_length"):
            Settings(_env_file=None, max_clip_length=2, min_clip_length=5)

    def test_min_clip_above_max_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STACKMASK_MAX_CLIP_LENGTH", "1")
        with pytest.raises(ValidationError, match="exceeds max_clip_length"):
            Settings(_env_file=None)

    def test_equal_clip_lengths_allowed(self) -> None:
        settings = Settings(_env_file=None, max_clip_length=3, min_clip_length=3)
        assert settings.min_clip_length == settings.max_clip_length == 3
