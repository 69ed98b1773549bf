# tests/test_settings.py

"""Tests for GameSettings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from termsnake.core.log_config import setup_package_logging
from termsnake.core.settings import DEFAULT_TICK_MS, GameSettings
from termsnake.exceptions import ConfigurationError


class TestGameSettings:
    """Test the GameSettings model."""

    def test_defaults(self):
        settings = GameSettings()
        assert settings.tick_ms == DEFAULT_TICK_MS == 45
        assert settings.tick_interval == pytest.approx(0.045)
        assert settings.seed is None
        assert settings.score_label == "Score:"
        assert settings.log_level == "WARNING"

    def test_log_level_is_normalized(self):
        assert GameSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ConfigurationError) as exc_info:
            GameSettings(log_level="chatty")
        assert exc_info.value.field == "log_level"

    def test_glyph_must_be_single_character(self):
        with pytest.raises(ConfigurationError) as exc_info:
            GameSettings(apple_glyph="()")
        assert exc_info.value.field == "apple_glyph"

    def test_score_label_must_fit(self):
        with pytest.raises(ConfigurationError):
            GameSettings(score_label="Points:")

    def test_tick_must_be_positive(self):
        with pytest.raises(ValidationError):
            GameSettings(tick_ms=0)

    def test_log_file_is_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = GameSettings(log_file="game.log")
        assert settings.log_file == tmp_path / "game.log"

    def test_log_file_directory_must_exist(self, tmp_path):
        with pytest.raises(ConfigurationError):
            GameSettings(log_file=tmp_path / "missing" / "game.log")


class TestLogging:
    """Test setup_package_logging()."""

    def teardown_method(self):
        setup_package_logging()

    def test_writes_to_log_file(self, tmp_path):
        log_file = tmp_path / "termsnake.log"
        setup_package_logging("DEBUG", log_file)

        logger = logging.getLogger("termsnake")
        logger.debug("apple placed")
        for handler in logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "apple placed" in text
        assert "DEBUG" in text

    def test_null_handler_without_file(self):
        setup_package_logging("INFO")
        logger = logging.getLogger("termsnake")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)
        assert logger.level == logging.INFO
        assert logger.propagate is False
