"""Tests for the package logger accessor."""

import io
import logging
from pathlib import Path

import pytest

from mini_service_utils.errors import LoggingError
from mini_service_utils.logging import (
    LOG_LEVEL_ENV_VAR,
    PACKAGE_NAME,
    get_logger,
    reset_logger,
)


class TestGetLogger:
    """Tests for lazy logger creation."""

    def test_creates_logger(self) -> None:
        """Test that the default logger is named after the package."""
        logger = get_logger()

        assert logger.name == PACKAGE_NAME == "mini-service-utils"
        assert logger.level == logging.DEBUG
        assert callable(logger.debug)

    def test_reuses_the_same_instance(self) -> None:
        """Test that later calls return the cached logger."""
        assert get_logger() is get_logger()

    def test_is_customisable(self) -> None:
        """Test that the first call can choose the logger name."""
        assert get_logger(name="toto").name == "toto"

    def test_ignores_options_once_created(self) -> None:
        """Test that options passed after creation are ignored."""
        logger = get_logger()

        assert get_logger(name="other", level="ERROR") is logger
        assert logger.name == PACKAGE_NAME
        assert logger.level == logging.DEBUG

    def test_writes_to_stream(self) -> None:
        """Test that records are written to the configured stream."""
        stream = io.StringIO()

        get_logger(name="streamed", stream=stream).debug("Load transport http")

        assert "Load transport http" in stream.getvalue()
        assert "DEBUG" in stream.getvalue()

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the default level can be set from the environment."""
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")

        assert get_logger(name="from-env").level == logging.WARNING

    def test_invalid_level(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(LoggingError, match="Invalid log level"):
            get_logger(level="chatty")

    def test_reset_creates_a_new_handler(self) -> None:
        """Test that reset detaches the handler and allows re-creation."""
        logger = get_logger(name="resettable")
        handlers = list(logger.handlers)

        reset_logger()

        assert all(handler not in logger.handlers for handler in handlers)
        assert get_logger(name="resettable") is logger
        assert len(logger.handlers) == 1


class TestYamlConfiguration:
    """Tests for configuring the logger from a YAML file."""

    def test_applies_configuration(self, tmp_path: Path) -> None:
        """Test that a dictConfig YAML file configures the logger."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text(
            "version: 1\n"
            "handlers:\n"
            "  discard:\n"
            "    class: logging.NullHandler\n"
            "loggers:\n"
            "  configured:\n"
            "    level: INFO\n"
            "    handlers: [discard]\n"
        )

        logger = get_logger(name="configured", config_path=config_path)

        assert logger.level == logging.INFO
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that unparsable YAML is reported."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text("handlers: [unclosed\n")

        with pytest.raises(LoggingError, match="Failed to parse YAML"):
            get_logger(config_path=config_path)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        """Test that YAML documents must be mappings."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text("- one\n- two\n")

        with pytest.raises(LoggingError, match="Invalid configuration format"):
            get_logger(config_path=config_path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that missing files are reported."""
        with pytest.raises(LoggingError, match="Failed to read config file"):
            get_logger(config_path=tmp_path / "missing.yaml")
