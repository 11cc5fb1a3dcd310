"""Process-wide logger for mini-service-utils.

The logger is created lazily on first access and reused afterwards. Options
are only honoured by the call that creates it.
"""

from __future__ import annotations

import logging
import logging.config
import os
import sys
import threading
from pathlib import Path
from typing import IO, Any

import yaml

from mini_service_utils.errors import LoggingError

PACKAGE_NAME = "mini-service-utils"
LOG_LEVEL_ENV_VAR = "MINI_SERVICE_LOG_LEVEL"

_DEFAULT_LEVEL = "DEBUG"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_lock = threading.Lock()
_logger: logging.Logger | None = None
_handler: logging.Handler | None = None


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Logging configuration dictionary

    Raises:
        LoggingError: If configuration cannot be loaded or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise LoggingError(f"Invalid configuration format in {config_path}")
    return config


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv(LOG_LEVEL_ENV_VAR) or _DEFAULT_LEVEL).upper()
    numeric_level = getattr(logging, name, None)
    if not isinstance(numeric_level, int):
        raise LoggingError(f"Invalid log level: {name}")
    return numeric_level


def get_logger(
    name: str | None = None,
    level: str | int | None = None,
    stream: IO[str] | None = None,
    config_path: Path | str | None = None,
) -> logging.Logger:
    """Create or reuse the package logger.

    Args:
        name: Logger name, defaults to the package name
        level: Minimum level, defaults to $MINI_SERVICE_LOG_LEVEL or DEBUG
        stream: Output stream, defaults to standard output
        config_path: YAML dictConfig file configuring the logger instead

    Returns:
        The process-wide logger

    Raises:
        LoggingError: If the level or the configuration file is invalid

    """
    global _logger, _handler

    with _lock:
        if _logger is not None:
            return _logger

        logger_name = name or PACKAGE_NAME
        if config_path is not None:
            config = load_config(Path(config_path))
            config.setdefault("disable_existing_loggers", False)
            try:
                logging.config.dictConfig(config)
            except (ValueError, TypeError, AttributeError, ImportError) as e:
                raise LoggingError(
                    f"Invalid logging configuration in {config_path}: {e}"
                ) from e
            _logger = logging.getLogger(logger_name)
            return _logger

        numeric_level = _resolve_level(level)
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

        logger = logging.getLogger(logger_name)
        logger.setLevel(numeric_level)
        logger.addHandler(handler)
        logger.propagate = False

        _logger, _handler = logger, handler
        return logger


def reset_logger() -> None:
    """Forget the cached logger so the next access creates it again (testing)."""
    global _logger, _handler

    with _lock:
        if _logger is not None and _handler is not None:
            _logger.removeHandler(_handler)
            _handler.close()
        _logger = None
        _handler = None
