"""Logging utilities for mvn2llm commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "mvn2llm"

# Level names accepted on the command line. The Java-style names are kept so
# existing invocations such as `-l FINE` or `-l OFF` keep working.
_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
    "OFF": logging.CRITICAL + 10,
    "SEVERE": logging.ERROR,
    "CONFIG": logging.INFO,
    "FINE": logging.DEBUG,
    "FINER": logging.DEBUG,
    "FINEST": logging.DEBUG,
    "ALL": logging.NOTSET,
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the mvn2llm hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def parse_level(name: str) -> int:
    """Translate a level name (Python or Java style) into a logging level."""
    key = name.strip().upper()
    if key not in _LEVELS:
        choices = ", ".join(sorted(_LEVELS))
        raise ValueError(f"Invalid log level: {name} (expected one of {choices})")
    return _LEVELS[key]


def configure_logging(
    *,
    verbose: bool = False,
    level: str | int | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the mvn2llm logger with console output and optional file sink."""
    if verbose:
        effective = logging.DEBUG
    elif isinstance(level, str):
        effective = parse_level(level)
    elif isinstance(level, int):
        effective = level
    else:
        effective = logging.INFO

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(effective)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(effective)
    stream_handler.setFormatter(logging.Formatter("[mvn2llm] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(effective)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger", "parse_level"]
