"""Logging setup shared by the CLI, the HTTP service and the library code.

Usage:
    from flyercompare.runtime import get_logger
    logger = get_logger(__name__)

    logger.info("Fetched %d deals", count)

Environment variables:
    FLYERCOMPARE_LOG_LEVEL: level name (DEBUG, INFO, WARNING, ERROR) or number. Default: INFO
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_NAMESPACE = "flyercompare"
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_handler: logging.Handler | None = None


def level_from_env(value: str | None = None) -> int:
    """Resolve FLYERCOMPARE_LOG_LEVEL (or ``value``) to a logging level."""
    raw = (value if value is not None else os.environ.get("FLYERCOMPARE_LOG_LEVEL", "")).strip().upper()
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw, DEFAULT_LOG_LEVEL)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level <= logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> None:
    """Attach one stderr handler to the package logger.

    Later calls are no-ops; use set_log_level() to change verbosity.
    """
    global _handler

    if _handler is not None:
        return

    if level is None:
        level = level_from_env()

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_formatter_for(level))

    package_logger = logging.getLogger(LOG_NAMESPACE)
    package_logger.setLevel(level)
    package_logger.addHandler(_handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``flyercompare`` namespace for the given module name."""
    configure_logging()

    if name == LOG_NAMESPACE or name.startswith(f"{LOG_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOG_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change verbosity at runtime (the CLI's --verbose flag)."""
    configure_logging(level)
    logging.getLogger(LOG_NAMESPACE).setLevel(level)
    if _handler is not None:
        _handler.setFormatter(_formatter_for(level))
