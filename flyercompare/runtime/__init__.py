"""Runtime infrastructure for flyercompare.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Settings loading via load_settings(), CompareSettings

Usage:
    from flyercompare.runtime import get_logger, get_paths, load_settings

    logger = get_logger(__name__)
    settings = load_settings()
"""

from flyercompare.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from flyercompare.runtime.paths import ProjectPaths, get_paths, reset_paths
from flyercompare.runtime.settings import CompareSettings, load_settings, reset_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
    # Settings
    "CompareSettings",
    "load_settings",
    "reset_settings",
]
