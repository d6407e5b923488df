"""Centralized path management for flyercompare.

This module provides a single source of truth for all project paths. The
data root defaults to ``~/.flyercompare`` and can be moved with the
``FLYERCOMPARE_HOME`` environment variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the data root directory."""
    env_root = os.environ.get("FLYERCOMPARE_HOME", "").strip()
    if env_root:
        return Path(env_root).expanduser()
    return Path("~/.flyercompare").expanduser()


@dataclass
class ProjectPaths:
    """Container for all project-related paths.

    All paths are computed relative to the data root, ensuring consistency
    across modules regardless of the current working directory.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def settings_file(self) -> Path:
        """Comparison/catalog settings TOML file."""
        return self.config / "flyercompare.toml"

    # --- Data paths ---
    @property
    def data(self) -> Path:
        """Local data directory (data/)."""
        return self.root / "data"

    @property
    def saved_lists_file(self) -> Path:
        """Key-value blob holding saved shopping lists."""
        return self.data / "saved_shopping_lists.json"

    @property
    def catalog_cache_file(self) -> Path:
        """Last fetched deal catalog."""
        return self.data / "catalog.json"

    def ensure_data_directories(self) -> None:
        """Create data directories if they don't exist."""
        self.config.mkdir(parents=True, exist_ok=True)
        self.data.mkdir(parents=True, exist_ok=True)


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Drop the cached instance so the next call re-reads the environment."""
    global _paths
    _paths = None
