"""Exceptions raised by pathtext."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class PathTextError(Exception):
    """Base class for pathtext errors."""


class ConfigError(PathTextError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
