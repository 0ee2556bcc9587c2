"""Platform family detection for path-sensitive transforms."""

from __future__ import annotations

import logging
import os
import platform
from enum import StrEnum

log = logging.getLogger(__name__)

PLATFORM_ENV_VAR = "PATHTEXT_PLATFORM"


class PlatformFamily(StrEnum):
    """Path conventions a transform can target.

    WINDOWS uses backslash separators and drive-letter paths; POSIX covers
    every other system.
    """

    WINDOWS = "windows"
    POSIX = "posix"

    @property
    def separator(self) -> str:
        """Native path separator."""
        return "\\" if self is PlatformFamily.WINDOWS else "/"

    @property
    def exempt_characters(self) -> str:
        """Path characters that filename escaping leaves alone."""
        # `:` and `\` are valid components of a Windows path.
        return ":\\" if self is PlatformFamily.WINDOWS else "/"


_SYSTEM_MAP = {"Windows": PlatformFamily.WINDOWS}


def parse_platform_family(value: str) -> PlatformFamily | None:
    """Return the family named by *value* (case-insensitive), or None."""
    try:
        return PlatformFamily(value.strip().lower())
    except ValueError:
        return None


def detect_platform_family() -> PlatformFamily:
    """Detect the platform family of the running interpreter.

    The PATHTEXT_PLATFORM environment variable takes precedence over
    ``platform.system()``; unknown values are ignored.
    """
    override = os.environ.get(PLATFORM_ENV_VAR)
    if override:
        family = parse_platform_family(override)
        if family is not None:
            return family
        log.warning("Ignoring unknown %s value %r", PLATFORM_ENV_VAR, override)

    return _SYSTEM_MAP.get(platform.system(), PlatformFamily.POSIX)


CURRENT_PLATFORM: PlatformFamily = detect_platform_family()
