"""Backslash-escaping of filenames for shell and terminal display."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from pathtext.config import current_platform
from pathtext.platforms import PlatformFamily


def _special_chars_pattern(exempt: str) -> re.Pattern[str]:
    allowed = "0-9A-Za-z._" + "".join(re.escape(ch) for ch in exempt) + "-"
    # Any ASCII character outside the allowed set; non-ASCII never matches.
    return re.compile(rf"(?![{allowed}])[\x00-\x7f]")


@dataclass(frozen=True, slots=True)
class FilenameEscaper:
    """Immutable escaping rule for one platform family."""

    platform: PlatformFamily
    pattern: re.Pattern[str]

    @classmethod
    def for_platform(cls, platform: PlatformFamily) -> FilenameEscaper:
        """Build the escaper for *platform* from its exempt characters."""
        return cls(platform=platform, pattern=_special_chars_pattern(platform.exempt_characters))

    def needs_escaping(self, name: str) -> bool:
        """Return True if *name* contains a character to escape."""
        return self.pattern.search(name) is not None

    def escape(self, name: str) -> str:
        """Insert a backslash before every special ASCII character of *name*.

        Returns *name* itself when there is nothing to escape.
        """
        if not self.needs_escaping(name):
            return name
        return self.pattern.sub(r"\\\g<0>", name)


ESCAPERS: MappingProxyType[PlatformFamily, FilenameEscaper] = MappingProxyType(
    {family: FilenameEscaper.for_platform(family) for family in PlatformFamily}
)


def get_escaper(platform: PlatformFamily | None = None) -> FilenameEscaper:
    """Return the escaper for *platform*, defaulting to the configured family."""
    return ESCAPERS[platform if platform is not None else current_platform()]


def escape_filename(name: str, platform: PlatformFamily | None = None) -> str:
    """Escape special ASCII characters of *name* with a backslash.

    Letters, digits, ``.``, ``_`` and ``-`` are kept as-is, as is every
    non-ASCII character. On Windows ``:`` and ``\\`` are kept too since they
    are valid parts of a path; elsewhere ``/`` is kept instead.

    Examples:
        "a b.txt" -> "a\\ b.txt"
        "/tmp/it's" -> "/tmp/it\\'s"  (posix)
    """
    return get_escaper(platform).escape(name)
