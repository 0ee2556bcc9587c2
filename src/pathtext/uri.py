"""Conversion between ``file:///`` URIs and native paths.

- POSIX: ``file:///path/to/a%20file.ext`` <-> ``/path/to/a file.ext``
- Windows: ``file:///C:/path/to/a%20file.ext`` <-> ``C:\\path\\to\\a file.ext``
"""

from __future__ import annotations

import logging
from urllib.parse import quote, unquote_to_bytes

from pathtext.config import current_platform
from pathtext.platforms import PlatformFamily

log = logging.getLogger(__name__)

FILE_URI_PREFIX = "file:///"


def decode_uri(uri: str, platform: PlatformFamily | None = None) -> str | None:
    """Decode a triple-slash file URI into a native path.

    The part after ``file:///`` is percent-decoded to bytes, which must be
    valid UTF-8. Separators are substituted only after decoding, so ``%2F``
    becomes a real separator.

    Returns None for anything that is not a ``file:///`` URI or does not
    decode to UTF-8 text.
    """
    if uri[: len(FILE_URI_PREFIX)] != FILE_URI_PREFIX:
        log.debug("Not a file URI: %r", uri)
        return None

    # Lone surrogates pass through as bytes and fail the strict decode below.
    raw = unquote_to_bytes(uri[len(FILE_URI_PREFIX) :].encode("utf-8", "surrogatepass"))
    try:
        path = raw.decode("utf-8")
    except UnicodeDecodeError:
        log.debug("File URI is not valid UTF-8 after decoding: %r", uri)
        return None

    family = platform if platform is not None else current_platform()
    native = path.replace("/", family.separator)
    if family is PlatformFamily.WINDOWS:
        return native
    return family.separator + native


def encode_uri(path: str, platform: PlatformFamily | None = None) -> str:
    """Encode an absolute native path as a ``file:///`` URI.

    Raises:
        ValueError: A POSIX path is not absolute.
    """
    family = platform if platform is not None else current_platform()
    if family is PlatformFamily.WINDOWS:
        return FILE_URI_PREFIX + quote(path.replace(family.separator, "/"), safe="/:")

    if not path.startswith(family.separator):
        raise ValueError(f"Cannot build a file URI from relative path: {path!r}")
    return FILE_URI_PREFIX + quote(path[1:], safe="/")
