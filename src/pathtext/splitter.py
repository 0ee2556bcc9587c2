"""Comma-separated parameter lists with backslash-escaped commas."""

from __future__ import annotations

ESCAPED_COMMA = "\\,"


def _unescape(field: str) -> str:
    return field.replace(ESCAPED_COMMA, ",")


def split_at_comma(source: str) -> list[str]:
    """Split *source* at every comma not preceded by a backslash.

    Each field has its ``\\,`` sequences collapsed to ``,``; any other
    backslash is kept verbatim. A comma counts as escaped whenever the
    character right before it is a backslash, so ``\\\\,`` (two backslashes
    and a comma) is an escaped comma too. A trailing empty field is dropped,
    so ``""`` gives ``[]`` and ``"a,"`` gives ``["a"]``.

    Examples:
        "a,b" -> ["a", "b"]
        "a,b\\,c" -> ["a", "b,c"]
    """
    items: list[str] = []
    item: list[str] = []
    escaped = False

    for ch in source:
        if ch == "," and not escaped:
            items.append(_unescape("".join(item)))
            item = []
        else:
            item.append(ch)
        escaped = ch == "\\"

    if item:
        items.append(_unescape("".join(item)))

    return items
