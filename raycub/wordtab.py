"""Small string searches and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _c_string(text: str) -> str:
    return text.split("\0", 1)[0]


def find(text: str, pattern: str, limit: int) -> int:
    """Return the index of the first ``pattern`` in ``text``, or -1.

    The search fails at once when the pattern is longer than ``limit``.
    """
    if len(pattern) > limit:
        return -1
    return _c_string(text).find(pattern)


def find_unquoted(text: str, pattern: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double quotes."""
    if len(pattern) > limit:
        return -1
    text = _c_string(text)
    quoted = False
    for pos, char in enumerate(text[: len(text) - len(pattern) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(_c_string(text)) if word]