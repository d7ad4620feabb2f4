"""Small string helpers used when reading XPM data: word splitting and searches."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    """Return text up to its first NUL character, as a C string would end."""
    return text.split("\0", 1)[0]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _SEPARATORS.split(_terminated(text)) if word]


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of needle in text, or -1.

    The search fails outright when the needle is longer than ``limit``.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return _terminated(text).find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like find, but skip matches that lie inside double-quoted spans."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    text = _terminated(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1