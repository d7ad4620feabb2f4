"""Number reading and value range checks for scene description lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_DIGITS = frozenset("0123456789")
_VALUE_ENDS = frozenset(" \n\r#")
_LINE_ENDS = frozenset("#\n\r")


class NumberError(ValueError):
    """Raised when a number in a scene line is malformed."""


def _char(text: str, pos: int) -> str:
    return text[pos] if 0 <= pos < len(text) else ""


def read_number(text: str, pos: int, more: bool) -> tuple[float, int]:
    """Read a decimal number starting at ``pos``.

    Returns the value and the position just after it.  When ``more`` is true
    the number must be followed by a comma; otherwise by the end of the text,
    a space, a line break or a comment marker.
    """
    first = _char(text, pos)
    if first in ("", "\n", "\r"):
        raise NumberError(f"missing number at position {pos}")
    sign = -1.0 if first == "-" else 1.0
    if first in "+-":
        pos += 1
    result = 0.0
    while _char(text, pos) in _DIGITS:
        result = result * 10.0 + int(text[pos])
        pos += 1
    if _char(text, pos) == "." and pos > 0 and text[pos - 1] in _DIGITS:
        pos += 1
        decimal = 1.0
        while _char(text, pos) in _DIGITS:
            decimal *= 0.1
            result += int(text[pos]) * decimal
            pos += 1
    follow = _char(text, pos)
    if more:
        if follow != ",":
            raise NumberError(f"expected ',' after number at position {pos}")
    elif follow and follow not in _VALUE_ENDS:
        raise NumberError(f"unexpected {follow!r} after number at position {pos}")
    return sign * result, pos


def in_range(values: Iterable[float], low: float, high: float) -> bool:
    """Return True when every value lies within [low, high]."""
    return all(low <= value <= high for value in values)


def at_line_end(text: str) -> bool:
    """Return True when only spaces remain before the end, a comment or a line break."""
    rest = text.lstrip(" ")
    return not rest or rest[0] in _LINE_ENDS


def valid_values(records: Sequence[Sequence[float]]) -> bool:
    """Check the camera, ambient and light records (the first three) for range.

    Camera orientation must lie in [-1, 1] and its field of view in [0, 180];
    brightness values in [0, 1] and colours in [0, 255].  Shape records are
    not range-checked.
    """
    if len(records) < 3:
        raise ValueError("a scene needs camera, ambient and light records")
    camera, ambient, light = records[0], records[1], records[2]
    return (
        in_range(camera[4:7], -1, 1)
        and in_range(camera[7:8], 0, 180)
        and in_range(ambient[7:8], 0, 1)
        and in_range(ambient[9:12], 0, 255)
        and in_range(light[7:8], 0, 1)
        and in_range(light[9:12], 0, 255)
    )