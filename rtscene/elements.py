"""Parsing of individual scene lines into fixed-layout element records.

A record is a tuple of twelve floats: the element kind, the origin (1-3),
the orientation (4-6), the size, field of view or brightness (7), the
height (8) and the colour (9-11).  Slots an element does not use are 0.
"""

from __future__ import annotations

from enum import IntEnum

from rtscene.numbers import NumberError, at_line_end, read_number

RECORD_SIZE = 12

Record = tuple[float, ...]

_NUMBER_STARTS = frozenset("0123456789+-")


class ElementKind(IntEnum):
    """Kinds of element a scene line can describe."""

    PLANE = 0
    SPHERE = 1
    CYLINDER = 2
    CAMERA = 3
    AMBIENT = 4
    LIGHT = 5


class ElementError(ValueError):
    """Raised when a scene line is malformed."""


_Layout = tuple[tuple[int, int], ...]

_SHAPE_PREFIXES: tuple[tuple[str, ElementKind], ...] = (
    ("cy", ElementKind.CYLINDER),
    ("sp", ElementKind.SPHERE),
    ("pl", ElementKind.PLANE),
)

_LAYOUTS: dict[ElementKind, _Layout] = {
    ElementKind.PLANE: ((1, 3), (4, 3), (9, 3)),
    ElementKind.SPHERE: ((1, 3), (7, 1), (9, 3)),
    ElementKind.CYLINDER: ((1, 3), (4, 3), (7, 1), (8, 1), (9, 3)),
    ElementKind.CAMERA: ((1, 3), (4, 3), (7, 1)),
    ElementKind.AMBIENT: ((7, 1), (9, 3)),
    ElementKind.LIGHT: ((1, 3), (7, 1), (9, 3)),
}


def parse_values(text: str, pos: int, count: int) -> tuple[list[float], int]:
    """Read ``count`` comma-separated numbers starting at ``pos``.

    Spaces may precede the group; no space is allowed after a comma.
    Returns the numbers and the position after the last one.
    """
    values: list[float] = []
    for index in range(count):
        last = index == count - 1
        while text[pos:pos + 1] == " ":
            pos += 1
        try:
            value, pos = read_number(text, pos, not last)
        except NumberError as exc:
            raise ElementError(str(exc)) from exc
        values.append(value)
        if not last:
            pos += 1
            if text[pos:pos + 1] not in _NUMBER_STARTS:
                raise ElementError(f"expected a number after ',' at position {pos}")
    return values, pos


def _parse_fields(line: str, kind: ElementKind, start: int) -> Record:
    values = [0.0] * RECORD_SIZE
    values[0] = float(kind)
    pos = start
    label = kind.name.lower()
    try:
        for slot, count in _LAYOUTS[kind]:
            parsed, pos = parse_values(line, pos, count)
            values[slot:slot + count] = parsed
    except ElementError as exc:
        raise ElementError(f"malformed {label} line: {line.rstrip()!r}") from exc
    if not at_line_end(line[pos:]):
        raise ElementError(f"unexpected text at end of {label} line: {line.rstrip()!r}")
    return tuple(values)


def parse_shape(line: str) -> Record | None:
    """Parse a plane, sphere or cylinder line; None if the line is none of these."""
    rest = line.lstrip(" ")
    for prefix, kind in _SHAPE_PREFIXES:
        if rest.startswith(prefix):
            return _parse_fields(rest, kind, len(prefix))
    return None


def _parse_single(line: str, prefix: str, kind: ElementKind) -> Record | None:
    # These identifiers must start the line; leading spaces mean no match.
    if not line.startswith(prefix):
        return None
    return _parse_fields(line, kind, len(prefix))


def parse_camera(line: str) -> Record | None:
    """Parse a camera line (``C``); None if the line is not one."""
    return _parse_single(line, "C", ElementKind.CAMERA)


def parse_ambient(line: str) -> Record | None:
    """Parse an ambient light line (``A``); None if the line is not one."""
    return _parse_single(line, "A", ElementKind.AMBIENT)


def parse_light(line: str) -> Record | None:
    """Parse a point light line (``L``); None if the line is not one."""
    return _parse_single(line, "L", ElementKind.LIGHT)