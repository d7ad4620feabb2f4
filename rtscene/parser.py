"""Reading ``.rt`` scene files into element records."""

from __future__ import annotations

import os
import re
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from os import PathLike
from pathlib import Path

from rtscene.elements import (
    RECORD_SIZE,
    ElementError,
    ElementKind,
    Record,
    parse_ambient,
    parse_camera,
    parse_light,
    parse_shape,
)
from rtscene.numbers import valid_values

_PREFIXES: tuple[tuple[str, ElementKind], ...] = (
    ("C", ElementKind.CAMERA),
    ("A", ElementKind.AMBIENT),
    ("L", ElementKind.LIGHT),
    ("pl", ElementKind.PLANE),
    ("sp", ElementKind.SPHERE),
    ("cy", ElementKind.CYLINDER),
)
_UNIQUE = (ElementKind.CAMERA, ElementKind.AMBIENT, ElementKind.LIGHT)
_LINES = re.compile(r"[^\n]*\n|[^\n]+")
_EMPTY: Record = (0.0,) * RECORD_SIZE

_FORMAT_ERROR = "Invalid file formatting"
_PARSE_ERROR = "Problem while parsing file"


class SceneFormatError(ValueError):
    """Raised when a scene file cannot be used."""


def _split_lines(text: str) -> list[str]:
    return _LINES.findall(text)


def _line_kind(text: str) -> ElementKind | None:
    for prefix, kind in _PREFIXES:
        if text.startswith(prefix):
            return kind
    return None


def validate_filename(path: str | PathLike[str]) -> str:
    """Check that the path names a ``.rt`` file and return it as a string."""
    name = os.fspath(path)
    if not name:
        raise SceneFormatError("File name empty or doesn't exist!")
    if not name.endswith(".rt"):
        raise SceneFormatError("Specified file is not a .rt file!")
    return name


def count_objects(lines: Iterable[str]) -> int:
    """Count the elements in a scene, checking the overall layout.

    Blank lines and lines starting with ``#`` are skipped.  Every other line
    must name an element, and the camera, ambient light and light must each
    appear exactly once.
    """
    counts: Counter[ElementKind] = Counter()
    for line in lines:
        if not line or line[0] in "\0\n\r#":
            continue
        rest = line.lstrip(" ")
        if rest.startswith("#"):
            continue
        kind = _line_kind(rest)
        if kind is None:
            raise SceneFormatError(_FORMAT_ERROR)
        counts[kind] += 1
        if counts[kind] > 1 and kind in _UNIQUE:
            raise SceneFormatError(_FORMAT_ERROR)
    if any(counts[kind] == 0 for kind in _UNIQUE):
        raise SceneFormatError(_FORMAT_ERROR)
    return sum(counts.values())


def read_scene(lines: Iterable[str]) -> list[Record]:
    """Parse scene lines into records: camera, ambient, light, then shapes in file order."""
    lines = list(lines)
    records = [_EMPTY] * count_objects(lines)
    shape_slot = 3
    singles = ((parse_camera, 0), (parse_ambient, 1), (parse_light, 2))
    try:
        for line in lines:
            if not line or line[0] in "\0\n\r":
                continue
            for parse, slot in singles:
                record = parse(line)
                if record is not None:
                    records[slot] = record
            record = parse_shape(line)
            if record is not None:
                records[shape_slot] = record
                shape_slot += 1
    except ElementError as exc:
        raise SceneFormatError(_PARSE_ERROR) from exc
    if not valid_values(records):
        raise SceneFormatError(_PARSE_ERROR)
    return records


def load_scene(path: str | PathLike[str]) -> list[Record]:
    """Read and parse the scene file at ``path``."""
    name = validate_filename(path)
    try:
        raw = Path(name).read_bytes()
    except OSError as exc:
        raise SceneFormatError("Couldn't open specified file!") from exc
    return read_scene(_split_lines(raw.decode("latin-1")))


def _describe(record: Sequence[float]) -> str:
    kind = ElementKind(int(record[0])).name.lower()
    return f"{kind} " + " ".join(f"{value:g}" for value in record[1:])


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and list its elements."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error")
        print("Wrong number of arguments")
        return 1
    try:
        records = load_scene(args[0])
    except SceneFormatError as exc:
        print("Error")
        print(exc)
        return 1
    for record in records:
        print(_describe(record))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())