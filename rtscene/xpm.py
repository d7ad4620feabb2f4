"""Reader for XPM images, producing 32-bit pixel values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from rtscene.colors import text_to_rgb
from rtscene.wordtab import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; ``pixels`` holds one tuple per row."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]

    def to_bytes(self, big_endian: bool) -> bytes:
        """Pack the pixels row by row, four bytes each, in the given byte order."""
        order = "big" if big_endian else "little"
        return b"".join(value.to_bytes(4, order) for row in self.pixels for value in row)


def strip_comments(text: str) -> str:
    """Blank out C-style comments outside quoted strings, keeping the length."""
    chars = list(text)
    size = len(text)
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while True:
            current = "".join(chars)
            begin = find_unquoted(current, opener, size)
            if begin == -1:
                break
            end = find(current[begin + 2:], closer, size - begin - 2)
            stop = min(begin + end + extra, len(chars))
            chars[begin:stop] = " " * (stop - begin)
    return "".join(chars)


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in text."""
    pos = 0
    size = len(text)
    while True:
        start = find(text[pos:], '"', size - pos)
        if start == -1:
            return
        close = find(text[pos + start + 1:], '"', size - pos - start - 1)
        if close == -1:
            return
        first = pos + start + 1
        yield text[first:first + close]
        pos += start + close + 2


def _atoi(word: str) -> int:
    rest = word.lstrip(" \t\n\r\v\f")
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not char.isascii() or not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def _next_line(source: Iterator[str], what: str) -> str:
    try:
        return next(source)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what} line") from None


def _resolve(color: int) -> int:
    if color == -1:
        color = _TRANSPARENT
    return color & 0xFFFFFFFF


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows."""
    source = iter(lines)
    words = split_words(_next_line(source, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive")

    # Short codes are stored in a direct table where later entries overwrite
    # earlier ones; longer codes are searched so the first definition wins.
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour")
        entry = split_words(line[cpp:])
        try:
            index = entry.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line has no 'c' key: {line!r}") from None
        if index >= len(entry):
            raise XpmError(f"colour line has no colour after 'c': {line!r}")
        following = entry[index + 1] if index + 1 < len(entry) else None
        rgb = text_to_rgb(entry[index], following)
        code = line[:cpp]
        if direct or code not in palette:
            palette[code] = rgb

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(tuple(
            _resolve(palette.get(line[start:start + cpp], 0))
            for start in range(0, width * cpp, cpp)
        ))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(quoted_lines(strip_comments(text)))


def read_xpm_file(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_bytes().decode("latin-1"))