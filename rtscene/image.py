"""Colour packing and a 32-bit pixel buffer for rendered images."""

from __future__ import annotations

from collections.abc import Iterable


def color_to_hex(color: Iterable[float]) -> int:
    """Pack an (r, g, b) colour into 0xRRGGBB, clamping each channel to [0, 255]."""
    red, green, blue = (int(min(max(channel, 0.0), 255.0)) for channel in color)
    return (red << 16) + (green << 8) + blue


class FrameBuffer:
    """A row-major image of 32-bit pixels stored in a chosen byte order."""

    def __init__(self, width: int, height: int, big_endian: bool = False) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.big_endian = big_endian
        self.line_bytes = width * 4
        self._order = "big" if big_endian else "little"
        self._pixels = bytearray(self.line_bytes * height)

    @property
    def data(self) -> bytes:
        """The raw pixel bytes."""
        return bytes(self._pixels)

    def _offset(self, row: int, col: int) -> int | None:
        if 0 <= row < self.height and 0 <= col < self.width:
            return row * self.line_bytes + col * 4
        return None

    def put_pixel(self, row: int, col: int, color: int) -> None:
        """Store a colour; positions outside the image are ignored."""
        offset = self._offset(row, col)
        if offset is None:
            return
        self._pixels[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, self._order)

    def get_pixel(self, row: int, col: int) -> int:
        """Return the colour stored at a position."""
        offset = self._offset(row, col)
        if offset is None:
            raise IndexError(f"pixel ({row}, {col}) outside {self.width}x{self.height} image")
        return int.from_bytes(self._pixels[offset:offset + 4], self._order)