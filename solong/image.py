"""Off-screen 32-bit pixel images and colour-depth conversion."""

from __future__ import annotations

from typing import Sequence

_BPP = 32
_BYTES_PER_PIXEL = _BPP // 8


class Image:
    """A width x height image of 32-bit little-endian pixels (0x00RRGGBB).

    Pixels outside the image read as 0 and writes to them are ignored.
    """

    __slots__ = ("width", "height", "bpp", "size_line", "endian", "data")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = _BPP
        self.size_line = width * _BYTES_PER_PIXEL
        self.endian = 0
        self.data = bytearray(self.size_line * height)

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"

    def _offset(self, x: int, y: int) -> int | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y), or 0 when outside the image."""
        offset = self._offset(x, y)
        if offset is None:
            return 0
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], "little")

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour at (x, y); positions outside the image are ignored."""
        offset = self._offset(x, y)
        if offset is None:
            return
        self.data[offset:offset + _BYTES_PER_PIXEL] = (color & 0xFFFFFFFF).to_bytes(
            _BYTES_PER_PIXEL, "little"
        )

    def clear(self) -> None:
        """Set every pixel to 0."""
        self.data[:] = bytes(len(self.data))


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Describe three channel masks as (shift, bits) pairs for red, green, blue."""
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        if mask <= 0:
            raise ValueError(f"invalid channel mask {mask:#x}")
        shift = 0
        while not mask & 1:
            mask >>= 1
            shift += 1
        bits = 0
        while mask & 1:
            mask >>= 1
            bits += 1
        result.extend((shift, bits))
    return tuple(result)


def get_color_value(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for the given visual depth.

    At depth 24 or more the colour is used unchanged; below that each channel
    is narrowed according to ``shifts`` as returned by :func:`mask_shifts`.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )