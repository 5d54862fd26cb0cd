"""Reading of XPM pixmaps into :class:`~solong.image.Image` objects."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator

from .colors import lookup_color
from .image import Image

_TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_DECIMAL = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    last_start = len(text) - len(needle)
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as the input.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        relative = close - (begin + 2) if close != -1 else -1
        text = _blank(text, begin, relative + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        relative = newline - (begin + 2) if newline != -1 else -1
        text = _blank(text, begin, relative + 3)
    return text


def _atoi(text: str) -> int:
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _HEX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_rgb(name: str, extra: str | None = None) -> int:
    """Turn an XPM colour specification into 0xRRGGBB.

    ``#hex`` values are read as hexadecimal; otherwise ``name`` (joined with
    ``extra`` by a space when given) is looked up among the named colours.
    ``None`` gives -1; unknown names give 0.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError("unexpected end of XPM data") from None


def _read_color(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    extra = words[index + 2] if index + 2 < len(words) else None
    return text_rgb(words[index + 1], extra)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, then pixel rows.

    Pixels whose colour is ``None`` are stored as 0xFF000000.
    """
    source = iter(lines)
    header = split_words(_next_line(source))
    if len(header) < 4:
        raise XpmError(f"incomplete XPM header: {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if 0 in (width, height, ncolors, cpp) or min(width, height, ncolors, cpp) < 0:
        raise XpmError(f"invalid XPM header: {header!r}")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source)
        rgb = _read_color(line, cpp)
        key = line[:cpp]
        # With one or two characters per pixel a repeated key takes the last
        # definition; with more, the first one.
        if cpp <= 2 or key not in colors:
            colors[key] = rgb

    try:
        image = Image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc

    for y in range(height):
        row = _next_line(source)
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = colors.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_xpm_text(text: str) -> Image:
    """Parse the text of an XPM file."""
    return parse_xpm(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | Path) -> Image:
    """Read and parse an XPM file."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(raw.decode("latin-1"))