"""Loading, validation and wall shaping of ``.ber`` tile maps.

A map is a list of rows; each row is a string that keeps its trailing
newline as read from the file (the last row may lack one).
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

WALL_TILES = frozenset("1DTAOBRLZ")
_ALLOWED = frozenset("1C0EPM\n")
_VISITED = "V"


class MapError(ValueError):
    """Raised when a map cannot be read or is not a playable map."""


def has_valid_name(path: str | Path) -> bool:
    """Tell whether a map path ends in ``.ber``."""
    name = str(path)
    return len(name) >= 4 and name.endswith(".ber")


def read_map(path: str | Path) -> list[str]:
    """Read a map file into rows, keeping each row's newline."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError(f"cannot read map {path}: {exc}") from exc
    parts = text.split("\n")
    rows = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        rows.append(parts[-1])
    return rows


def count_element(grid: Sequence[str], element: str) -> int:
    """Count the tiles equal to ``element`` in the whole map."""
    return sum(row.count(element) for row in grid)


def is_wall(tile: str) -> bool:
    """Tell whether a tile is a wall, plain or shaped."""
    return len(tile) == 1 and tile in WALL_TILES


def _horizontal_wall(row: str) -> int:
    """Length of a row made only of '1' up to its newline, or -1."""
    body = row.split("\n", 1)[0]
    if any(char != "1" for char in body):
        return -1
    return len(body)


def _vertical_wall(grid: Sequence[str], column: int) -> int:
    """Height of a column made only of '1', or -1."""
    if column < 0:
        return -1
    for row in grid:
        if len(row) <= column or row[column] != "1":
            return -1
    return len(grid)


def _walls_closed(grid: Sequence[str]) -> bool:
    if not grid:
        return False
    top = _horizontal_wall(grid[0])
    bottom = _horizontal_wall(grid[-1])
    if top == -1 or bottom == -1 or top != bottom:
        return False
    left = _vertical_wall(grid, 0)
    right = _vertical_wall(grid, top - 1)
    return left != -1 and right != -1 and left == right


def _only_known_tiles(grid: Sequence[str]) -> bool:
    return all(char in _ALLOWED for row in grid for char in row)


def check_map(grid: Sequence[str]) -> None:
    """Validate a map, raising :class:`MapError` when it is not playable.

    A map needs exactly one player and one exit, at least one coin, a closed
    wall border, only known tiles, and a path from the player to the exit
    and to every coin.
    """
    if (
        count_element(grid, "P") != 1
        or count_element(grid, "E") != 1
        or count_element(grid, "C") < 1
        or not _walls_closed(grid)
        or not _only_known_tiles(grid)
    ):
        raise MapError("Map invalid.")
    check_path(grid)


def flood_fill(grid: Sequence[str], x: int, y: int, element: str) -> int:
    """Count the ``element`` tiles reachable from (x, y) without crossing '1'.

    The map itself is left untouched.
    """
    cells = [list(row) for row in grid]
    count = 0
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if cx < 0 or cy < 0 or cy >= len(cells) or cx >= len(cells[cy]):
            continue
        tile = cells[cy][cx]
        if tile in ("1", _VISITED):
            continue
        if tile == element:
            count += 1
        cells[cy][cx] = _VISITED
        pending.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))
    return count


def find_player(grid: Sequence[str]) -> tuple[int, int]:
    """Return the (x, y) of the first player tile, scanning row by row."""
    for y, row in enumerate(grid):
        x = row.find("P")
        if x != -1:
            return x, y
    raise MapError("Map invalid.")


def check_path(grid: Sequence[str]) -> None:
    """Raise :class:`MapError` unless the exit and every coin can be reached."""
    coins = count_element(grid, "C")
    px, py = find_player(grid)
    if flood_fill(grid, px, py, "E") != 1 or flood_fill(grid, px, py, "C") != coins:
        raise MapError("FloodFill invalid.")


def _wall_shape(y: int, x: int, rows: int, cols: int) -> str:
    last_row = rows - 1
    last_col = cols - 2
    if y == 0 and x == 0:
        return "A"
    if y == 0 and x == last_col:
        return "Z"
    if y == last_row and x == 0:
        return "O"
    if y == last_row and x == last_col:
        return "D"
    if y == 0:
        return "T"
    if y == last_row:
        return "B"
    if x == 0:
        return "L"
    if x == last_col:
        return "R"
    return "1"


def remap(grid: Sequence[str]) -> list[str]:
    """Replace border walls by shaped wall tiles.

    Corners become A, Z, O, D (top-left, top-right, bottom-left,
    bottom-right), edges T, B, L, R; inner walls stay '1'. Rows are cut to
    the width of the first row.
    """
    if not grid:
        raise MapError("Map invalid.")
    rows = len(grid)
    cols = len(grid[0])
    return [
        "".join(
            _wall_shape(y, x, rows, cols) if char == "1" else char
            for x, char in enumerate(row[:cols])
        )
        for y, row in enumerate(grid)
    ]