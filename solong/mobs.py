"""Enemies that patrol back and forth along a corridor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .gamemap import is_wall

SPEED = 0.05
_CENTER = 0.5


def _wall_at(grid: Sequence[str], x: int, y: int) -> bool:
    """Tell whether (x, y) is a wall; positions off the map count as walls."""
    if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[y]):
        return True
    return is_wall(grid[y][x])


def _run_length(grid: Sequence[str], x: int, y: int, dx: int, dy: int) -> int:
    """Length of the wall-free run through (x, y) along (dx, dy)."""
    while not _wall_at(grid, x - dx, y - dy):
        x -= dx
        y -= dy
    length = 0
    while not _wall_at(grid, x, y):
        length += 1
        x += dx
        y += dy
    return length


@dataclass
class Mob:
    """An enemy on tile (x, y) drawn at (view_x, view_y).

    It moves along ``axis`` ('x' or 'y') in ``direction`` (+1 or -1) and
    turns round when it meets a wall.
    """

    x: int
    y: int
    view_x: float
    view_y: float
    visible: bool = True
    axis: str = "x"
    direction: int = 1

    def set_axis(self, grid: Sequence[str]) -> str:
        """Patrol along the longer open run through the mob's tile.

        Vertical wins a tie. Returns the chosen axis.
        """
        width = _run_length(grid, self.x, self.y, 1, 0)
        height = _run_length(grid, self.x, self.y, 0, 1)
        self.axis = "y" if height >= width else "x"
        return self.axis

    def step(self, grid: Sequence[str]) -> None:
        """Move a twentieth of a tile, turning round in front of a wall."""
        next_x = self.view_x
        next_y = self.view_y
        if self.axis == "x":
            next_x += SPEED * self.direction
        elif self.axis == "y":
            next_y += SPEED * self.direction
        if _wall_at(grid, int(next_x + _CENTER), int(next_y + _CENTER)):
            self.direction = -self.direction
        else:
            self.view_x = next_x
            self.view_y = next_y
        self.x = int(self.view_x + _CENTER)
        self.y = int(self.view_y + _CENTER)

    def step_tiles(self, grid: Sequence[str], tile_size: int) -> None:
        """Move one pixel, with the view position measured in pixels.

        The tile changes when the view crosses a tile border; a wall on the
        other side makes the mob turn round instead.
        """
        if tile_size <= 0:
            raise ValueError(f"invalid tile size {tile_size}")
        if self.axis == "x":
            self.view_x, self.x = self._advance(
                grid, self.view_x, self.x, tile_size, lambda t: (t, self.y)
            )
        elif self.axis == "y":
            self.view_y, self.y = self._advance(
                grid, self.view_y, self.y, tile_size, lambda t: (self.x, t)
            )

    def _advance(self, grid, view, tile, tile_size, cell):
        new_view = view + self.direction
        if self.direction > 0:
            crossing = new_view >= (tile + 1) * tile_size
            target = tile + 1
        elif self.direction < 0:
            crossing = new_view < tile * tile_size
            target = tile - 1
        else:
            return view, tile
        if not crossing:
            return new_view, tile
        if _wall_at(grid, *cell(target)):
            self.direction = -self.direction
            return view, tile
        return new_view, target


def find_mobs(grid: Sequence[str]) -> list[Mob]:
    """Return a mob for every 'M' tile, in row order, each with its axis set."""
    mobs = []
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == "M":
                mob = Mob(x=x, y=y, view_x=float(x), view_y=float(y))
                mob.set_axis(grid)
                mobs.append(mob)
    return mobs


def move_all(mobs: Iterable[Mob], grid: Sequence[str]) -> None:
    """Advance every mob by one :meth:`Mob.step`."""
    for mob in mobs:
        mob.step(grid)