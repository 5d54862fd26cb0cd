"""The player: keyboard state, position, velocity and jumping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .gamemap import find_player, is_wall

KEY_ESCAPE = 65307
KEY_SPACE = 32

_LEFT_KEYS = frozenset({97, 65361})
_RIGHT_KEYS = frozenset({100, 65363})
_UP_KEYS = frozenset({119, 65362})
_DOWN_KEYS = frozenset({115, 65364})

ACCELERATION = 0.022
FRICTION = 0.85
_X_ANCHOR = 0.5
_Y_ANCHOR = 0.85


@dataclass
class Input:
    """Which direction keys are held down."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    def _set(self, keycode: int, state: bool) -> None:
        if keycode in _LEFT_KEYS:
            self.left = state
        if keycode in _RIGHT_KEYS:
            self.right = state
        if keycode in _UP_KEYS:
            self.up = state
        if keycode in _DOWN_KEYS:
            self.down = state

    def press(self, keycode: int) -> None:
        """Record a key press (WASD or arrow keys)."""
        self._set(keycode, True)

    def release(self, keycode: int) -> None:
        """Record a key release (WASD or arrow keys)."""
        self._set(keycode, False)

    def any_direction(self) -> bool:
        """Tell whether any direction key is held."""
        return self.left or self.right or self.up or self.down


def _tile(value: float, anchor: float) -> int:
    return int(value + anchor)


@dataclass
class Player:
    """Player position in tile units, with velocity and jump state."""

    grid_x: int
    grid_y: int
    view_x: float
    view_y: float
    view_jump: float
    vel_x: float = 0.0
    vel_y: float = 0.0
    jump: bool = False
    jump_counter: int = 0

    @classmethod
    def from_grid(cls, grid: Sequence[str]) -> "Player":
        """Place a player on the map's 'P' tile."""
        x, y = find_player(grid)
        return cls(grid_x=x, grid_y=y, view_x=float(x), view_y=float(y),
                   view_jump=float(y))

    def move(self, grid: Sequence[str], dx: float, dy: float) -> bool:
        """Move by (dx, dy) unless the target tile is a wall or off the map.

        Returns True when the move enters a different tile.
        """
        new_x = self.view_x + dx
        new_y = self.view_y + dy
        gx = _tile(new_x, _X_ANCHOR)
        gy = _tile(new_y, _Y_ANCHOR)
        if gx < 0 or gy < 0 or gy >= len(grid) or gx >= len(grid[gy]):
            return False
        if is_wall(grid[gy][gx]):
            return False
        changed = (
            _tile(self.view_x, _X_ANCHOR) != gx or _tile(self.view_y, _Y_ANCHOR) != gy
        )
        self.view_x = new_x
        if not self.jump:
            self.view_y = new_y
            self.view_jump = new_y
        self.grid_x = gx
        self.grid_y = gy
        return changed

    def update_velocity(self, inputs: Input, grid: Sequence[str]) -> bool:
        """Accelerate from held keys, apply friction, then move.

        Returns what :meth:`move` returns.
        """
        if inputs.left:
            self.vel_x -= ACCELERATION
        if inputs.right:
            self.vel_x += ACCELERATION
        if inputs.up:
            self.vel_y -= ACCELERATION
        if inputs.down:
            self.vel_y += ACCELERATION
        self.vel_x *= FRICTION
        self.vel_y *= FRICTION
        return self.move(grid, self.vel_x, self.vel_y)

    def start_jump(self) -> bool:
        """Begin a jump unless one is under way; return whether it started."""
        if self.jump:
            return False
        self.jump = True
        self.jump_counter = 0
        return True