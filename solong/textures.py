"""Tile textures: XPM images flattened into square pixel tables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .gamemap import is_wall
from .image import Image
from .xpm import XpmError, load_xpm

Pixels = tuple[int, ...]

_PLAYER_FRAMES = tuple(f"hulk_{i}" for i in range(6))
_WALL_NAMES = (
    "wall_T", "wall_B", "wall_L", "wall_R",
    "corner_TL", "corner_TR", "corner_BL", "corner_BR", "chair",
)
_WALL_INDEX = {"T": 0, "B": 1, "L": 2, "R": 3, "A": 4, "Z": 5, "O": 6, "D": 7}
_MIDDLE_WALL = 8
_OVERLAY = Path("placeholder_assets") / "overlay.xpm"


def texture_from_image(image: Image, tile_size: int) -> Pixels:
    """Read a tile_size x tile_size square of an image, row by row.

    Pixels beyond the image read as 0.
    """
    if tile_size <= 0:
        raise ValueError(f"invalid tile size {tile_size}")
    return tuple(
        image.get_pixel(x, y) for y in range(tile_size) for x in range(tile_size)
    )


def mirror_texture(pixels: Sequence[int], tile_size: int) -> Pixels:
    """Flip a square texture left to right."""
    if tile_size <= 0 or len(pixels) != tile_size * tile_size:
        raise ValueError(
            f"texture of {len(pixels)} pixels does not match tile size {tile_size}"
        )
    return tuple(
        pixel
        for start in range(0, len(pixels), tile_size)
        for pixel in reversed(pixels[start:start + tile_size])
    )


@dataclass(frozen=True)
class TextureSet:
    """Every texture the game draws, as square pixel tables."""

    tile_size: int
    player: tuple[Pixels, ...]
    player_right: tuple[Pixels, ...]
    walls: tuple[Pixels, ...]
    ground: Pixels
    coin: Pixels
    exit: Pixels
    shadow: Pixels
    jump: Pixels
    jump_right: Pixels
    mob: Pixels
    placeholder: Pixels
    overlay: Optional[Image] = None

    def wall_for(self, tile: str) -> Pixels:
        """Return the texture of a wall tile: shaped border or inner wall."""
        if not is_wall(tile):
            raise ValueError(f"not a wall tile: {tile!r}")
        return self.walls[_WALL_INDEX.get(tile, _MIDDLE_WALL)]


def _load_overlay(asset_dir: Path) -> Optional[Image]:
    try:
        return load_xpm(asset_dir.parent / _OVERLAY)
    except XpmError:
        return None


def load_textures(asset_dir: str | Path, tile_size: int) -> TextureSet:
    """Load all game textures from ``<name>.xpm`` files in ``asset_dir``.

    A missing or broken texture raises :class:`~solong.xpm.XpmError`. The
    overlay, taken from ``placeholder_assets/overlay.xpm`` next to the asset
    directory, is optional.
    """
    directory = Path(asset_dir)

    def load(name: str) -> Pixels:
        return texture_from_image(load_xpm(directory / f"{name}.xpm"), tile_size)

    player = tuple(load(name) for name in _PLAYER_FRAMES)
    ground = load("ground")
    coin = load("coin_0")
    exit_texture = load("exit")
    shadow = load("shadow")
    walls = tuple(load(name) for name in _WALL_NAMES)
    jump = load("jump")
    mob = load("mob")
    placeholder = load("player_1")
    return TextureSet(
        tile_size=tile_size,
        player=player,
        player_right=tuple(mirror_texture(frame, tile_size) for frame in player),
        walls=walls,
        ground=ground,
        coin=coin,
        exit=exit_texture,
        shadow=shadow,
        jump=jump,
        jump_right=mirror_texture(jump, tile_size),
        mob=mob,
        placeholder=placeholder,
        overlay=_load_overlay(directory),
    )