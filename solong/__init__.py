"""Tile-map arcade game pieces: maps, XPM images, pixel buffers, movement and drawing."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "image",
    "xpm",
    "gamemap",
    "coins",
    "player",
    "mobs",
    "textures",
    "render",
]