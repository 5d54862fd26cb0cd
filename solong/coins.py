"""Collectible coins placed on the map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class Coin:
    """A coin at a tile; it stays visible until collected."""

    x: int
    y: int
    visible: bool = True


def find_coins(grid: Sequence[str]) -> list[Coin]:
    """Return a coin for every 'C' tile, in row order."""
    return [
        Coin(x, y)
        for y, row in enumerate(grid)
        for x, tile in enumerate(row)
        if tile == "C"
    ]


def collect(coins: Iterable[Coin], x: int, y: int) -> int:
    """Hide the visible coins at (x, y) and return how many were taken."""
    taken = 0
    for coin in coins:
        if coin.visible and coin.x == x and coin.y == y:
            coin.visible = False
            taken += 1
    return taken