"""Drawing of the playfield into an off-screen frame, and the camera."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .gamemap import is_wall
from .image import Image

RES_X = 1920
RES_Y = 1080
LERP_FACTOR = 0.08

_MOVES_COLOR = 0x46EB34
_TEXT_COLOR = 0x111111
_FPS_COLOR = 0x000000
_FPS_CAP = 30


@dataclass
class Camera:
    """Top-left corner of the view, in pixels."""

    x: float = 0.0
    y: float = 0.0

    def follow(self, player: Any, tile_size: int) -> None:
        """Ease the view towards the player, keeping it centred on screen.

        While the player jumps the camera follows the jump height.
        """
        target_x = player.view_x * tile_size - RES_X // 2
        height = player.view_jump if player.jump else player.view_y
        target_y = height * tile_size - RES_Y // 2
        self.x += (target_x - self.x) * LERP_FACTOR
        self.y += (target_y - self.y) * LERP_FACTOR


def _clamp_range(low: int, high: int, limit: int) -> tuple[int, int]:
    return max(low, 0), min(high, limit - 1)


def _tile_texture(textures: Any, tile: str) -> Sequence[int]:
    if is_wall(tile):
        return textures.wall_for(tile)
    if tile == "E":
        return textures.exit
    return textures.ground


def draw_background(frame: Image, game: Any) -> None:
    """Draw the map tiles seen by the camera; walls and exit sit on ground."""
    ts = game.tile_size
    textures = game.textures
    cam = game.camera
    top, bottom = _clamp_range(int(cam.y / ts), int((cam.y + RES_Y) / ts), game.map_rows)
    left, right = _clamp_range(int(cam.x / ts), int((cam.x + RES_X) / ts), game.map_cols)
    cam_x, cam_y = int(cam.x), int(cam.y)
    ground = textures.ground
    for ty in range(top, bottom + 1):
        row = game.grid[ty]
        for tx in range(left, right + 1):
            if tx >= len(row) or row[tx] == "\n":
                continue
            tile = row[tx]
            texture = _tile_texture(textures, tile)
            backed = is_wall(tile) or tile == "E"
            base_x = tx * ts - cam_x
            base_y = ty * ts - cam_y
            for py in range(ts):
                for px in range(ts):
                    index = py * ts + px
                    if backed:
                        frame.put_pixel(base_x + px, base_y + py, ground[index])
                    color = texture[index]
                    if color:
                        frame.put_pixel(base_x + px, base_y + py, color)


def _around_player(game: Any, top: int) -> tuple[int, int, int, int]:
    player = game.player
    top, bottom = _clamp_range(top, player.grid_y + 3, game.map_rows)
    left, right = _clamp_range(player.grid_x - 6, player.grid_x + 6, game.map_cols)
    return top, bottom, left, right


def _coin_bounds(game: Any) -> tuple[int, int, int, int]:
    return _around_player(game, int(game.player.view_y) - 3)


def _mob_bounds(game: Any) -> tuple[int, int, int, int]:
    return _around_player(game, game.player.grid_y - 3)


def _coin_pixel(frame: Image, game: Any, bounds, x: int, y: int) -> None:
    top, bottom, left, right = bounds
    ts = game.tile_size
    color = game.textures.coin[y * ts + x]
    if not color:
        return
    cam_x, cam_y = int(game.camera.x), int(game.camera.y)
    for coin in game.coins:
        if coin.visible and left <= coin.x <= right and top <= coin.y <= bottom:
            frame.put_pixel(coin.x * ts - cam_x + x, coin.y * ts - cam_y + y, color)


def _mob_pixel(frame: Image, game: Any, bounds, x: int, y: int) -> None:
    top, bottom, left, right = bounds
    ts = game.tile_size
    cam = game.camera
    for mob in game.mobs:
        if mob.x < left or mob.x > right or mob.y < top or mob.y > bottom:
            continue
        if not mob.visible:
            continue
        dx = int(int(mob.view_x * ts) - cam.x + x)
        dy = int(int(mob.view_y * ts) - cam.y + y)
        if dx < 0 or dy < 0:
            continue
        color = game.textures.mob[y * ts + x]
        if color:
            frame.put_pixel(dx, dy, color)


def _player_origin(game: Any, height: float) -> tuple[int, int]:
    ts = game.tile_size
    px = int(game.player.view_x * ts - int(game.camera.x))
    py = int(height * ts - int(game.camera.y))
    return px, py


def _shadow_pixel(frame: Image, game: Any, x: int, y: int) -> None:
    px, py = _player_origin(game, game.player.view_y)
    color = game.textures.shadow[y * game.tile_size + x]
    if color:
        frame.put_pixel(px + x, py + y, color)


def _player_texture(game: Any) -> Sequence[int]:
    textures = game.textures
    player = game.player
    inputs = game.inputs
    frame_index = min(max(int(game.anim_index), 0), 5)
    if player.jump and inputs.left:
        return textures.jump
    if player.jump:
        return textures.jump_right
    if inputs.left:
        return textures.player[frame_index]
    if inputs.right:
        return textures.player_right[frame_index]
    return textures.placeholder


def _player_pixel(frame: Image, game: Any, texture, origin, x: int, y: int) -> None:
    color = texture[y * game.tile_size + x]
    if color:
        frame.put_pixel(origin[0] + x, origin[1] + y, color)


def _tile_pixels(game: Any):
    ts = game.tile_size
    for y in range(ts):
        for x in range(ts):
            yield x, y


def draw_coins(frame: Image, game: Any) -> None:
    """Draw the visible coins near the player."""
    bounds = _coin_bounds(game)
    for x, y in _tile_pixels(game):
        _coin_pixel(frame, game, bounds, x, y)


def draw_mobs(frame: Image, game: Any) -> None:
    """Draw the visible enemies near the player."""
    bounds = _mob_bounds(game)
    for x, y in _tile_pixels(game):
        _mob_pixel(frame, game, bounds, x, y)


def draw_shadow(frame: Image, game: Any) -> None:
    """Draw the player's shadow on the ground."""
    for x, y in _tile_pixels(game):
        _shadow_pixel(frame, game, x, y)


def draw_player(frame: Image, game: Any) -> None:
    """Draw the player sprite matching its motion and jump state."""
    player = game.player
    height = player.view_jump if player.jump else player.view_y
    origin = _player_origin(game, height)
    texture = _player_texture(game)
    for x, y in _tile_pixels(game):
        _player_pixel(frame, game, texture, origin, x, y)


def draw_frame(frame: Image, game: Any) -> None:
    """Draw a whole frame: map, then enemies, coins and shadow, then the player."""
    draw_background(frame, game)
    mob_bounds = _mob_bounds(game)
    coin_bounds = _coin_bounds(game)
    for x, y in _tile_pixels(game):
        _mob_pixel(frame, game, mob_bounds, x, y)
        _coin_pixel(frame, game, coin_bounds, x, y)
        _shadow_pixel(frame, game, x, y)
    draw_player(frame, game)


def hud_lines(game: Any) -> list[tuple[int, int, int, str]]:
    """Return the status texts as (x, y, colour, text), in drawing order."""
    fps_text = f"FPS = {game.fps}" if game.fps < _FPS_CAP else f"FPS = {_FPS_CAP}"
    return [
        (50, 50, _MOVES_COLOR, f"MOVES = {game.mouv_counter}"),
        (50, 70, _TEXT_COLOR, f"MOVES CASES = {game.case_move}"),
        (450, 50, _TEXT_COLOR, f"SERINGUES = {game.coin_get}/{game.coin_count}"),
        (1500, 50, _FPS_COLOR, fps_text),
    ]