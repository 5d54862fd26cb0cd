from types import SimpleNamespace

import pytest

from solong.coins import Coin
from solong.gamemap import remap
from solong.image import Image
from solong.mobs import Mob
from solong.player import Input, Player
from solong.render import (
    Camera,
    draw_background,
    draw_coins,
    draw_frame,
    draw_mobs,
    draw_player,
    draw_shadow,
    hud_lines,
)
from solong.textures import TextureSet, mirror_texture

TS = 2
GROUND = 0x101010
EXIT = 0x202020
COIN = 0x303030
SHADOW = 0x404040
MOB = 0x505050
PLACEHOLDER = 0x606060
JUMP_A = 0x700001
JUMP_B = 0x700002


def uniform(color):
    return (color,) * (TS * TS)


def make_textures():
    jump = (JUMP_A, JUMP_B, JUMP_A, JUMP_B)
    return TextureSet(
        tile_size=TS,
        player=tuple(uniform(0x800000 + i) for i in range(6)),
        player_right=tuple(uniform(0x900000 + i) for i in range(6)),
        walls=tuple(uniform(0xA00000 + i) for i in range(9)),
        ground=uniform(GROUND),
        coin=uniform(COIN),
        exit=uniform(EXIT),
        shadow=uniform(SHADOW),
        jump=jump,
        jump_right=mirror_texture(jump, TS),
        mob=uniform(MOB),
        placeholder=uniform(PLACEHOLDER),
    )


def make_game(**changes):
    grid = remap(["11111\n", "1PCE1\n", "1M001\n", "11111\n"])
    game = SimpleNamespace(
        grid=grid,
        tile_size=TS,
        textures=make_textures(),
        camera=Camera(),
        player=Player(grid_x=1, grid_y=1, view_x=1.0, view_y=1.0, view_jump=1.0),
        inputs=Input(),
        coins=[Coin(2, 1)],
        mobs=[Mob(x=1, y=2, view_x=1.0, view_y=2.0)],
        map_rows=len(grid),
        map_cols=len(grid[-1]),
        anim_index=0.0,
        mouv_counter=3,
        case_move=2,
        coin_get=1,
        coin_count=4,
        fps=60,
    )
    for key, value in changes.items():
        setattr(game, key, value)
    return game


def test_camera_moves_towards_player():
    player = Player(grid_x=10, grid_y=10, view_x=10.0, view_y=10.0, view_jump=10.0)
    camera = Camera()
    camera.follow(player, 200)
    first = camera.x
    assert first > 0
    camera.follow(player, 200)
    assert camera.x > first


def test_camera_follows_jump_height():
    still = Player(grid_x=1, grid_y=1, view_x=1.0, view_y=1.0, view_jump=5.0)
    jumping = Player(grid_x=1, grid_y=1, view_x=1.0, view_y=1.0, view_jump=5.0, jump=True)
    a, b = Camera(), Camera()
    a.follow(still, 200)
    b.follow(jumping, 200)
    assert b.y > a.y
    assert a.x == b.x


def test_background_draws_walls_ground_and_exit():
    game = make_game()
    frame = Image(20, 10)
    draw_background(frame, game)
    textures = game.textures
    assert frame.get_pixel(0, 0) == textures.wall_for("A")[0]
    assert frame.get_pixel(2, 2) == GROUND
    assert frame.get_pixel(6, 2) == EXIT
    assert frame.get_pixel(10, 0) == 0


def test_background_transparent_exit_shows_ground():
    game = make_game()
    game.textures = TextureSet(**{**vars(make_textures()), "exit": uniform(0)})
    frame = Image(20, 10)
    draw_background(frame, game)
    assert frame.get_pixel(6, 2) == GROUND


def test_coins_drawn_only_when_visible():
    game = make_game()
    frame = Image(20, 10)
    draw_coins(frame, game)
    assert frame.get_pixel(4, 2) == COIN
    game.coins[0].visible = False
    frame.clear()
    draw_coins(frame, game)
    assert frame.get_pixel(4, 2) == 0


def test_mobs_drawn_only_when_visible():
    game = make_game()
    frame = Image(20, 10)
    draw_mobs(frame, game)
    assert frame.get_pixel(2, 4) == MOB
    game.mobs[0].visible = False
    frame.clear()
    draw_mobs(frame, game)
    assert frame.get_pixel(2, 4) == 0


def test_shadow_under_player():
    game = make_game()
    frame = Image(20, 10)
    draw_shadow(frame, game)
    assert frame.get_pixel(2, 2) == SHADOW


def test_player_texture_choice():
    game = make_game()
    frame = Image(20, 10)
    draw_player(frame, game)
    assert frame.get_pixel(2, 2) == PLACEHOLDER

    game.inputs.left = True
    draw_player(frame, game)
    assert frame.get_pixel(2, 2) == game.textures.player[0][0]

    game.inputs.left = False
    game.inputs.right = True
    game.anim_index = 9.0
    draw_player(frame, game)
    assert frame.get_pixel(2, 2) == game.textures.player_right[5][0]


def test_jump_texture_is_mirrored_when_not_going_left():
    game = make_game()
    game.player.jump = True
    frame = Image(20, 10)
    draw_player(frame, game)
    assert frame.get_pixel(2, 2) == JUMP_B
    game.inputs.left = True
    draw_player(frame, game)
    assert frame.get_pixel(2, 2) == JUMP_A


def test_frame_puts_player_over_background():
    game = make_game()
    frame = Image(20, 10)
    draw_frame(frame, game)
    assert frame.get_pixel(2, 2) == PLACEHOLDER
    assert frame.get_pixel(4, 2) == COIN
    assert frame.get_pixel(2, 4) == MOB


def test_hud_lines_text():
    game = make_game()
    lines = hud_lines(game)
    assert [text for *_, text in lines] == [
        "MOVES = 3",
        "MOVES CASES = 2",
        "SERINGUES = 1/4",
        "FPS = 30",
    ]
    assert lines[0][:3] == (50, 50, 0x46EB34)


@pytest.mark.parametrize("fps", [0, 12, 29])
def test_hud_shows_low_fps(fps):
    game = make_game(fps=fps)
    assert hud_lines(game)[-1][3] == f"FPS = {fps}"