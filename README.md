# solong

Building blocks for a small top-down arcade game played on a tile map:
the player walks around, collects every item, jumps over or onto
patrolling enemies, and leaves through the exit. The package holds the
game's rules and drawing code as plain Python with no dependencies.

## Installing

```
pip install .
```

## Map format

A map is a rectangle of text lines built from these characters:

| Char | Meaning          |
|------|------------------|
| `1`  | wall             |
| `0`  | floor            |
| `P`  | player start     |
| `C`  | collectible      |
| `E`  | exit             |
| `M`  | patrolling enemy |

`solong.gamemap.check_map` accepts a map only when it has exactly one
`P`, exactly one `E`, at least one `C`, is fully enclosed by walls,
contains no other characters, and the exit and every collectible can be
reached from the start. Otherwise it raises `solong.gamemap.MapError`.

```
1111111
1P0C0E1
10M0001
1111111
```

## Modules

- `solong.gamemap` — `has_valid_name`, `read_map`, `check_map`,
  `check_path`, `flood_fill`, `find_player`, `count_element`, `remap`
  (turns border walls into shaped tiles `A Z O D T B L R`) and `is_wall`.
- `solong.coins` — `Coin`, `find_coins` and `collect`.
- `solong.player` — `Input` (key state from X11 keysyms: WASD, arrow
  keys) and `Player` with `from_grid`, `move`, `update_velocity` and
  `start_jump`.
- `solong.mobs` — `Mob` with `set_axis`, `step` and `step_tiles`, plus
  `find_mobs` and `move_all`.
- `solong.xpm` — `load_xpm`, `parse_xpm_text`, `parse_xpm`,
  `strip_comments`, `text_rgb`; errors raise `XpmError`.
- `solong.colors` — `lookup_color` for X11 colour names.
- `solong.image` — `Image`, an in-memory 32-bit pixel buffer with
  `get_pixel`, `put_pixel` and `clear`; `get_color_value` and
  `mask_shifts` for narrower colour depths.
- `solong.textures` — `load_textures` reads the game's XPM textures from
  an asset directory into a `TextureSet`; `texture_from_image` and
  `mirror_texture`.
- `solong.render` — `Camera.follow`, and `draw_background`,
  `draw_coins`, `draw_mobs`, `draw_shadow`, `draw_player`, `draw_frame`
  and `hud_lines`, which draw a game state into an `Image`.

## Example

```python
from solong.gamemap import read_map, check_map, remap
from solong.player import Input, Player
from solong.mobs import find_mobs, move_all

grid = read_map("level.ber")
check_map(grid)
grid = remap(grid)

player = Player.from_grid(grid)
mobs = find_mobs(grid)
keys = Input()
keys.press(100)          # 'd': move right
player.update_velocity(keys, grid)
move_all(mobs, grid)
print(player.grid_x, player.grid_y)
```

```python
from solong.xpm import parse_xpm_text

image = parse_xpm_text('"2 1 2 1", "a c red", "b c None", "ab"')
print(hex(image.get_pixel(0, 0)))   # 0xff0000
```

## What this package does not do

There is no playable program here: no command to start the game, no
window, no keyboard event handling and no frame loop. The drawing
functions in `solong.render` fill an off-screen `Image`; putting that
image on a screen and driving the game step by step is left to the
caller, who supplies a game object carrying the map, textures, camera,
player, inputs, coins, mobs and counters that those functions read.

## Running the tests

```
pip install ".[test]"
pytest
```