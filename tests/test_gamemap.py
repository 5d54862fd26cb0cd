import pytest

from solong.gamemap import (
    MapError,
    check_map,
    check_path,
    count_element,
    find_player,
    flood_fill,
    has_valid_name,
    is_wall,
    read_map,
    remap,
)

VALID = ["11111\n", "1PCE1\n", "11111\n"]


@pytest.mark.parametrize(
    "path, expected",
    [("maps/level.ber", True), (".ber", True), ("level.txt", False), (".be", False)],
)
def test_has_valid_name(path, expected):
    assert has_valid_name(path) is expected


def test_read_map_keeps_newlines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("11111\n1PCE1\n11111\n")
    assert read_map(path) == VALID


def test_read_map_last_row_without_newline(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("111\n1P1\n111")
    rows = read_map(path)
    assert rows[-1] == "111"
    assert len(rows) == 3


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "absent.ber")


def test_count_element():
    grid = ["1111\n", "1CC1\n", "1C01\n", "1111\n"]
    assert count_element(grid, "C") == 3
    assert count_element(grid, "P") == 0


@pytest.mark.parametrize(
    "grid",
    [
        [],
        ["111111\n", "1PCEP1\n", "111111\n"],
        ["1111\n", "1PE1\n", "1111\n"],
        ["11111\n", "1PCE0\n", "11111\n"],
        ["111111\n", "1PCEX1\n", "111111\n"],
        ["11111\n", "1PCE1\n", "11101\n"],
    ],
)
def test_check_map_rejects_invalid(grid):
    with pytest.raises(MapError, match="Map invalid"):
        check_map(grid)


def test_check_map_rejects_unreachable_coin():
    grid = ["11111\n", "1P1C1\n", "1E111\n", "11111\n"]
    with pytest.raises(MapError, match="FloodFill invalid"):
        check_map(grid)


def test_check_path_rejects_unreachable_exit():
    grid = ["111111\n", "1PC1E1\n", "111111\n"]
    with pytest.raises(MapError, match="FloodFill invalid"):
        check_path(grid)


def test_flood_fill_counts_and_leaves_grid_intact():
    grid = ["111111\n", "1PCMC1\n", "1C1111\n", "111111\n"]
    before = list(grid)
    assert flood_fill(grid, 1, 1, "C") == count_element(grid, "C")
    assert grid == before


def test_flood_fill_stops_at_walls():
    grid = ["11111\n", "1P1C1\n", "11111\n"]
    assert flood_fill(grid, 1, 1, "C") == 0


def test_find_player():
    assert find_player(VALID) == (1, 1)


def test_find_player_missing():
    with pytest.raises(MapError):
        find_player(["111\n", "101\n", "111\n"])


def test_remap_shapes_border():
    assert remap(VALID) == ["ATTTZ\n", "LPCER\n", "OBBBD\n"]


def test_remap_keeps_inner_walls_and_sizes():
    grid = ["111111\n", "1P1CE1\n", "111111\n"]
    result = remap(grid)
    assert [len(row) for row in result] == [len(row) for row in grid]
    assert result[1][2] == "1"
    assert all(is_wall(tile) for tile in result[0].rstrip("\n"))
    assert all(is_wall(tile) for tile in result[-1].rstrip("\n"))


@pytest.mark.parametrize("tile", list("1DTAOBRLZ"))
def test_is_wall_true(tile):
    assert is_wall(tile)


@pytest.mark.parametrize("tile", ["0", "P", "C", "E", "M", "\n", ""])
def test_is_wall_false(tile):
    assert not is_wall(tile)