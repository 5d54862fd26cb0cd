import pytest

from solong.colors import COLORS, lookup_color


def test_named_colour_values_from_table():
    assert lookup_color("snow") == 0xFFFAFA
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("navy") == 0x80


def test_lookup_ignores_case():
    assert lookup_color("GhostWhite") == lookup_color("ghostwhite")
    assert lookup_color("RED") == lookup_color("red")


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_spaced_and_joined_names_agree():
    pairs = [("ghost white", "ghostwhite"), ("misty rose", "mistyrose"),
             ("dark red", "darkred"), ("light green", "lightgreen")]
    for spaced, joined in pairs:
        assert lookup_color(spaced) == lookup_color(joined)


def test_grey_ramp_spellings_match_and_rise():
    values = [lookup_color(f"gray{i}") for i in range(101)]
    assert values == [lookup_color(f"grey{i}") for i in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[100] == lookup_color("white")


def test_grey_ramp_channels_equal():
    for i in range(101):
        value = lookup_color(f"gray{i}")
        r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b


def test_all_values_fit_rgb():
    assert all(-1 <= v <= 0xFFFFFF for v in COLORS.values())


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")