import pytest

from solong.image import Image, get_color_value, mask_shifts

TRUECOLOR = mask_shifts(0xFF0000, 0x00FF00, 0x0000FF)


def _map_color(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(image, kind):
    for y in range(image.height):
        for x in range(image.width):
            color = _map_color(x, y, image.width, image.height, kind)
            image.put_pixel(x, y, get_color_value(color, 24, TRUECOLOR))


@pytest.mark.parametrize("size,kind", [((42, 42), 1), ((242, 242), 1), ((242, 242), 2)])
def test_color_map_fill_reads_back(size, kind):
    image = Image(*size)
    _fill(image, kind)
    for y in range(0, image.height, 7):
        for x in range(0, image.width, 5):
            assert image.get_pixel(x, y) == _map_color(x, y, image.width, image.height, kind)


def test_image_layout():
    image = Image(42, 42)
    assert image.bpp == 32
    assert image.size_line == 42 * 4
    assert image.endian == 0
    assert len(image.data) == image.size_line * image.height


def test_new_image_is_black():
    image = Image(3, 2)
    assert all(image.get_pixel(x, y) == 0 for x in range(3) for y in range(2))


def test_pixel_stored_little_endian():
    image = Image(2, 1)
    image.put_pixel(1, 0, 0x112233)
    assert bytes(image.data[4:8]) == b"\x33\x22\x11\x00"


def test_out_of_bounds_reads_zero_and_writes_ignored():
    image = Image(4, 4)
    before = bytes(image.data)
    for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4)]:
        image.put_pixel(x, y, 0xFFFFFF)
        assert image.get_pixel(x, y) == 0
    assert bytes(image.data) == before


def test_put_pixel_truncates_to_32_bits():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_clear_resets_pixels():
    image = Image(5, 5)
    image.put_pixel(2, 3, 0x46EB34)
    image.clear()
    assert image.get_pixel(2, 3) == 0
    assert not any(image.data)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Image(0, 10)


def test_mask_shifts_truecolor():
    assert TRUECOLOR == (16, 8, 8, 8, 0, 8)


def test_mask_shifts_rgb565():
    assert mask_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_mask_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        mask_shifts(0, 0xFF00, 0xFF)


def test_deep_visual_keeps_color():
    assert get_color_value(0xFF99FF, 24, TRUECOLOR) == 0xFF99FF
    assert get_color_value(0x00FFFF, 32, TRUECOLOR) == 0x00FFFF


def test_shallow_visual_uses_masks():
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert get_color_value(0xFFFFFF, 16, shifts) == 0xF800 | 0x07E0 | 0x001F
    assert get_color_value(0xFF0000, 16, shifts) == 0xF800
    assert get_color_value(0x0000FF, 16, shifts) == 0x001F
    assert get_color_value(0x000000, 16, shifts) == 0


def test_shallow_truecolor_masks_round_trip():
    for color in (0x123456, 0xFF99FF, 0x00FFFF):
        assert get_color_value(color, 16, TRUECOLOR) == color