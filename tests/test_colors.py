import pytest

from sollong.colors import channel_shifts, convert_color, lookup_color

RGB565 = (0xF800, 0x07E0, 0x001F)
RGB888 = (0xFF0000, 0x00FF00, 0x0000FF)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("RED", 0xFF0000),
        ("Navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("black", 0x0),
        ("lightgreen", 0x90EE90),
        ("none", -1),
        ("None", -1),
    ],
)
def test_lookup_named_colors(name, expected):
    assert lookup_color(name) == expected


def test_lookup_unknown_name_is_zero():
    assert lookup_color("no-such-colour") == 0


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("#ff00ff", 0xFF00FF),
        ("#FF99FF", 0xFF99FF),
        ("#00ffff", 0x00FFFF),
        ("#", 0),
        ("#zz", 0),
        ("#12gg", 0x12),
    ],
)
def test_lookup_hex(spec, expected):
    assert lookup_color(spec) == expected


def test_lookup_hex_ignores_suffix():
    assert lookup_color("#123456", "ignored") == 0x123456


def test_lookup_with_suffix_joins_words():
    assert lookup_color("ghost", "white") == 0xF8F8FF
    assert lookup_color("Light", "Grey") == 0xD3D3D3


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("dark", "slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_suffix_making_unknown_name():
    assert lookup_color("red", "s") == 0


def test_channel_shifts_rgb565():
    assert channel_shifts(*RGB565) == (11, 5, 5, 6, 0, 5)


def test_channel_shifts_rgb888():
    assert channel_shifts(*RGB888) == (16, 8, 8, 8, 0, 8)


def test_channel_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        channel_shifts(0, 0x07E0, 0x001F)


@pytest.mark.parametrize("color", [0xFF0000, 0xFF99FF, 0x00FFFF, 0x123456])
def test_convert_deep_visual_is_identity(color):
    shifts = channel_shifts(*RGB888)
    assert convert_color(color, 24, shifts) == color
    assert convert_color(color, 32, shifts) == color


@pytest.mark.parametrize(
    "color, expected",
    [
        (0xFFFFFF, 0xFFFF),
        (0xFF0000, 0xF800),
        (0x00FF00, 0x07E0),
        (0x0000FF, 0x001F),
        (0x000000, 0x0000),
    ],
)
def test_convert_rgb565(color, expected):
    shifts = channel_shifts(*RGB565)
    assert convert_color(color, 16, shifts) == expected


def test_convert_rgb565_stays_inside_masks():
    shifts = channel_shifts(*RGB565)
    width, height = 242, 242
    for x in range(0, width, 17):
        for y in range(0, height, 19):
            color = (
                (x * 255) // width
                + ((((width - x) * 255) // width) << 16)
                + (((y * 255) // height) << 8)
            )
            pixel = convert_color(color, 16, shifts)
            assert 0 <= pixel <= 0xFFFF
            assert pixel & ~(RGB565[0] | RGB565[1] | RGB565[2]) == 0


def test_convert_rgb565_keeps_top_bits_of_each_channel():
    shifts = channel_shifts(*RGB565)
    pixel = convert_color(0xFF99FF, 16, shifts)
    assert (pixel & 0xF800) >> 11 == 0xFF >> 3
    assert (pixel & 0x07E0) >> 5 == 0x99 >> 2
    assert pixel & 0x001F == 0xFF >> 3