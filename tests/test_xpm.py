import pytest

from sollong.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    quoted_lines,
    read_xpm,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"  c None",
". c #FF0000",
"X c white",
/* pixels */
"X. ",
" .X"
};
"""


def test_read_sample_dimensions():
    image = read_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert all(len(row) == 3 for row in image.pixels)


def test_read_sample_pixels():
    image = read_xpm(SAMPLE)
    assert image.pixel(0, 0) == 0xFFFFFF
    assert image.pixel(1, 0) == 0xFF0000
    assert image.pixel(2, 0) == 0xFF000000
    assert image.pixel(0, 1) == 0xFF000000
    assert image.pixel(2, 1) == 0xFFFFFF


def test_pixel_out_of_range():
    image = read_xpm(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_strip_block_comment_keeps_length():
    text = "a/*b*/c"
    result = strip_comments(text)
    assert result == "a" + " " * 5 + "c"
    assert len(result) == len(text)


def test_strip_line_comment_with_newline():
    assert strip_comments("x// y\nz") == "x" + " " * 5 + "z"


def test_strip_leaves_quoted_comments():
    text = '"/*x*/" "//y"'
    assert strip_comments(text) == text


def test_quoted_lines():
    assert list(quoted_lines('"a" junk "b c"\n"d"')) == ["a", "b c", "d"]


def test_parse_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c black", "bb c red", "bbaa"])
    assert image.pixels == ((0xFF0000, 0x000000),)


def test_direct_palette_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c white", "a"])
    assert image.pixel(0, 0) == 0xFFFFFF


def test_wide_palette_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c white", "abc"])
    assert image.pixel(0, 0) == 0xFF0000


def test_unknown_pixel_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c white", "az"])
    assert image.pixels == ((0xFFFFFF, 0),)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c red", "a"],
        ["3 1 1 1", "a c red", "aa"],
        [],
    ],
)
def test_bad_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_matches_read(tmp_path):
    path = tmp_path / "sprite.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == read_xpm(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


def test_image_equality_roundtrip():
    image = parse_xpm(["1 1 1 1", "a c #00FF00", "a"])
    assert image == XpmImage(1, 1, ((0x00FF00,),))