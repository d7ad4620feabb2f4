import pytest

from rtscene.xpm import (
    XpmError,
    XpmImage,
    parse_xpm_lines,
    parse_xpm_text,
    quoted_lines,
    read_xpm_file,
    strip_comments,
)

BASIC = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]

XPM_TEXT = """/* XPM */
static char *img[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1",
"r c red", // first colour
"g c green",
"rg"
};
"""


def test_strip_comments_keeps_length_and_removes_comments():
    text = 'a /* b */ c // d\n"e"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result and "//" not in result
    assert result.split() == ["a", "c", '"e"']


def test_strip_comments_leaves_quoted_markers():
    text = '"x/*y" z'
    assert strip_comments(text) == text


def test_quoted_lines():
    assert list(quoted_lines('a "x" b "yz" c "unterminated')) == ["x", "yz"]


def test_parse_basic_image():
    image = parse_xpm_lines(BASIC)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(0, 1) == image.pixel(1, 0)
    assert image.pixel(1, 1) == image.pixel(0, 0)


def test_two_word_colour_name():
    image = parse_xpm_lines(["1 1 1 1", "x c light blue", "x"])
    assert image.pixel(0, 0) == 0xADD8E6


def test_unknown_code_gives_zero():
    image = parse_xpm_lines(["2 1 1 1", "a c red", "az"])
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0


def test_short_codes_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == 0xFF


def test_long_codes_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == 0xFF0000


def test_pixel_out_of_range():
    image = parse_xpm_lines(BASIC)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_to_bytes_round_trip_and_byte_order():
    image = parse_xpm_lines(BASIC)
    little = image.to_bytes(False)
    big = image.to_bytes(True)
    assert len(little) == image.width * image.height * 4
    values = [int.from_bytes(little[i:i + 4], "little") for i in range(0, len(little), 4)]
    assert values == [v for row in image.pixels for v in row]
    for i in range(0, len(big), 4):
        assert big[i:i + 4] == little[i:i + 4][::-1]


def test_equal_images_compare_equal():
    assert parse_xpm_lines(BASIC) == XpmImage(
        2, 2, tuple(parse_xpm_lines(BASIC).pixels)
    )


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a x red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["3 1 1 1", "a c red", "aa"],
        [],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_parse_text_with_comments():
    image = parse_xpm_text(XPM_TEXT)
    assert image.pixels == ((0xFF0000, 0xFF00),)


def test_read_file(tmp_path):
    path = tmp_path / "image.xpm"
    path.write_text(XPM_TEXT)
    assert read_xpm_file(path) == parse_xpm_text(XPM_TEXT)


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_xpm_file(tmp_path / "missing.xpm")