import pytest

from rtscene.colors import lookup_color, text_to_rgb


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("GhostWhite") == 0xF8F8FF


def test_lookup_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff00aa", None) == 0xFF00AA
    assert text_to_rgb("#FFFFFF", None) == 0xFFFFFF


def test_text_to_rgb_hex_stops_at_non_digit():
    assert text_to_rgb("#12zz", None) == 0x12


def test_text_to_rgb_hex_without_digits_is_zero():
    assert text_to_rgb("#zz", None) == 0


def test_text_to_rgb_hex_ignores_end():
    assert text_to_rgb("#0000ff", "ignored") == 0xFF


def test_text_to_rgb_single_word():
    assert text_to_rgb("red", None) == lookup_color("red")
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_joins_two_words():
    assert text_to_rgb("light", "green") == 0x90EE90
    assert text_to_rgb("Dark", "Slate") == 0x2F4F4F


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("mystery", None) == 0
    assert text_to_rgb("red", "extra") == 0


def test_text_to_rgb_combined_name_truncated():
    long_word = "x" * 80
    assert text_to_rgb(long_word, "red") == 0