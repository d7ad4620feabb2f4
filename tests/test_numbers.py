import pytest

from rtscene.numbers import NumberError, at_line_end, in_range, read_number, valid_values

CAMERA = (3.0, -50.0, 0.0, 20.0, 0.0, 0.0, 1.0, 70.0, 0.0, 0.0, 0.0, 0.0)
AMBIENT = (4.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.2, 0.0, 255.0, 255.0, 255.0)
LIGHT = (5.0, -40.0, 0.0, 30.0, 0.0, 0.0, 0.0, 0.7, 0.0, 255.0, 255.0, 255.0)


def test_read_number_followed_by_comma():
    text = "12.5,3"
    value, pos = read_number(text, 0, True)
    assert value == pytest.approx(12.5)
    assert pos == text.index(",")


def test_read_number_negative_last_value():
    text = "-3 next"
    value, pos = read_number(text, 0, False)
    assert value == -3.0
    assert pos == text.index(" ")


def test_read_number_plus_sign_and_comment():
    text = "+7#note"
    value, pos = read_number(text, 0, False)
    assert value == 7.0
    assert text[pos] == "#"


def test_read_number_trailing_dot():
    text = "5."
    value, pos = read_number(text, 0, False)
    assert value == 5.0
    assert pos == len(text)


def test_read_number_from_middle():
    text = "x3.5"
    value, pos = read_number(text, 1, False)
    assert value == pytest.approx(3.5)
    assert pos == len(text)


def test_leading_dot_is_rejected():
    with pytest.raises(NumberError):
        read_number(" .5", 1, False)


@pytest.mark.parametrize(
    "text, more",
    [("", False), ("\n", False), ("\r", True), ("1,x", False), ("1 ", True), ("1a", False)],
)
def test_read_number_errors(text, more):
    with pytest.raises(NumberError):
        read_number(text, 0, more)


def test_in_range():
    assert in_range([0, 1, -1], -1, 1) is True
    assert in_range([1.01], -1, 1) is False
    assert in_range([], 0, 1) is True


@pytest.mark.parametrize("text", ["", "   ", "  # comment", "\n", "\r\n"])
def test_at_line_end_true(text):
    assert at_line_end(text) is True


@pytest.mark.parametrize("text", ["x", "  1", "\t"])
def test_at_line_end_false(text):
    assert at_line_end(text) is False


def test_valid_values_accepts_good_scene():
    assert valid_values([CAMERA, AMBIENT, LIGHT]) is True


def test_valid_values_ignores_shapes():
    wild_shape = (1.0, 0.0, 0.0, 0.0, 9.0, 9.0, 9.0, 1.0, 0.0, 999.0, -5.0, 0.0)
    assert valid_values([CAMERA, AMBIENT, LIGHT, wild_shape]) is True


@pytest.mark.parametrize(
    "index, slot, value",
    [(0, 4, 2.0), (0, 7, 181.0), (1, 7, 1.5), (1, 10, 256.0), (2, 7, -0.1), (2, 11, -1.0)],
)
def test_valid_values_rejects_out_of_range(index, slot, value):
    records = [list(CAMERA), list(AMBIENT), list(LIGHT)]
    records[index][slot] = value
    assert valid_values(records) is False


def test_valid_values_needs_three_records():
    with pytest.raises(ValueError):
        valid_values([CAMERA, AMBIENT])