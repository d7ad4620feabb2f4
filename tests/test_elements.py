import pytest

from rtscene.elements import (
    ElementError,
    ElementKind,
    parse_ambient,
    parse_camera,
    parse_light,
    parse_shape,
    parse_values,
)


def test_parse_values_reads_group():
    text = "1,2,3 rest"
    values, pos = parse_values(text, 0, 3)
    assert values == [1.0, 2.0, 3.0]
    assert pos == text.index(" ")


def test_parse_values_skips_leading_spaces():
    text = "   4,5"
    values, pos = parse_values(text, 0, 2)
    assert values == [4.0, 5.0]
    assert pos == len(text)


@pytest.mark.parametrize("text, count", [("1, 2", 2), ("1,2", 3), ("1,,2", 2), ("", 1)])
def test_parse_values_errors(text, count):
    with pytest.raises(ElementError):
        parse_values(text, 0, count)


def test_parse_sphere():
    record = parse_shape("sp 0,0,20 12.6 10,0,255\n")
    expected = (float(ElementKind.SPHERE), 0, 0, 20, 0, 0, 0, 12.6, 0, 10, 0, 255)
    assert record == pytest.approx(expected)


def test_parse_plane():
    record = parse_shape("pl 0,0,-10 0,1,0 0,0,225")
    expected = (float(ElementKind.PLANE), 0, 0, -10, 0, 1, 0, 0, 0, 0, 0, 225)
    assert record == pytest.approx(expected)


def test_parse_cylinder():
    record = parse_shape("cy 50,0,20.6 0,0,1 14.2 21.42 10,0,255")
    expected = (float(ElementKind.CYLINDER), 50, 0, 20.6, 0, 0, 1, 14.2, 21.42, 10, 0, 255)
    assert record == pytest.approx(expected)


def test_shape_allows_leading_spaces_and_comment():
    record = parse_shape("   sp 1,2,3 4 5,6,7 # ball")
    assert record == pytest.approx((float(ElementKind.SPHERE), 1, 2, 3, 0, 0, 0, 4, 0, 5, 6, 7))


@pytest.mark.parametrize("line", ["C 0,0,0 0,0,1 70", "# comment", "A 0.2 255,255,255"])
def test_parse_shape_ignores_other_lines(line):
    assert parse_shape(line) is None


@pytest.mark.parametrize(
    "line",
    ["sp 0,0,0 1 1,1,1 extra", "sp 0,0,0 1", "pl 0,0,0 0,1 0,0,0", "sphere 0,0,0 1 1,1,1"],
)
def test_parse_shape_errors(line):
    with pytest.raises(ElementError):
        parse_shape(line)


def test_parse_camera():
    record = parse_camera("C -50,0,20 0,0,1 70\n")
    expected = (float(ElementKind.CAMERA), -50, 0, 20, 0, 0, 1, 70, 0, 0, 0, 0)
    assert record == pytest.approx(expected)


def test_camera_requires_identifier_at_line_start():
    assert parse_camera(" C -50,0,20 0,0,1 70") is None
    assert parse_camera("L -40,0,30 0.7 255,255,255") is None


def test_parse_ambient():
    record = parse_ambient("A 0.2 255,255,255\r\n")
    expected = (float(ElementKind.AMBIENT), 0, 0, 0, 0, 0, 0, 0.2, 0, 255, 255, 255)
    assert record == pytest.approx(expected)


def test_parse_light():
    record = parse_light("L -40,0,30 0.7 255,255,255")
    expected = (float(ElementKind.LIGHT), -40, 0, 30, 0, 0, 0, 0.7, 0, 255, 255, 255)
    assert record == pytest.approx(expected)


@pytest.mark.parametrize(
    "parse, line",
    [
        (parse_ambient, "A 0.2"),
        (parse_light, "L -40,0,30 0.7"),
        (parse_camera, "C 0,0,0 0,0,1 70 9"),
        (parse_camera, "Camera 0,0,0 0,0,1 70"),
    ],
)
def test_single_element_errors(parse, line):
    with pytest.raises(ElementError):
        parse(line)