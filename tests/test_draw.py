import pytest

from eiwidgets.draw import SizeMismatchError, copy_surface
from eiwidgets.surface import Surface
from eiwidgets.types import Color, Point, Rect, Size


def _filled(size, color, indices=(0, 1, 2, 3)):
    surface = Surface(size, indices)
    for point in surface.points():
        surface.set_color(point, color)
    return surface


def test_plain_copy_reproduces_source_exactly():
    source = Surface(Size(3, 2))
    for number, point in enumerate(source.points()):
        source.set_pixel(point, 0x01020304 * (number + 1))
    destination = Surface(Size(3, 2))
    copy_surface(destination, None, source, None, False)
    assert destination.pixels == source.pixels


def test_size_mismatch_raises():
    source = Surface(Size(3, 3))
    destination = Surface(Size(4, 3))
    with pytest.raises(SizeMismatchError) as info:
        copy_surface(destination, None, source, None, False)
    assert info.value.source_size == Size(3, 3)
    assert info.value.destination_size == Size(4, 3)


def test_size_mismatch_is_value_error():
    source = Surface(Size(2, 2))
    destination = Surface(Size(5, 5))
    with pytest.raises(ValueError):
        copy_surface(destination, Rect(Point(0, 0), Size(2, 3)), source, None, False)


def test_copy_into_sub_rectangle_leaves_rest_untouched():
    red = Color(255, 0, 0)
    blue = Color(0, 0, 255)
    source = _filled(Size(2, 2), red)
    destination = _filled(Size(4, 4), blue)
    copy_surface(destination, Rect(Point(1, 1), Size(2, 2)), source, None, False)
    for point in destination.points():
        inside = 1 <= point.x <= 2 and 1 <= point.y <= 2
        assert destination.get_color(point) == (red if inside else blue)


def test_copy_from_sub_rectangle_of_source():
    source = Surface(Size(3, 3))
    source.set_pixel(Point(2, 2), 0xAABBCCDD)
    destination = Surface(Size(1, 1))
    copy_surface(destination, None, source, Rect(Point(2, 2), Size(1, 1)), False)
    assert destination.get_pixel(Point(0, 0)) == 0xAABBCCDD


def test_opaque_alpha_copy_takes_source_colour():
    green = Color(0, 200, 0, 255)
    source = _filled(Size(2, 2), green)
    destination = _filled(Size(2, 2), Color(10, 20, 30, 255))
    copy_surface(destination, None, source, None, True)
    for point in destination.points():
        assert destination.get_color(point) == green


def test_transparent_alpha_copy_keeps_destination():
    original = Color(10, 20, 30, 255)
    source = _filled(Size(2, 2), Color(250, 250, 250, 0))
    destination = _filled(Size(2, 2), original)
    copy_surface(destination, None, source, None, True)
    for point in destination.points():
        assert destination.get_color(point) == original


def test_half_alpha_blends_channels():
    source = _filled(Size(1, 1), Color(255, 255, 255, 128))
    destination = _filled(Size(1, 1), Color(0, 0, 0, 255))
    copy_surface(destination, None, source, None, True)
    assert destination.get_color(Point(0, 0)) == Color(128, 128, 128, 255)


def test_alpha_copy_keeps_destination_alpha_byte():
    source = _filled(Size(1, 1), Color(1, 2, 3, 255))
    destination = _filled(Size(1, 1), Color(0, 0, 0, 77))
    copy_surface(destination, None, source, None, True)
    assert destination.get_color(Point(0, 0)).alpha == 77


def test_plain_copy_copies_alpha_byte():
    source = _filled(Size(1, 1), Color(1, 2, 3, 40))
    destination = _filled(Size(1, 1), Color(9, 9, 9, 255))
    copy_surface(destination, None, source, None, False)
    assert destination.get_color(Point(0, 0)) == Color(1, 2, 3, 40)


def test_copy_outside_destination_raises_index_error():
    source = Surface(Size(2, 2))
    destination = Surface(Size(3, 3))
    with pytest.raises(IndexError):
        copy_surface(destination, Rect(Point(2, 2), Size(2, 2)), source, None, False)