import pytest

from eiwidgets.surface import Surface, map_rgba, unmap_rgba
from eiwidgets.types import Color, Point, Rect, Size


def test_new_surface_is_zeroed():
    surface = Surface(Size(3, 2))
    assert all(surface.get_pixel(p) == 0 for p in surface.points())
    assert len(list(surface.points())) == 6


def test_rect_combines_origin_and_size():
    surface = Surface(Size(4, 5), origin=Point(7, 9))
    assert surface.rect() == Rect(Point(7, 9), Size(4, 5))


def test_default_origin_is_zero():
    surface = Surface(Size(4, 5))
    assert surface.rect() == Rect(Point(0, 0), Size(4, 5))


def test_has_alpha():
    assert Surface(Size(1, 1), (0, 1, 2, 3)).has_alpha() is True
    assert Surface(Size(1, 1), (0, 1, 2, -1)).has_alpha() is False


@pytest.mark.parametrize(
    "indices",
    [(0, 1, 2), (0, 0, 2, 3), (0, 1, 4, 3), (0, 1, 2, -2), (-1, 1, 2, 3)],
)
def test_invalid_channel_indices(indices):
    with pytest.raises(ValueError):
        Surface(Size(1, 1), indices)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Surface(Size(-1, 2))


def test_pixel_round_trip():
    surface = Surface(Size(3, 3))
    surface.set_pixel(Point(2, 1), 0xDEADBEEF)
    assert surface.get_pixel(Point(2, 1)) == 0xDEADBEEF
    assert surface.get_pixel(Point(1, 2)) == 0


def test_pixel_out_of_range_value():
    surface = Surface(Size(1, 1))
    with pytest.raises(ValueError):
        surface.set_pixel(Point(0, 0), 1 << 32)
    with pytest.raises(ValueError):
        surface.set_pixel(Point(0, 0), -1)


@pytest.mark.parametrize("point", [Point(-1, 0), Point(0, -1), Point(3, 0), Point(0, 2)])
def test_out_of_bounds_point(point):
    surface = Surface(Size(3, 2))
    with pytest.raises(IndexError):
        surface.get_pixel(point)


def test_origin_shifts_addressing():
    surface = Surface(Size(2, 2), origin=Point(10, 5))
    surface.set_pixel(Point(11, 6), 42)
    assert surface.get_pixel(Point(11, 6)) == 42
    assert surface.pixels[3] == 42
    with pytest.raises(IndexError):
        surface.get_pixel(Point(0, 0))


@pytest.mark.parametrize("indices", [(0, 1, 2, 3), (2, 1, 0, 3), (3, 2, 1, 0), (1, 2, 3, 0)])
def test_color_round_trip_with_alpha(indices):
    surface = Surface(Size(2, 2), indices)
    color = Color(10, 20, 30, 40)
    surface.set_color(Point(1, 1), color)
    assert surface.get_color(Point(1, 1)) == color


def test_color_without_alpha_comes_back_opaque():
    surface = Surface(Size(1, 1), (2, 1, 0, -1))
    surface.set_color(Point(0, 0), Color(10, 20, 30, 40))
    assert surface.get_color(Point(0, 0)) == Color(10, 20, 30, 255)


def test_map_rgba_rgba_order():
    surface = Surface(Size(1, 1), (0, 1, 2, 3))
    assert map_rgba(surface, Color(1, 2, 3, 4)) == 0x04030201


def test_map_rgba_bgra_order():
    surface = Surface(Size(1, 1), (2, 1, 0, 3))
    assert map_rgba(surface, Color(1, 2, 3, 4)) == 0x04010203


def test_map_rgba_without_alpha_leaves_unused_byte_zero():
    surface = Surface(Size(1, 1), (0, 1, 2, -1))
    value = map_rgba(surface, Color(255, 255, 255, 255))
    assert value >> 24 == 0
    assert unmap_rgba(surface, value) == Color(255, 255, 255, 255)


def test_unmap_rejects_out_of_range():
    surface = Surface(Size(1, 1))
    with pytest.raises(ValueError):
        unmap_rgba(surface, 1 << 32)


def test_unmap_then_map_is_identity():
    surface = Surface(Size(1, 1), (3, 0, 1, 2))
    for value in (0, 0x12345678, 0xFFFFFFFF, 0x80FF0001):
        assert map_rgba(surface, unmap_rgba(surface, value)) == value