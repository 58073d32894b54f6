"""In-memory drawing surfaces holding 32-bit pixels with a configurable channel order."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .types import Color, Point, Rect, Size

_MAX_PIXEL = 0xFFFFFFFF


def _validate_channel_indices(indices: Sequence[int]) -> tuple[int, int, int, int]:
    if len(indices) != 4:
        raise ValueError(
            f"expected four channel indices (red, green, blue, alpha), got {len(indices)}"
        )
    red, green, blue, alpha = (int(i) for i in indices)
    colour_channels = (red, green, blue)
    for index in colour_channels:
        if not 0 <= index <= 3:
            raise ValueError(f"colour channel index out of range 0..3: {index}")
    if alpha != -1 and not 0 <= alpha <= 3:
        raise ValueError(f"alpha channel index must be -1 or in 0..3: {alpha}")
    used = [i for i in (red, green, blue, alpha) if i != -1]
    if len(set(used)) != len(used):
        raise ValueError(f"channel indices must be distinct: {tuple(indices)}")
    return red, green, blue, alpha


class Surface:
    """A rectangular array of 32-bit pixels, stored row by row from the top-left.

    Each pixel packs four bytes; byte ``i`` is ``(value >> (8 * i)) & 0xFF``.
    ``channel_indices`` tells which byte holds red, green, blue and alpha;
    an alpha index of -1 means the surface has no alpha channel.
    ``origin`` gives the coordinates of the first pixel of the buffer.
    """

    def __init__(
        self,
        size: Size,
        channel_indices: Sequence[int] = (0, 1, 2, 3),
        origin: Optional[Point] = None,
    ) -> None:
        if size.width < 0 or size.height < 0:
            raise ValueError(f"surface size must not be negative: {size}")
        self.size = size
        self.channel_indices = _validate_channel_indices(channel_indices)
        self.origin = origin if origin is not None else Point(0, 0)
        self.pixels: list[int] = [0] * (size.width * size.height)

    def __repr__(self) -> str:
        return (
            f"Surface(size={self.size!r}, channel_indices={self.channel_indices!r}, "
            f"origin={self.origin!r})"
        )

    def rect(self) -> Rect:
        """Return the rectangle covered by the surface: its origin and size."""
        return Rect(self.origin, self.size)

    def has_alpha(self) -> bool:
        """Tell whether the surface has an alpha channel."""
        return self.channel_indices[3] != -1

    def _index(self, point: Point) -> int:
        column = point.x - self.origin.x
        row = point.y - self.origin.y
        if not (0 <= column < self.size.width and 0 <= row < self.size.height):
            raise IndexError(f"point {point} lies outside surface {self.rect()}")
        return column + row * self.size.width

    def points(self) -> Iterator[Point]:
        """Yield every pixel coordinate, row by row."""
        for row in range(self.size.height):
            for column in range(self.size.width):
                yield Point(self.origin.x + column, self.origin.y + row)

    def get_pixel(self, point: Point) -> int:
        """Return the raw 32-bit value of the pixel at point."""
        return self.pixels[self._index(point)]

    def set_pixel(self, point: Point, value: int) -> None:
        """Store a raw 32-bit value at point."""
        if not 0 <= value <= _MAX_PIXEL:
            raise ValueError(f"pixel value out of 32-bit range: {value}")
        self.pixels[self._index(point)] = value

    def get_color(self, point: Point) -> Color:
        """Return the colour of the pixel at point."""
        return unmap_rgba(self, self.get_pixel(point))

    def set_color(self, point: Point, color: Color) -> None:
        """Store a colour at point, using the surface's channel order."""
        self.set_pixel(point, map_rgba(self, color))


def map_rgba(surface: Surface, color: Color) -> int:
    """Pack a colour into a 32-bit pixel value in the surface's channel order.

    The alpha component is dropped on surfaces without an alpha channel.
    """
    red, green, blue, alpha = surface.channel_indices
    value = (color.red << (8 * red)) | (color.green << (8 * green)) | (
        color.blue << (8 * blue)
    )
    if alpha != -1:
        value |= color.alpha << (8 * alpha)
    return value


def unmap_rgba(surface: Surface, value: int) -> Color:
    """Unpack a 32-bit pixel value into a colour; opaque if the surface has no alpha."""
    if not 0 <= value <= _MAX_PIXEL:
        raise ValueError(f"pixel value out of 32-bit range: {value}")
    red, green, blue, alpha = surface.channel_indices

    def byte(index: int) -> int:
        return (value >> (8 * index)) & 0xFF

    return Color(
        byte(red),
        byte(green),
        byte(blue),
        byte(alpha) if alpha != -1 else 255,
    )