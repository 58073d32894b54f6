"""Surface drawing operations."""

from __future__ import annotations

from itertools import product
from typing import Optional

from .surface import Surface
from .types import Point, Rect, Size


class SizeMismatchError(ValueError):
    """Raised when the source and destination areas of a copy differ in size."""

    def __init__(self, source_size: Size, destination_size: Size) -> None:
        super().__init__(
            f"source area {source_size} and destination area {destination_size} "
            "have different sizes"
        )
        self.source_size = source_size
        self.destination_size = destination_size


def _blend(dest_value: int, src_value: int, indices: tuple[int, int, int, int]) -> int:
    red, green, blue, alpha_index = indices
    dest = bytearray(dest_value.to_bytes(4, "little"))
    src = src_value.to_bytes(4, "little")
    weight = src[alpha_index] if alpha_index != -1 else 255
    for channel in (red, green, blue):
        dest[channel] = ((255 - weight) * dest[channel] + weight * src[channel]) // 255
    return int.from_bytes(dest, "little")


def copy_surface(
    destination: Surface,
    dst_rect: Optional[Rect],
    source: Surface,
    src_rect: Optional[Rect],
    alpha: bool,
) -> None:
    """Copy pixels from source to destination.

    A missing rectangle means the whole surface, anchored at (0, 0). Both areas
    must have the same size, otherwise SizeMismatchError is raised. With alpha,
    the colour channels are blended by the source alpha using the source's
    channel order and the destination's alpha byte is kept; without alpha, the
    raw source pixels are copied.
    """
    src_size = src_rect.size if src_rect is not None else source.size
    dst_size = dst_rect.size if dst_rect is not None else destination.size
    if src_size != dst_size:
        raise SizeMismatchError(src_size, dst_size)

    dst_corner = dst_rect.top_left if dst_rect is not None else Point(0, 0)
    src_corner = src_rect.top_left if src_rect is not None else Point(0, 0)
    indices = source.channel_indices

    for row, column in product(range(dst_size.height), range(dst_size.width)):
        offset = Point(column, row)
        src_point = src_corner + offset
        dst_point = dst_corner + offset
        src_value = source.get_pixel(src_point)
        if alpha:
            value = _blend(destination.get_pixel(dst_point), src_value, indices)
        else:
            value = src_value
        destination.set_pixel(dst_point, value)