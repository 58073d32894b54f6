"""Rectangle arithmetic: intersection and bounding union."""

from __future__ import annotations

from typing import Iterable, Optional

from .types import Point, Rect, Size


def intersection(first: Rect, second: Rect) -> Optional[Rect]:
    """Return the overlap of two rectangles, or None if they do not overlap."""
    left = max(first.top_left.x, second.top_left.x)
    top = max(first.top_left.y, second.top_left.y)
    right = min(
        first.top_left.x + first.size.width, second.top_left.x + second.size.width
    )
    bottom = min(
        first.top_left.y + first.size.height, second.top_left.y + second.size.height
    )
    width, height = right - left, bottom - top
    if width <= 0 or height <= 0:
        return None
    return Rect(Point(left, top), Size(width, height))


def union(first: Rect, second: Rect) -> Rect:
    """Return the smallest rectangle holding both rectangles."""
    result = union_all((first, second))
    assert result is not None
    return result


def union_all(rects: Iterable[Rect]) -> Optional[Rect]:
    """Return the bounding rectangle of all rectangles, or None if there are none."""
    rects = list(rects)
    if not rects:
        return None
    left = min(r.top_left.x for r in rects)
    top = min(r.top_left.y for r in rects)
    right = max(r.top_left.x + r.size.width for r in rects)
    bottom = max(r.top_left.y + r.size.height for r in rects)
    return Rect(Point(left, top), Size(right - left, bottom - top))