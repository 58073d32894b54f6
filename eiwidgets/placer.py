"""The placer geometry manager: absolute and relative placement within the parent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .geometrymanager import GeometryManager, run_finalize, unmap
from .types import Anchor, Point, Rect, Size
from .widget import Widget

PLACER_NAME = "placer"


def _half(value: int) -> int:
    """Halve an integer, truncating towards zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


# For each anchor: how far to shift the top-left corner, as a function of the size.
_ANCHOR_SHIFTS = {
    Anchor.NONE: lambda w, h: (0, 0),
    Anchor.NORTHWEST: lambda w, h: (0, 0),
    Anchor.NORTH: lambda w, h: (_half(w), 0),
    Anchor.NORTHEAST: lambda w, h: (w, 0),
    Anchor.WEST: lambda w, h: (0, _half(h)),
    Anchor.CENTER: lambda w, h: (_half(w), _half(h)),
    Anchor.EAST: lambda w, h: (w, _half(h)),
    Anchor.SOUTHWEST: lambda w, h: (0, h),
    Anchor.SOUTH: lambda w, h: (_half(w), h),
    Anchor.SOUTHEAST: lambda w, h: (w, h),
}


@dataclass
class PlacerParams:
    """Placement parameters of a widget managed by the placer.

    ``is_reconfigurable`` is True while the width and height come from the
    requested or default size rather than from explicit values.
    """

    manager: GeometryManager
    anchor: Anchor = Anchor.NORTHWEST
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    rel_x: float = 0.0
    rel_y: float = 0.0
    rel_width: float = 0.0
    rel_height: float = 0.0
    is_reconfigurable: bool = True


class Placer(GeometryManager):
    """Places widgets relative to their parent's content rectangle."""

    def __init__(self) -> None:
        super().__init__(PLACER_NAME)

    def run(self, widget: Widget) -> None:
        """Compute the screen location of widget from its placer parameters."""
        params = widget.geom_params
        if not isinstance(params, PlacerParams):
            return
        if widget.parent is None:
            raise ValueError("the placer cannot place a widget without a parent")
        parent_rect = widget.parent.content_rect

        width = int(params.width + params.rel_width * parent_rect.size.width)
        height = int(params.height + params.rel_height * parent_rect.size.height)
        x = (
            parent_rect.top_left.x
            + params.x
            + int(parent_rect.size.width * params.rel_x)
        )
        y = (
            parent_rect.top_left.y
            + params.y
            + int(parent_rect.size.height * params.rel_y)
        )
        shift_x, shift_y = _ANCHOR_SHIFTS[Anchor(params.anchor)](width, height)
        new_location = Rect(Point(x - shift_x, y - shift_y), Size(width, height))
        run_finalize(widget, new_location)

    def release(self, widget: Widget) -> None:
        """Forget widget; the placer has nothing else to recompute."""

    def place(
        self,
        widget: Widget,
        anchor: Optional[Anchor] = None,
        x: Optional[int] = None,
        y: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        rel_x: Optional[float] = None,
        rel_y: Optional[float] = None,
        rel_width: Optional[float] = None,
        rel_height: Optional[float] = None,
    ) -> None:
        """Configure the placement of widget.

        A widget not yet managed by the placer gets default values for the
        missing arguments and its geometry is computed at once. For a widget
        already managed, only the given arguments replace the stored ones; the
        geometry is recomputed on the next :meth:`run`.
        """
        if widget.parent is None:
            raise ValueError("the root widget cannot be placed")

        params = widget.geom_params
        if params is not None and (
            not isinstance(params, PlacerParams) or params.manager.name != self.name
        ):
            unmap(widget)
            params = None

        if params is None:
            widget.geom_params = self._new_params(
                widget, anchor, x, y, width, height, rel_x, rel_y, rel_width, rel_height
            )
            self.run(widget)
            return

        if anchor is not None:
            params.anchor = Anchor(anchor)
        if x is not None:
            params.x = x
        if y is not None:
            params.y = y
        if rel_y is not None:
            params.rel_y = rel_y
        if rel_x is not None:
            params.rel_x = rel_x
        if rel_width is not None:
            params.is_reconfigurable = False
            params.rel_width = rel_width
        if rel_height is not None:
            params.is_reconfigurable = False
            params.rel_height = rel_height
        if width is not None:
            params.is_reconfigurable = False
            params.width = width
        if height is not None:
            params.is_reconfigurable = False
            params.height = height

    def _new_params(
        self,
        widget: Widget,
        anchor: Optional[Anchor],
        x: Optional[int],
        y: Optional[int],
        width: Optional[int],
        height: Optional[int],
        rel_x: Optional[float],
        rel_y: Optional[float],
        rel_width: Optional[float],
        rel_height: Optional[float],
    ) -> PlacerParams:
        assert widget.parent is not None
        params = PlacerParams(
            manager=self,
            anchor=Anchor(anchor) if anchor is not None else Anchor.NORTHWEST,
            x=x if x is not None else 0,
            y=y if y is not None else 0,
            rel_x=rel_x if rel_x is not None else 0.0,
            rel_y=rel_y if rel_y is not None else 0.0,
            rel_width=rel_width if rel_width is not None else 0.0,
            rel_height=rel_height if rel_height is not None else 0.0,
        )
        requested = widget.requested_size
        default = widget.parent.content_rect.size

        if width is not None:
            params.width = width
            params.is_reconfigurable = False
        elif rel_width is not None:
            params.width = 0
            params.is_reconfigurable = False
        else:
            params.width = requested.width or default.width

        if height is not None:
            params.height = height
            params.is_reconfigurable = False
        elif rel_height is not None:
            params.height = 0
            params.is_reconfigurable = False
        else:
            params.height = requested.height or default.height

        return params