"""Widget tree and the screen it is displayed on."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .types import Point, Rect, Size

TOPLEVEL_CLASS = "toplevel"


class Screen:
    """The root window area and its list of rectangles waiting to be redrawn."""

    def __init__(self, size: Size) -> None:
        self.size = size
        self.rect = Rect(Point(0, 0), size)
        self._invalidated: list[Rect] = []

    @property
    def invalidated(self) -> tuple[Rect, ...]:
        """The rectangles waiting for an update, most recent first."""
        return tuple(self._invalidated)

    def invalidate(self, rect: Optional[Rect]) -> None:
        """Schedule a rectangle for redrawing; None is ignored."""
        if rect is not None:
            self._invalidated.insert(0, rect)

    def take_invalidated(self) -> list[Rect]:
        """Return the pending rectangles, most recent first, and clear the list."""
        pending, self._invalidated = self._invalidated, []
        return pending


class Widget:
    """A node of the widget tree with its geometry state.

    A widget is created as the last child of its parent. It is displayed once a
    geometry manager has attached parameters to it (``geom_params``).
    """

    def __init__(
        self,
        class_name: str,
        parent: Optional[Widget] = None,
        screen: Optional[Screen] = None,
        requested_size: Optional[Size] = None,
    ) -> None:
        self.class_name = class_name
        self.parent = parent
        if screen is None and parent is not None:
            screen = parent.screen
        self.screen = screen
        self.requested_size = requested_size if requested_size is not None else Size()
        self.screen_location = Rect.zero()
        self._content_rect: Optional[Rect] = None
        self.geom_params: Any = None
        self.user_data: Any = None
        self.callback: Optional[Callable[..., bool]] = None
        self.skip_next_invalidate = False
        self.geometry_listeners: list[Callable[[Widget], None]] = []
        self._children: list[Widget] = []
        if parent is not None:
            parent._children.append(self)

    def __repr__(self) -> str:
        return f"Widget({self.class_name!r}, screen_location={self.screen_location!r})"

    @property
    def content_rect(self) -> Rect:
        """Where children are drawn; follows the screen location unless set."""
        if self._content_rect is None:
            return self.screen_location
        return self._content_rect

    @content_rect.setter
    def content_rect(self, rect: Optional[Rect]) -> None:
        self._content_rect = rect

    @property
    def has_own_content_rect(self) -> bool:
        """Tell whether the content rectangle differs from the screen location."""
        return self._content_rect is not None

    def children(self) -> list[Widget]:
        """Return the children, from first (bottom) to last (top)."""
        return list(self._children)

    def is_displayed(self) -> bool:
        """Tell whether a geometry manager currently manages this widget."""
        return self.geom_params is not None

    def detach_from_siblings(self) -> None:
        """Remove this widget from its parent's children; the parent link is kept."""
        if self.parent is not None and self in self.parent._children:
            self.parent._children.remove(self)

    def append_to_parent(self) -> None:
        """Put this widget last among its parent's children."""
        if self.parent is None:
            raise ValueError("the root widget has no parent to append to")
        if self in self.parent._children:
            raise ValueError(f"{self!r} is already a child of its parent")
        self.parent._children.append(self)

    def raise_to_top(self) -> bool:
        """Bring every toplevel from this widget up to the root to the front.

        Returns True if the order of some children changed.
        """
        changed = False
        node: Optional[Widget] = self
        while node is not None and node.parent is not None:
            if node.class_name == TOPLEVEL_CLASS and node.parent._children[-1] is not node:
                node.detach_from_siblings()
                node.append_to_parent()
                changed = True
            node = node.parent
        return changed

    def geometry_changed(self) -> None:
        """Notify the listeners that the screen location has changed."""
        for listener in list(self.geometry_listeners):
            listener(self)