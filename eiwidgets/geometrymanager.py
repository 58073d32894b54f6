"""Geometry managers: registration, geometry finalisation and unmapping."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from .geometry import intersection
from .types import Rect
from .widget import Widget

RunFunc = Callable[[Widget], None]
ReleaseFunc = Callable[[Widget], None]


class GeometryManager:
    """A named geometry manager.

    ``runfunc`` computes the geometry of a widget and must end by calling
    :func:`run_finalize`. ``releasefunc`` is called when a widget stops being
    managed; it may be omitted when nothing needs recomputing. Subclasses may
    override :meth:`run` and :meth:`release` instead of passing functions.
    """

    def __init__(
        self,
        name: str,
        runfunc: Optional[RunFunc] = None,
        releasefunc: Optional[ReleaseFunc] = None,
    ) -> None:
        self.name = name
        self._runfunc = runfunc
        self._releasefunc = releasefunc

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def run(self, widget: Widget) -> None:
        """Compute the geometry of widget."""
        if self._runfunc is None:
            raise TypeError(f"geometry manager {self.name!r} has no run function")
        self._runfunc(widget)

    def release(self, widget: Widget) -> None:
        """Forget widget; recompute other widgets if its absence matters."""
        if self._releasefunc is not None:
            self._releasefunc(widget)


class GeometryManagerRegistry:
    """The registered geometry managers, most recently registered first."""

    def __init__(self) -> None:
        self._managers: list[GeometryManager] = []

    def __iter__(self) -> Iterator[GeometryManager]:
        return iter(list(self._managers))

    def __len__(self) -> int:
        return len(self._managers)

    def __contains__(self, name: object) -> bool:
        return any(manager.name == name for manager in self._managers)

    def register(self, manager: GeometryManager) -> None:
        """Add a manager at the head of the registry."""
        self._managers.insert(0, manager)

    def from_name(self, name: str) -> Optional[GeometryManager]:
        """Return the first manager with this name, or None."""
        return next((m for m in self._managers if m.name == name), None)

    def remove(self, name: str) -> Optional[GeometryManager]:
        """Remove the first manager with this name and return it, or None."""
        manager = self.from_name(name)
        if manager is not None:
            self._managers.remove(manager)
        return manager


def _manager_of(widget: Widget) -> Optional[GeometryManager]:
    params = widget.geom_params
    if params is None:
        return None
    return getattr(params, "manager", None)


def run_finalize(widget: Widget, new_location: Rect) -> None:
    """Apply a newly computed screen location to widget.

    If the location changed: schedule a redraw of the old and new locations
    (unless the widget is being laid out as part of its parent's change),
    store it, notify the widget and recompute the geometry of its managed
    children.
    """
    if widget.screen_location == new_location:
        return

    if widget.skip_next_invalidate:
        widget.skip_next_invalidate = False
    elif widget.screen is not None:
        screen = widget.screen
        screen.invalidate(intersection(widget.screen_location, screen.rect))
        screen.invalidate(intersection(new_location, screen.rect))

    widget.screen_location = new_location
    widget.geometry_changed()

    for child in widget.children():
        manager = _manager_of(child)
        if manager is not None:
            child.skip_next_invalidate = True
            manager.run(child)


def unmap(widget: Widget) -> None:
    """Stop managing widget: release it and reset its geometry.

    Does nothing to the geometry parameters of a widget that is not managed.
    """
    manager = _manager_of(widget)
    if widget.geom_params is not None:
        if manager is not None:
            manager.release(widget)
        widget.geom_params = None
    widget.screen_location = Rect.zero()
    widget.content_rect = None