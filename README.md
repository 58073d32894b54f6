# eiwidgets

The core of a small widget toolkit. It is written in plain Python and needs nothing outside the standard library.

## What it provides

- **Value types** (`eiwidgets.types`)
  - `Point`, `Size`, `Rect` and `Color` are frozen dataclasses.
  - Points support `+`, `-`, negation and `as_size()`.
  - Sizes support `+`, `-`, `scale()` and `as_point()`. `scale()` rounds halves away from zero.
  - `Rect.zero()` returns the empty rectangle at the origin.
  - `Color` checks that each channel is in 0..255.
  - Enumerations: `Anchor`, `Relief`, `AxisSet`, `FontStyle`, `EventType`, `ModifierKey` and `MouseButton`. `EventType.requires_picking()` is true for mouse events.
  - `Event` and `MouseEvent` hold event data. `Event` has `has_shift()`, `has_alt()`, `has_ctrl()`, `has_meta()` and `has_modifier()`. The function `mask_has_modifier()` does the same test on a raw mask.
  - `version()` and `version_string()` give the library version.
- **Rectangle geometry** (`eiwidgets.geometry`)
  - `intersection(a, b)` returns the overlap, or `None` if the rectangles do not overlap.
  - `union(a, b)` returns the bounding rectangle of the two.
  - `union_all(rects)` returns the bounding rectangle of all of them, or `None` for an empty input.
- **Software surfaces** (`eiwidgets.surface`)
  - `Surface` is a buffer of 32-bit pixels. Its channel order and origin can be set, and an alpha index of `-1` means there is no alpha channel.
  - Methods: `rect()`, `has_alpha()`, `get_pixel()`, `set_pixel()`, `get_color()`, `set_color()` and `points()`.
  - `map_rgba()` packs a colour into a pixel value and `unmap_rgba()` unpacks it.
- **Surface copy** (`eiwidgets.draw`)
  - `copy_surface(destination, dst_rect, source, src_rect, alpha)` copies raw pixels.
  - With `alpha=True` it blends the colour channels by the source alpha instead.
  - It raises `SizeMismatchError` when the two areas differ in size.
- **Widget tree** (`eiwidgets.widget`)
  - `Screen` holds the window area and a list of invalidated rectangles. Use `invalidate()` to add one and `take_invalidated()` to read and clear them.
  - `Widget` has a parent and ordered children. It also has a requested size, a screen location and a content rectangle.
  - It offers stacking helpers (`detach_from_siblings()`, `append_to_parent()`, `raise_to_top()`) and geometry listeners, which `geometry_changed()` notifies.
- **Geometry management** (`eiwidgets.geometrymanager`, `eiwidgets.placer`)
  - `GeometryManager` and `GeometryManagerRegistry` define and register managers.
  - `run_finalize()` applies a new location. It invalidates the old and new areas, notifies the widget and lays out its managed children.
  - `unmap()` stops managing a widget.
  - `Placer` positions a widget inside its parent's content rectangle. It uses an anchor, absolute and relative coordinates, and absolute and relative sizes. Its parameters are stored in a `PlacerParams`.

## Installation

```
pip install .
```

## Examples

```python
from eiwidgets.types import Point, Size, Rect
from eiwidgets.geometry import intersection

a = Rect(Point(0, 0), Size(100, 50))
b = Rect(Point(40, 20), Size(100, 100))
print(intersection(a, b))   # Rect(top_left=Point(x=40, y=20), size=Size(width=60, height=30))
```

Placing a widget in the centre of a root widget:

```python
from eiwidgets.types import Anchor, Size
from eiwidgets.widget import Screen, Widget
from eiwidgets.placer import Placer

screen = Screen(Size(600, 400))
root = Widget("frame", None, screen, Size(600, 400))
root.screen_location = screen.rect

button = Widget("button", root, screen, Size(80, 30))
placer = Placer()
placer.place(button, anchor=Anchor.CENTER, rel_x=0.5, rel_y=0.5)
print(button.screen_location)  # Rect(top_left=Point(x=260, y=185), size=Size(width=80, height=30))
print(screen.take_invalidated())
```

For a widget that is already placed, `place()` only updates the parameters you pass. Call `placer.run(widget)` to recompute its location.

## What it does not do

This package is the layout and compositing core only. It does not include:

- drawing primitives for lines, polygons or text;
- a window or display backend;
- an event loop or callback binding;
- concrete widget classes such as frames, buttons, entries or toplevels. A `Widget` is only a tree node with a class name.

Pixels live in memory in `Surface` objects. Nothing is shown on screen.

## Running the tests

```
pip install .[test]
pytest
```