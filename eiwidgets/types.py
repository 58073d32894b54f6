"""Basic value types: points, sizes, rectangles, colours, enumerations and events."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, Optional

VERSION_MAJOR = 3
VERSION_RELEASE = 1
VERSION_SERIAL = 0
VERSION = "3.1.0"


def version_string() -> str:
    """Return the library version as a dotted string."""
    return VERSION


def version() -> tuple[int, int, int]:
    """Return the library version as (major, release, serial)."""
    return VERSION_MAJOR, VERSION_RELEASE, VERSION_SERIAL


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Point:
    """A 2-D point with integer coordinates; y grows downwards."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def as_size(self) -> Size:
        """Return a size with the same components."""
        return Size(self.x, self.y)


@dataclass(frozen=True)
class Size:
    """A 2-D size with integer dimensions."""

    width: int = 0
    height: int = 0

    def __add__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width - other.width, self.height - other.height)

    def scale(self, factor: float) -> Size:
        """Return this size scaled by factor, rounding halves away from zero."""
        return Size(
            _round_half_away(self.width * factor),
            _round_half_away(self.height * factor),
        )

    def as_point(self) -> Point:
        """Return a point with the same components."""
        return Point(self.width, self.height)


@dataclass(frozen=True)
class Rect:
    """A rectangle defined by its top-left corner and its size."""

    top_left: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @staticmethod
    def zero() -> Rect:
        """Return the rectangle at (0, 0) of size (0, 0)."""
        return Rect(Point(0, 0), Size(0, 0))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels; alpha 255 is opaque."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range 0..255: {value}")


DEFAULT_BACKGROUND_COLOR = Color(0xA0, 0xA0, 0xA0, 0xFF)
FONT_DEFAULT_SIZE = 22
FONT_DEFAULT_COLOR = Color(0x00, 0x00, 0x00, 0xFF)
DEFAULT_FONT_FILENAME = "misc/font.ttf"


class Anchor(IntEnum):
    """A particular point of a rectangle."""

    NONE = 0
    CENTER = 1
    NORTH = 2
    NORTHEAST = 3
    EAST = 4
    SOUTHEAST = 5
    SOUTH = 6
    SOUTHWEST = 7
    WEST = 8
    NORTHWEST = 9


class Relief(IntEnum):
    """Type of border relief."""

    NONE = 0
    RAISED = 1
    SUNKEN = 2


class AxisSet(IntEnum):
    """A set of axes."""

    NONE = 0
    X = 1
    Y = 2
    BOTH = 3


class FontStyle(IntFlag):
    """Font style flags."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4
    STRIKETHROUGH = 8


class EventType(IntEnum):
    """The kinds of events."""

    NONE = 0
    APP = 1
    CLOSE = 2
    EXPOSED = 3
    KEYDOWN = 4
    KEYUP = 5
    TEXT_INPUT = 6
    MOUSE_BUTTONDOWN = 7
    MOUSE_BUTTONUP = 8
    MOUSE_MOVE = 9
    MOUSE_WHEEL = 10

    def requires_picking(self) -> bool:
        """Mouse events need the widget under the pointer to be picked."""
        return self >= EventType.MOUSE_BUTTONDOWN


class ModifierKey(IntEnum):
    """Modifier keys; the value is the bit index in a modifier mask."""

    SHIFT_LEFT = 0
    ALT_LEFT = 1
    META_LEFT = 2
    CTRL_LEFT = 3
    SHIFT_RIGHT = 4
    ALT_RIGHT = 5
    META_RIGHT = 6
    CTRL_RIGHT = 7


class MouseButton(IntEnum):
    """Mouse buttons."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


def mask_has_modifier(mask: int, modifier: ModifierKey) -> bool:
    """Tell whether the modifier key is marked as pressed in the mask."""
    return bool(mask & (1 << int(modifier)))


@dataclass
class MouseEvent:
    """Parameters of mouse-related events."""

    where: Point = field(default_factory=Point)
    button: MouseButton = MouseButton.LEFT
    wheel: float = 0.0


@dataclass
class Event:
    """An event with its type, modifier state and type-specific parameters."""

    type: EventType = EventType.NONE
    modifier_mask: int = 0
    text: Optional[str] = None
    key_code: Optional[int] = None
    mouse: Optional[MouseEvent] = None
    user_param: Any = None

    def has_modifier(self, modifier: ModifierKey) -> bool:
        """Tell whether a given modifier key was pressed."""
        return mask_has_modifier(self.modifier_mask, modifier)

    def _either(self, left: ModifierKey, right: ModifierKey) -> bool:
        return self.has_modifier(left) or self.has_modifier(right)

    def has_shift(self) -> bool:
        """Tell whether either shift key was pressed."""
        return self._either(ModifierKey.SHIFT_LEFT, ModifierKey.SHIFT_RIGHT)

    def has_alt(self) -> bool:
        """Tell whether either alt key was pressed."""
        return self._either(ModifierKey.ALT_LEFT, ModifierKey.ALT_RIGHT)

    def has_ctrl(self) -> bool:
        """Tell whether either control key was pressed."""
        return self._either(ModifierKey.CTRL_LEFT, ModifierKey.CTRL_RIGHT)

    def has_meta(self) -> bool:
        """Tell whether either meta key was pressed."""
        return self._either(ModifierKey.META_LEFT, ModifierKey.META_RIGHT)