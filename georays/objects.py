"""Geometry, colours and level objects shared by the game logic."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def contains(self, x: float, y: float) -> bool:
        """Return True when the point lies inside; the far edges are exclusive."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
GRAY = Color(130, 130, 130)
LIME = Color(0, 158, 47)
MAGENTA = Color(255, 0, 255)
RED = Color(230, 41, 55)
CYAN = Color(0, 255, 255)

# Object id of the colour trigger, the only object carrying extra properties.
COLOR_TRIGGER_ID = 23


@dataclass
class LevelObject:
    """One object placed on the level grid."""

    x: int
    y: int
    id: int
    rotation: int = 0
    no_touch: int = 0
    hide: int = 0
    selected: bool = False
    properties: list[str] | None = None