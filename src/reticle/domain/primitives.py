"""Drawable shapes produced by geometry resolution and compositing.

Two families live here:
- Primitives (Line, Arc, Rect, Dot): style-resolved shapes in local,
  untransformed coordinates centered on the crosshair origin
- PaintOp: a device-space drawing instruction with concrete color, width
  and opacity, ready for a render surface
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point. Y grows downward, as on screen.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> "Point":
        """Return this point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def rotated(self, radians: float) -> "Point":
        """Rotate clockwise on screen (y-down) about the origin."""
        if radians == 0.0:
            return self
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return Point(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )


@dataclass(frozen=True, slots=True)
class Line:
    """A stroked segment.

    Attributes:
        start: First endpoint
        end: Second endpoint
        thickness: Stroke width
        color: Per-segment color override (Custom lines), None for the
            configuration's main color
    """

    start: Point
    end: Point
    thickness: float
    color: int | None = None

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


@dataclass(frozen=True, slots=True)
class Arc:
    """A stroked full circle centered on the origin."""

    radius: float
    thickness: float


@dataclass(frozen=True, slots=True)
class Rect:
    """A stroked (not filled) square centered on the origin."""

    half_extent: float
    thickness: float

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners clockwise from the top-left."""
        h = self.half_extent
        return (Point(-h, -h), Point(h, -h), Point(h, h), Point(-h, h))


@dataclass(frozen=True, slots=True)
class Dot:
    """A filled circle centered on the origin."""

    radius: float


Primitive: TypeAlias = Line | Arc | Rect | Dot


class Layer(str, Enum):
    """Paint layers, listed back to front."""

    SHADOW = "shadow"
    OUTLINE = "outline"
    MAIN = "main"
    DOT = "dot"


class PaintKind(str, Enum):
    """How a PaintOp's points are to be drawn.

    - LINE: stroke from points[0] to points[1]
    - CIRCLE: stroke a circle of ``radius`` around points[0]
    - POLYGON: stroke the closed polygon through all points
    - FILLED_CIRCLE: fill a circle of ``radius`` around points[0]
    """

    LINE = "line"
    CIRCLE = "circle"
    POLYGON = "polygon"
    FILLED_CIRCLE = "filled_circle"


@dataclass(frozen=True, slots=True)
class PaintOp:
    """A fully resolved drawing instruction in device coordinates.

    Attributes:
        layer: Layer this op belongs to
        kind: Drawing mode
        points: Absolute device-space points
        color: 24-bit RGB color
        width: Stroke width (0 for fills)
        opacity: Alpha multiplier in [0, 1]
        radius: Radius for circle kinds, 0 otherwise
    """

    layer: Layer
    kind: PaintKind
    points: tuple[Point, ...]
    color: int
    width: float
    opacity: float
    radius: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with layer, kind, points, color, width, opacity and radius
        """
        return {
            "layer": self.layer.value,
            "kind": self.kind.value,
            "points": [list(p.to_tuple()) for p in self.points],
            "color": self.color,
            "width": self.width,
            "opacity": self.opacity,
            "radius": self.radius,
        }
