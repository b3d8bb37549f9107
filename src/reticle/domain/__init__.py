"""Domain models for reticle.

This module contains the value types shared by the resolver, compositor,
authoring and preset components. All models are:

- Immutable (frozen dataclasses); edits produce new values
- Serializable to plain dictionaries for storage and export
- Compared structurally, field by field

Key classes:
- CrosshairConfig: The validated crosshair configuration
- CustomLine: A segment of a Custom crosshair
- Preset: A named, identified configuration snapshot
- Line, Arc, Rect, Dot: Local-space primitives
- PaintOp: A device-space drawing instruction
"""

from reticle.domain.crosshair import (
    CrosshairConfig,
    CrosshairStyle,
    CustomLine,
    color_to_hex,
    hex_to_color,
)
from reticle.domain.preset import Preset, utc_now
from reticle.domain.primitives import (
    Arc,
    Dot,
    Layer,
    Line,
    PaintKind,
    PaintOp,
    Point,
    Primitive,
    Rect,
)

__all__: list[str] = [
    # Enums
    "CrosshairStyle",
    "Layer",
    "PaintKind",
    # Configuration
    "CrosshairConfig",
    "CustomLine",
    "Preset",
    # Geometry
    "Arc",
    "Dot",
    "Line",
    "PaintOp",
    "Point",
    "Primitive",
    "Rect",
    # Helpers
    "color_to_hex",
    "hex_to_color",
    "utc_now",
]
