"""Crosshair configuration model.

This module defines the canonical value describing a crosshair:
- CrosshairStyle: Enum selecting the geometry algorithm
- CustomLine: A free-form segment authored in Custom mode
- CrosshairConfig: The full, validated configuration value

Configurations are frozen. Every edit goes through ``replace`` and yields a
new, re-validated value, so readers always observe a consistent snapshot.
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from reticle.exceptions import ConfigValidationError, UnknownStyleError

MAX_COLOR = 0xFFFFFF
POSITION_LIMIT = 100
FULL_TURN = 360

# Padding the overlay window keeps around the drawn crosshair
OVERLAY_PADDING = 20


class CrosshairStyle(str, Enum):
    """Geometry algorithm used to draw the crosshair.

    Values are the serialized tags used in config and preset documents.
    """

    CLASSIC = "Classic"
    DOT = "Dot"
    CIRCLE = "Circle"
    SQUARE = "Square"
    TSHAPE = "TShape"
    CUSTOM = "Custom"

    @classmethod
    def parse(cls, value: object) -> "CrosshairStyle":
        """Resolve a style tag, case-insensitively.

        Args:
            value: A CrosshairStyle or its serialized tag

        Returns:
            Matching CrosshairStyle

        Raises:
            UnknownStyleError: If the tag names no known style
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        raise UnknownStyleError(value)


def _check_int(
    name: str,
    value: object,
    minimum: int | None = None,
    maximum: int | None = None,
) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigValidationError(name, f"expected an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise ConfigValidationError(name, f"must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ConfigValidationError(name, f"must be <= {maximum}, got {value}")


def _check_bool(name: str, value: object) -> None:
    if not isinstance(value, bool):
        raise ConfigValidationError(name, f"expected a boolean, got {value!r}")


def _check_color(name: str, value: object) -> None:
    _check_int(name, value, 0, MAX_COLOR)


def _require(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ConfigValidationError(key, "missing") from None


def _as_degrees(value: object) -> object:
    # Older documents store rotation as a float
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def color_to_hex(color: int) -> str:
    """Format a 24-bit color as ``#rrggbb``."""
    return f"#{color:06x}"


def hex_to_color(text: str) -> int:
    """Parse ``#rrggbb`` (or ``rrggbb``) into a 24-bit color.

    Raises:
        ConfigValidationError: If the text is not a 6-digit hex color
    """
    digits = text[1:] if text.startswith("#") else text
    if len(digits) != 6:
        raise ConfigValidationError("color", f"expected #rrggbb, got {text!r}")
    try:
        return int(digits, 16)
    except ValueError:
        raise ConfigValidationError("color", f"expected #rrggbb, got {text!r}") from None


@dataclass(frozen=True, slots=True)
class CustomLine:
    """A single segment of a Custom crosshair.

    Coordinates are local: relative to the crosshair origin, before the
    position offset and rotation are applied.

    Attributes:
        start_x: Start X in local units
        start_y: Start Y in local units
        end_x: End X in local units
        end_y: End Y in local units
        thickness: Stroke width of this segment
        color: 24-bit RGB color of this segment
    """

    start_x: int
    start_y: int
    end_x: int
    end_y: int
    thickness: int
    color: int

    def __post_init__(self) -> None:
        for name in ("start_x", "start_y", "end_x", "end_y"):
            _check_int(f"lines.{name}", getattr(self, name))
        _check_int("lines.thickness", self.thickness, minimum=0)
        _check_color("lines.color", self.color)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with coordinate, thickness and color fields
        """
        return {
            "start_x": self.start_x,
            "start_y": self.start_y,
            "end_x": self.end_x,
            "end_y": self.end_y,
            "thickness": self.thickness,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CustomLine":
        """Deserialize from dictionary.

        Raises:
            ConfigValidationError: If a field is missing or invalid
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("lines", f"expected an object, got {data!r}")
        return cls(
            start_x=_require(data, "start_x"),
            start_y=_require(data, "start_y"),
            end_x=_require(data, "end_x"),
            end_y=_require(data, "end_y"),
            thickness=_require(data, "thickness"),
            color=_require(data, "color"),
        )


@dataclass(frozen=True, slots=True)
class CrosshairConfig:
    """Complete description of a crosshair.

    Immutable and hashable; two configurations are equal iff every field,
    including the ordered ``lines``, is equal. Construction validates all
    fields and normalizes ``rotation`` into [0, 360).

    Attributes:
        enabled: Whether the overlay is shown
        style: Geometry algorithm
        size: Arm/edge length measured from the gap boundary
        thickness: Main stroke width
        gap: Empty radius around the origin
        dot_size: Radius of the center dot
        t_length: Half-length of the T-bar (TShape only)
        color: Main 24-bit RGB color
        outline_color: Outline 24-bit RGB color
        shadow_color: Shadow 24-bit RGB color
        show_dot: Draw the center dot
        show_outline: Draw the outline layer
        shadow_enabled: Draw the shadow layer
        outline_thickness: Outline width on each side of the main stroke
        shadow_offset: Shadow displacement along both screen axes
        opacity: Global alpha in [0, 1]
        position_x: Horizontal offset from the surface center
        position_y: Vertical offset from the surface center
        rotation: Clockwise rotation in degrees
        lines: Custom segments, in paint order
    """

    enabled: bool = True
    style: CrosshairStyle = CrosshairStyle.CLASSIC
    size: int = 10
    thickness: int = 2
    gap: int = 5
    dot_size: int = 2
    t_length: int = 15
    color: int = 0x00FF00
    outline_color: int = 0x000000
    shadow_color: int = 0x000000
    show_dot: bool = True
    show_outline: bool = True
    shadow_enabled: bool = False
    outline_thickness: int = 1
    shadow_offset: int = 2
    opacity: float = 1.0
    position_x: int = 0
    position_y: int = 0
    rotation: int = 0
    lines: tuple[CustomLine, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", CrosshairStyle.parse(self.style))

        for name in ("enabled", "show_dot", "show_outline", "shadow_enabled"):
            _check_bool(name, getattr(self, name))

        for name in (
            "size",
            "thickness",
            "gap",
            "dot_size",
            "t_length",
            "outline_thickness",
            "shadow_offset",
        ):
            _check_int(name, getattr(self, name), minimum=0)

        for name in ("color", "outline_color", "shadow_color"):
            _check_color(name, getattr(self, name))

        for name in ("position_x", "position_y"):
            _check_int(name, getattr(self, name), -POSITION_LIMIT, POSITION_LIMIT)

        if isinstance(self.opacity, bool) or not isinstance(self.opacity, (int, float)):
            raise ConfigValidationError("opacity", f"expected a number, got {self.opacity!r}")
        if not 0.0 <= self.opacity <= 1.0:
            raise ConfigValidationError("opacity", f"must be within [0, 1], got {self.opacity}")
        object.__setattr__(self, "opacity", float(self.opacity))

        _check_int("rotation", self.rotation)
        object.__setattr__(self, "rotation", self.rotation % FULL_TURN)

        lines = tuple(self.lines)
        for line in lines:
            if not isinstance(line, CustomLine):
                raise ConfigValidationError("lines", f"expected CustomLine, got {line!r}")
        object.__setattr__(self, "lines", lines)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of all configuration fields, in declaration order."""
        return tuple(f.name for f in dataclasses.fields(cls))

    def replace(self, **changes: Any) -> "CrosshairConfig":
        """Return a copy with the given fields changed.

        Raises:
            ConfigValidationError: If a field name is unknown or a value is invalid
        """
        known = self.field_names()
        for name in changes:
            if name not in known:
                raise ConfigValidationError(name, "unknown field")
        return dataclasses.replace(self, **changes)

    def with_enabled(self, enabled: bool) -> "CrosshairConfig":
        """Return a copy differing only in ``enabled``."""
        return self.replace(enabled=enabled)

    def overlay_extent(self) -> int:
        """Side length of a square overlay window fitting this crosshair."""
        return (self.size + self.gap) * 2 + self.thickness * 2 + OVERLAY_PADDING

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Colors stay 24-bit integers and ``lines`` keeps its order.

        Returns:
            Dictionary keyed by the snake_case field names
        """
        return {
            "enabled": self.enabled,
            "size": self.size,
            "thickness": self.thickness,
            "gap": self.gap,
            "color": self.color,
            "outline_color": self.outline_color,
            "outline_thickness": self.outline_thickness,
            "show_dot": self.show_dot,
            "dot_size": self.dot_size,
            "show_outline": self.show_outline,
            "opacity": self.opacity,
            "style": self.style.value,
            "position_x": self.position_x,
            "position_y": self.position_y,
            "rotation": self.rotation,
            "t_length": self.t_length,
            "shadow_enabled": self.shadow_enabled,
            "shadow_color": self.shadow_color,
            "shadow_offset": self.shadow_offset,
            "lines": [line.to_dict() for line in self.lines],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CrosshairConfig":
        """Deserialize from dictionary.

        Missing fields take their default values; unknown keys are ignored.

        Args:
            data: Dictionary representation of a configuration

        Returns:
            CrosshairConfig instance

        Raises:
            ConfigValidationError: If the data is not an object or a field is invalid
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("config", f"expected an object, got {type(data).__name__}")

        known = set(cls.field_names())
        values = {key: value for key, value in data.items() if key in known}

        if "rotation" in values:
            values["rotation"] = _as_degrees(values["rotation"])
        if "lines" in values:
            raw_lines = values["lines"]
            if not isinstance(raw_lines, list):
                raise ConfigValidationError("lines", f"expected a list, got {raw_lines!r}")
            values["lines"] = tuple(CustomLine.from_dict(item) for item in raw_lines)

        return cls(**values)
