"""Compositing: local primitives to a device-space paint sequence.

Layers are emitted back to front, each only when its toggle is set:
1. SHADOW: every primitive in ``shadow_color``, shifted by
   (+shadow_offset, +shadow_offset) after rotation
2. OUTLINE: every primitive in ``outline_color``, widened by
   ``outline_thickness`` on each side
3. MAIN: every primitive in ``color`` (or its own Custom line color)
4. DOT: a filled circle of ``dot_size`` at the origin

The shadow offset is applied in screen space and is not rotated with the
shape: the light source stays fixed relative to the screen.
"""

import math

from reticle.core.geometry import resolve
from reticle.domain import CrosshairConfig, Primitive
from reticle.domain.primitives import (
    Arc,
    Dot,
    Layer,
    Line,
    PaintKind,
    PaintOp,
    Point,
    Rect,
)

_ORIGIN = Point(0.0, 0.0)


class _DeviceTransform:
    """Rotate about the crosshair origin, then translate to device space."""

    def __init__(self, config: CrosshairConfig, center: tuple[float, float]) -> None:
        self.origin_x = center[0] + config.position_x
        self.origin_y = center[1] + config.position_y
        self.radians = math.radians(config.rotation)

    def apply(self, point: Point, shift: float = 0.0) -> Point:
        return point.rotated(self.radians).translated(
            self.origin_x + shift, self.origin_y + shift
        )


def _paint_primitive(
    primitive: Primitive,
    transform: _DeviceTransform,
    layer: Layer,
    color: int,
    extra_width: float,
    shift: float,
    opacity: float,
) -> PaintOp:
    if isinstance(primitive, Line):
        return PaintOp(
            layer=layer,
            kind=PaintKind.LINE,
            points=(
                transform.apply(primitive.start, shift),
                transform.apply(primitive.end, shift),
            ),
            color=color,
            width=primitive.thickness + extra_width,
            opacity=opacity,
        )
    if isinstance(primitive, Arc):
        return PaintOp(
            layer=layer,
            kind=PaintKind.CIRCLE,
            points=(transform.apply(_ORIGIN, shift),),
            color=color,
            width=primitive.thickness + extra_width,
            opacity=opacity,
            radius=primitive.radius,
        )
    if isinstance(primitive, Rect):
        return PaintOp(
            layer=layer,
            kind=PaintKind.POLYGON,
            points=tuple(transform.apply(corner, shift) for corner in primitive.corners()),
            color=color,
            width=primitive.thickness + extra_width,
            opacity=opacity,
        )
    if isinstance(primitive, Dot):
        return PaintOp(
            layer=layer,
            kind=PaintKind.FILLED_CIRCLE,
            points=(transform.apply(_ORIGIN, shift),),
            color=color,
            width=0.0,
            opacity=opacity,
            radius=primitive.radius + extra_width / 2,
        )
    raise TypeError(f"Unsupported primitive: {primitive!r}")


def composite(
    config: CrosshairConfig,
    primitives: tuple[Primitive, ...] | list[Primitive],
    center: tuple[float, float] = (0.0, 0.0),
) -> tuple[PaintOp, ...]:
    """Composite resolved primitives into an ordered paint sequence.

    Args:
        config: Configuration supplying colors, toggles and transform
        primitives: Output of ``resolve(config)``
        center: Render surface center in device coordinates

    Returns:
        PaintOps back to front; every op carries ``config.opacity``
    """
    transform = _DeviceTransform(config, center)
    opacity = config.opacity
    ops: list[PaintOp] = []

    if config.shadow_enabled:
        offset = float(config.shadow_offset)
        ops.extend(
            _paint_primitive(p, transform, Layer.SHADOW, config.shadow_color, 0.0, offset, opacity)
            for p in primitives
        )

    if config.show_outline:
        extra = float(config.outline_thickness * 2)
        ops.extend(
            _paint_primitive(p, transform, Layer.OUTLINE, config.outline_color, extra, 0.0, opacity)
            for p in primitives
        )

    for p in primitives:
        color = p.color if isinstance(p, Line) and p.color is not None else config.color
        ops.append(_paint_primitive(p, transform, Layer.MAIN, color, 0.0, 0.0, opacity))

    if config.show_dot:
        ops.append(
            _paint_primitive(
                Dot(radius=float(config.dot_size)),
                transform,
                Layer.DOT,
                config.color,
                0.0,
                0.0,
                opacity,
            )
        )

    return tuple(ops)


def render(
    config: CrosshairConfig,
    center: tuple[float, float] = (0.0, 0.0),
) -> tuple[PaintOp, ...]:
    """Resolve and composite a configuration in one step."""
    return composite(config, resolve(config), center)


def layers_present(ops: tuple[PaintOp, ...] | list[PaintOp]) -> list[Layer]:
    """Distinct layers in paint order."""
    seen: list[Layer] = []
    for op in ops:
        if op.layer not in seen:
            seen.append(op.layer)
    return seen
