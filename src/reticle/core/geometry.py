"""Geometry resolution: configuration to local-space primitives.

This module turns a CrosshairConfig into the ordered primitives that make up
its shape, one branch per style:
- Classic: four arms from the gap boundary outward
- Dot: nothing (the dot is its own compositor layer)
- Circle / Square: a ring or box, with arms when there is a gap
- TShape: a bar above the origin with a stem, plus side and bottom arms
  when there is a gap
- Custom: the authored line list

Coordinates are local: origin at (0, 0), y grows downward, no rotation or
translation. Resolution is pure and deterministic.
"""

from collections.abc import Callable

from reticle.domain import CrosshairConfig, CrosshairStyle, Primitive
from reticle.domain.primitives import Arc, Line, Point, Rect
from reticle.exceptions import UnknownStyleError


def _line(x1: float, y1: float, x2: float, y2: float, thickness: float) -> Line:
    return Line(Point(float(x1), float(y1)), Point(float(x2), float(y2)), float(thickness))


def _nonempty(primitives: list[Primitive]) -> list[Primitive]:
    """Drop zero-length lines and zero-radius shapes.

    Zero thickness is kept: such primitives are valid, just invisible.
    """
    kept: list[Primitive] = []
    for primitive in primitives:
        if isinstance(primitive, Line) and primitive.length == 0.0:
            continue
        if isinstance(primitive, Arc) and primitive.radius == 0.0:
            continue
        if isinstance(primitive, Rect) and primitive.half_extent == 0.0:
            continue
        kept.append(primitive)
    return kept


def classic_arms(
    config: CrosshairConfig,
    top: bool = True,
) -> list[Primitive]:
    """Build the cardinal arms, each spanning ``gap`` to ``gap + size``.

    Args:
        config: Source configuration
        top: Include the top arm (TShape replaces it with its stem)

    Returns:
        Arms in top, bottom, left, right order
    """
    near = config.gap
    far = config.gap + config.size
    t = config.thickness

    arms: list[Primitive] = []
    if top:
        arms.append(_line(0, -far, 0, -near, t))
    arms.append(_line(0, near, 0, far, t))
    arms.append(_line(-far, 0, -near, 0, t))
    arms.append(_line(near, 0, far, 0, t))
    return arms


def _resolve_classic(config: CrosshairConfig) -> list[Primitive]:
    return classic_arms(config)


def _resolve_dot(config: CrosshairConfig) -> list[Primitive]:  # noqa: ARG001
    return []


def _resolve_circle(config: CrosshairConfig) -> list[Primitive]:
    primitives: list[Primitive] = [
        Arc(radius=float(config.size + config.gap), thickness=float(config.thickness))
    ]
    if config.gap > 0:
        primitives.extend(classic_arms(config))
    return primitives


def _resolve_square(config: CrosshairConfig) -> list[Primitive]:
    primitives: list[Primitive] = [
        Rect(half_extent=float(config.size + config.gap), thickness=float(config.thickness))
    ]
    if config.gap > 0:
        primitives.extend(classic_arms(config))
    return primitives


def _resolve_tshape(config: CrosshairConfig) -> list[Primitive]:
    bar_y = config.gap + config.size
    if bar_y == 0:
        # A bar through the origin with no stem is not a T
        return []

    t = config.thickness
    primitives: list[Primitive] = [
        _line(-config.t_length, -bar_y, config.t_length, -bar_y, t),
        _line(0, -bar_y, 0, -config.gap, t),
    ]
    if config.gap > 0:
        primitives.extend(classic_arms(config, top=False))
    return primitives


def _resolve_custom(config: CrosshairConfig) -> list[Primitive]:
    return [
        Line(
            start=Point(float(line.start_x), float(line.start_y)),
            end=Point(float(line.end_x), float(line.end_y)),
            thickness=float(line.thickness),
            color=line.color,
        )
        for line in config.lines
    ]


_RESOLVERS: dict[CrosshairStyle, Callable[[CrosshairConfig], list[Primitive]]] = {
    CrosshairStyle.CLASSIC: _resolve_classic,
    CrosshairStyle.DOT: _resolve_dot,
    CrosshairStyle.CIRCLE: _resolve_circle,
    CrosshairStyle.SQUARE: _resolve_square,
    CrosshairStyle.TSHAPE: _resolve_tshape,
    CrosshairStyle.CUSTOM: _resolve_custom,
}


def resolve(config: CrosshairConfig) -> tuple[Primitive, ...]:
    """Resolve a configuration into its ordered local-space primitives.

    Custom lines are resolved verbatim, one primitive per entry. For the
    parametric styles, degenerate shapes (zero length or zero radius) are
    omitted, so ``gap == size == 0`` yields nothing.

    Args:
        config: Validated crosshair configuration

    Returns:
        Primitives in paint order

    Raises:
        UnknownStyleError: If the style has no resolver

    Examples:
        >>> prims = resolve(CrosshairConfig(size=8, thickness=2, gap=4))
        >>> [p.length for p in prims]
        [8.0, 8.0, 8.0, 8.0]
    """
    try:
        resolver = _RESOLVERS[config.style]
    except KeyError:
        raise UnknownStyleError(config.style) from None

    primitives = resolver(config)
    if config.style is CrosshairStyle.CUSTOM:
        return tuple(primitives)
    return tuple(_nonempty(primitives))
