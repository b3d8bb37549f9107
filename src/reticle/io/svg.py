"""SVG output for paint sequences.

Writes the device-space PaintOps produced by the compositor as a standalone
SVG document, optionally over the preview backdrop (dark fill plus a 50px
grid) used by the designer.
"""

from pathlib import Path

from reticle.domain import PaintKind, PaintOp, color_to_hex

GRID_STEP = 50
BACKGROUND_COLOR = "#2b2b2b"
GRID_COLOR = "#ffffff"
GRID_OPACITY = 0.05


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _stroke(op: PaintOp) -> str:
    return (
        f'fill="none" stroke="{color_to_hex(op.color)}" '
        f'stroke-width="{_fmt(op.width)}" stroke-opacity="{_fmt(op.opacity)}"'
    )


def paint_op_to_element(op: PaintOp) -> str:
    """Render one PaintOp as an SVG element."""
    if op.kind is PaintKind.LINE:
        start, end = op.points
        return (
            f'<line x1="{_fmt(start.x)}" y1="{_fmt(start.y)}" '
            f'x2="{_fmt(end.x)}" y2="{_fmt(end.y)}" {_stroke(op)} />'
        )
    if op.kind is PaintKind.CIRCLE:
        center = op.points[0]
        return (
            f'<circle cx="{_fmt(center.x)}" cy="{_fmt(center.y)}" '
            f'r="{_fmt(op.radius)}" {_stroke(op)} />'
        )
    if op.kind is PaintKind.POLYGON:
        points = " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in op.points)
        return f'<polygon points="{points}" {_stroke(op)} />'
    center = op.points[0]
    return (
        f'<circle cx="{_fmt(center.x)}" cy="{_fmt(center.y)}" r="{_fmt(op.radius)}" '
        f'fill="{color_to_hex(op.color)}" fill-opacity="{_fmt(op.opacity)}" />'
    )


def _backdrop(width: int, height: int) -> list[str]:
    parts = [f'<rect width="{width}" height="{height}" fill="{BACKGROUND_COLOR}" />']
    for x in range(0, width, GRID_STEP):
        parts.append(
            f'<line x1="{x}" y1="0" x2="{x}" y2="{height}" stroke="{GRID_COLOR}" '
            f'stroke-opacity="{GRID_OPACITY}" stroke-width="1" />'
        )
    for y in range(0, height, GRID_STEP):
        parts.append(
            f'<line x1="0" y1="{y}" x2="{width}" y2="{y}" stroke="{GRID_COLOR}" '
            f'stroke-opacity="{GRID_OPACITY}" stroke-width="1" />'
        )
    return parts


def paint_ops_to_svg(
    ops: tuple[PaintOp, ...] | list[PaintOp],
    width: int,
    height: int,
    background: bool = False,
) -> str:
    """Build an SVG document from a paint sequence.

    Args:
        ops: PaintOps in paint order (back to front)
        width: Document width in device units
        height: Document height in device units
        background: Draw the preview backdrop under the crosshair

    Returns:
        SVG document text
    """
    body = _backdrop(width, height) if background else []
    body.extend(paint_op_to_element(op) for op in ops)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        *(f"  {element}" for element in body),
        "</svg>",
    ]
    return "\n".join(lines) + "\n"


def write_svg(
    path: Path,
    ops: tuple[PaintOp, ...] | list[PaintOp],
    width: int,
    height: int,
    background: bool = False,
) -> None:
    """Write a paint sequence to an SVG file."""
    path.write_text(paint_ops_to_svg(ops, width, height, background), encoding="utf-8")
