"""Unit tests for compositing."""

import pytest

from reticle.core.compositor import composite, layers_present, render
from reticle.core.geometry import resolve
from reticle.domain import (
    CrosshairConfig,
    CrosshairStyle,
    CustomLine,
    Layer,
    PaintKind,
    Point,
)


@pytest.fixture
def plain() -> CrosshairConfig:
    """Classic crosshair with only the main layer enabled."""
    return CrosshairConfig(
        size=8,
        thickness=2,
        gap=4,
        show_outline=False,
        show_dot=False,
        shadow_enabled=False,
    )


class TestLayers:
    """Tests for layer gating and ordering."""

    def test_main_only(self, plain: CrosshairConfig) -> None:
        ops = render(plain)
        assert len(ops) == 4
        assert layers_present(ops) == [Layer.MAIN]
        assert all(op.color == plain.color for op in ops)

    def test_layer_order(self, plain: CrosshairConfig) -> None:
        """Test shadow, outline, main, dot are painted back to front."""
        config = plain.replace(shadow_enabled=True, show_outline=True, show_dot=True)
        ops = render(config)
        assert layers_present(ops) == [Layer.SHADOW, Layer.OUTLINE, Layer.MAIN, Layer.DOT]
        assert len(ops) == 4 + 4 + 4 + 1
        assert ops[-1].layer is Layer.DOT

    def test_outline_disabled_emits_no_outline(self, plain: CrosshairConfig) -> None:
        config = plain.replace(show_dot=True, shadow_enabled=True)
        ops = render(config)
        assert all(op.layer is not Layer.OUTLINE for op in ops)
        assert len(ops) == 9

    def test_outline_width(self, plain: CrosshairConfig) -> None:
        """Test outline width is thickness plus twice the outline thickness."""
        config = plain.replace(show_outline=True, outline_thickness=3, outline_color=0x111111)
        outline = [op for op in render(config) if op.layer is Layer.OUTLINE]
        assert len(outline) == 4
        assert all(op.width == 2 + 3 * 2 for op in outline)
        assert all(op.color == 0x111111 for op in outline)

    def test_shadow_uses_main_thickness(self, plain: CrosshairConfig) -> None:
        config = plain.replace(shadow_enabled=True, shadow_color=0x222222)
        shadow = [op for op in render(config) if op.layer is Layer.SHADOW]
        assert all(op.width == 2 for op in shadow)
        assert all(op.color == 0x222222 for op in shadow)

    def test_dot(self, plain: CrosshairConfig) -> None:
        """Test the dot is a filled circle at the origin in the main color."""
        config = plain.replace(show_dot=True, dot_size=3, position_x=10, position_y=-20)
        dot = render(config, center=(200, 200))[-1]
        assert dot.kind is PaintKind.FILLED_CIRCLE
        assert dot.radius == 3
        assert dot.points == (Point(210, 180),)
        assert dot.color == config.color

    def test_dot_style_without_dot_is_empty(self) -> None:
        config = CrosshairConfig(style=CrosshairStyle.DOT, show_dot=False)
        assert render(config) == ()

    def test_opacity_on_every_op(self, plain: CrosshairConfig) -> None:
        config = plain.replace(opacity=0.4, shadow_enabled=True, show_outline=True, show_dot=True)
        assert {op.opacity for op in render(config)} == {0.4}


class TestTransform:
    """Tests for translation and rotation."""

    def test_translation(self, plain: CrosshairConfig) -> None:
        """Test the origin is the surface center plus the position offset."""
        config = plain.replace(position_x=5, position_y=-7)
        ops = render(config, center=(100, 100))
        top = ops[0]
        assert top.points == (Point(105, 81), Point(105, 89))

    def test_quarter_turn_is_clockwise(self, plain: CrosshairConfig) -> None:
        """Test a 90 degree rotation moves the top arm to the right side."""
        ops = render(plain.replace(rotation=90), center=(0, 0))
        start, end = ops[0].points
        assert start.x == pytest.approx(12.0)
        assert start.y == pytest.approx(0.0, abs=1e-9)
        assert end.x == pytest.approx(4.0)

    def test_full_turn_matches_zero(self) -> None:
        """Test rotation=360 composites exactly like rotation=0."""
        base = CrosshairConfig(
            style=CrosshairStyle.SQUARE,
            size=9,
            gap=2,
            shadow_enabled=True,
            position_x=3,
        )
        assert render(base.replace(rotation=360), (50, 50)) == render(base.replace(rotation=0), (50, 50))

    def test_shadow_offset_not_rotated(self, plain: CrosshairConfig) -> None:
        """Test the shadow is shifted in screen space after rotation."""
        config = plain.replace(rotation=90, shadow_enabled=True, shadow_offset=3)
        ops = render(config, center=(0, 0))
        shadow = [op for op in ops if op.layer is Layer.SHADOW]
        main = [op for op in ops if op.layer is Layer.MAIN]
        for s, m in zip(shadow, main, strict=True):
            for sp, mp in zip(s.points, m.points, strict=True):
                assert sp.x == pytest.approx(mp.x + 3)
                assert sp.y == pytest.approx(mp.y + 3)

    def test_circle_center(self) -> None:
        config = CrosshairConfig(style=CrosshairStyle.CIRCLE, size=12, gap=0, show_outline=False, show_dot=False)
        (op,) = render(config, center=(150, 150))
        assert op.kind is PaintKind.CIRCLE
        assert op.points == (Point(150, 150),)
        assert op.radius == 12

    def test_square_becomes_polygon(self) -> None:
        config = CrosshairConfig(style=CrosshairStyle.SQUARE, size=5, gap=0, show_outline=False, show_dot=False)
        (op,) = render(config, center=(10, 10))
        assert op.kind is PaintKind.POLYGON
        assert [p.to_tuple() for p in op.points] == [(5, 5), (15, 5), (15, 15), (5, 15)]


class TestCustomColors:
    """Tests for per-line colors in Custom mode."""

    def test_main_layer_uses_line_color(self) -> None:
        config = CrosshairConfig(
            style=CrosshairStyle.CUSTOM,
            color=0x00FF00,
            show_dot=False,
            lines=(CustomLine(0, 0, 10, 0, 4, 0xFF0000), CustomLine(0, 0, 0, 10, 1, 0x0000FF)),
        )
        ops = render(config)
        main = [op for op in ops if op.layer is Layer.MAIN]
        outline = [op for op in ops if op.layer is Layer.OUTLINE]

        assert [op.color for op in main] == [0xFF0000, 0x0000FF]
        assert [op.width for op in main] == [4, 1]
        assert all(op.color == config.outline_color for op in outline)
        assert [op.width for op in outline] == [4 + 2, 1 + 2]


class TestComposite:
    """Tests for composite with explicit primitives."""

    def test_matches_render(self) -> None:
        config = CrosshairConfig(style=CrosshairStyle.TSHAPE, shadow_enabled=True)
        assert composite(config, resolve(config), (20, 30)) == render(config, (20, 30))

    def test_empty_primitives_still_draw_dot(self) -> None:
        config = CrosshairConfig(show_dot=True)
        ops = composite(config, ())
        assert len(ops) == 1
        assert ops[0].layer is Layer.DOT

    def test_to_dict(self, plain: CrosshairConfig) -> None:
        data = render(plain)[0].to_dict()
        assert data["layer"] == "main"
        assert data["kind"] == "line"
        assert data["points"] == [[0.0, -12.0], [0.0, -4.0]]
