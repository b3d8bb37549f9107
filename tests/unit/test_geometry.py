"""Unit tests for geometry resolution."""

import pytest

from reticle.core.geometry import classic_arms, resolve
from reticle.domain import Arc, CrosshairConfig, CrosshairStyle, CustomLine, Line, Point, Rect


def _endpoints(line: Line) -> tuple[tuple[float, float], tuple[float, float]]:
    return (line.start.to_tuple(), line.end.to_tuple())


class TestClassic:
    """Tests for the Classic style."""

    def test_four_arms(self) -> None:
        """Test size=8, thickness=2, gap=4 gives four 8-long arms starting 4 from center."""
        config = CrosshairConfig(style=CrosshairStyle.CLASSIC, size=8, thickness=2, gap=4)
        prims = resolve(config)

        assert len(prims) == 4
        assert all(isinstance(p, Line) for p in prims)
        assert all(p.length == 8 for p in prims)  # type: ignore[union-attr]
        assert all(p.thickness == 2 for p in prims)  # type: ignore[union-attr]

        assert [_endpoints(p) for p in prims] == [  # type: ignore[arg-type]
            ((0, -12), (0, -4)),
            ((0, 4), (0, 12)),
            ((-12, 0), (-4, 0)),
            ((4, 0), (12, 0)),
        ]

    def test_no_gap(self) -> None:
        """Test arms start at the origin when gap is zero."""
        prims = resolve(CrosshairConfig(size=5, gap=0))
        assert len(prims) == 4
        assert prims[1].start == Point(0, 0)  # type: ignore[union-attr]

    def test_zero_thickness_kept(self) -> None:
        """Test zero-thickness arms are still resolved."""
        prims = resolve(CrosshairConfig(size=5, thickness=0))
        assert len(prims) == 4
        assert all(p.thickness == 0 for p in prims)  # type: ignore[union-attr]

    def test_classic_arms_without_top(self) -> None:
        """Test the top arm can be left out."""
        arms = classic_arms(CrosshairConfig(size=5, gap=2), top=False)
        assert len(arms) == 3
        assert all(p.start.y >= 0 for p in arms)  # type: ignore[union-attr]


class TestDot:
    """Tests for the Dot style."""

    def test_no_primitives(self) -> None:
        """Test Dot resolves no primitives; the dot is a compositor layer."""
        assert resolve(CrosshairConfig(style=CrosshairStyle.DOT, size=10, gap=5)) == ()


class TestCircle:
    """Tests for the Circle style."""

    def test_ring_with_arms(self) -> None:
        """Test size=12, gap=3 gives one Arc of radius 15 plus four arms."""
        prims = resolve(CrosshairConfig(style=CrosshairStyle.CIRCLE, size=12, gap=3))
        assert len(prims) == 5
        assert prims[0] == Arc(radius=15, thickness=2)
        assert all(isinstance(p, Line) for p in prims[1:])

    def test_ring_only_without_gap(self) -> None:
        prims = resolve(CrosshairConfig(style=CrosshairStyle.CIRCLE, size=12, gap=0))
        assert prims == (Arc(radius=12, thickness=2),)


class TestSquare:
    """Tests for the Square style."""

    def test_box_with_arms(self) -> None:
        prims = resolve(CrosshairConfig(style=CrosshairStyle.SQUARE, size=10, gap=2, thickness=3))
        assert prims[0] == Rect(half_extent=12, thickness=3)
        assert len(prims) == 5

    def test_box_only_without_gap(self) -> None:
        prims = resolve(CrosshairConfig(style=CrosshairStyle.SQUARE, size=10, gap=0))
        assert prims == (Rect(half_extent=10, thickness=2),)


class TestTShape:
    """Tests for the TShape style."""

    def test_bar_and_stem(self) -> None:
        """Test the bar sits at -(gap+size) and the stem runs to -gap."""
        config = CrosshairConfig(style=CrosshairStyle.TSHAPE, size=8, gap=4, t_length=12)
        prims = resolve(config)

        bar, stem = prims[0], prims[1]
        assert _endpoints(bar) == ((-12, -12), (12, -12))  # type: ignore[arg-type]
        assert _endpoints(stem) == ((0, -12), (0, -4))  # type: ignore[arg-type]

    def test_gap_adds_three_arms(self) -> None:
        """Test bottom, left and right arms appear, but no top arm."""
        config = CrosshairConfig(style=CrosshairStyle.TSHAPE, size=8, gap=4, t_length=12)
        prims = resolve(config)
        assert len(prims) == 5
        arm_endpoints = [_endpoints(p) for p in prims[2:]]  # type: ignore[arg-type]
        assert ((0, -12), (0, -4)) not in arm_endpoints
        assert ((0, 4), (0, 12)) in arm_endpoints

    def test_no_gap_no_arms(self) -> None:
        config = CrosshairConfig(style=CrosshairStyle.TSHAPE, size=8, gap=0, t_length=12)
        assert len(resolve(config)) == 2

    def test_zero_t_length_drops_bar(self) -> None:
        """Test a zero-length bar is omitted."""
        config = CrosshairConfig(style=CrosshairStyle.TSHAPE, size=8, gap=0, t_length=0)
        prims = resolve(config)
        assert len(prims) == 1
        assert _endpoints(prims[0]) == ((0, -8), (0, 0))  # type: ignore[arg-type]


class TestCustom:
    """Tests for the Custom style."""

    def test_one_line_per_entry(self) -> None:
        """Test each custom line resolves with its own thickness and color."""
        lines = (
            CustomLine(-10, 0, 10, 0, 3, 0xFF0000),
            CustomLine(0, -10, 0, 10, 1, 0x0000FF),
        )
        prims = resolve(CrosshairConfig(style=CrosshairStyle.CUSTOM, lines=lines))

        assert len(prims) == 2
        assert prims[0] == Line(Point(-10, 0), Point(10, 0), 3, 0xFF0000)
        assert prims[1].color == 0x0000FF  # type: ignore[union-attr]

    def test_empty_lines(self) -> None:
        assert resolve(CrosshairConfig(style=CrosshairStyle.CUSTOM)) == ()

    def test_lines_ignored_outside_custom(self) -> None:
        """Test custom lines have no effect under other styles."""
        lines = (CustomLine(-10, 0, 10, 0, 3, 0xFF0000),)
        with_lines = resolve(CrosshairConfig(style=CrosshairStyle.CLASSIC, lines=lines))
        without = resolve(CrosshairConfig(style=CrosshairStyle.CLASSIC))
        assert with_lines == without


class TestResolveProperties:
    """Properties that hold for every style."""

    @pytest.mark.parametrize("style", list(CrosshairStyle))
    def test_deterministic(self, style: CrosshairStyle) -> None:
        config = CrosshairConfig(
            style=style,
            size=7,
            gap=3,
            lines=(CustomLine(1, 2, 3, 4, 1, 0),),
        )
        assert resolve(config) == resolve(config)

    @pytest.mark.parametrize("style", list(CrosshairStyle))
    def test_empty_when_no_extent(self, style: CrosshairStyle) -> None:
        """Test gap=0 and size=0 resolves nothing."""
        config = CrosshairConfig(style=style, size=0, gap=0, show_dot=False)
        assert resolve(config) == ()

    @pytest.mark.parametrize("style", list(CrosshairStyle))
    def test_dot_only_pattern(self, style: CrosshairStyle) -> None:
        """Test size=0 and thickness=0 resolves without error."""
        config = CrosshairConfig(style=style, size=0, thickness=0, gap=0)
        assert resolve(config) == ()
