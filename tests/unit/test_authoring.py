"""Unit tests for custom shape authoring."""

import pytest

from reticle.core.authoring import AuthoringState, CustomShapeAuthor
from reticle.domain import CrosshairConfig, CrosshairStyle, CustomLine


@pytest.fixture
def custom() -> CrosshairConfig:
    return CrosshairConfig(style=CrosshairStyle.CUSTOM, thickness=3, color=0xFF0000)


@pytest.fixture
def author() -> CustomShapeAuthor:
    author = CustomShapeAuthor(canvas_center=(150, 150))
    author.set_active(True)
    return author


class TestStateMachine:
    """Tests for authoring state transitions."""

    def test_starts_idle(self) -> None:
        author = CustomShapeAuthor()
        assert author.state is AuthoringState.IDLE
        assert author.pending_point is None

    def test_activate(self, author: CustomShapeAuthor) -> None:
        assert author.state is AuthoringState.AWAITING_FIRST_POINT

    def test_two_clicks_append_one_line(
        self, author: CustomShapeAuthor, custom: CrosshairConfig
    ) -> None:
        """Test canvas clicks are translated to local coordinates."""
        config = author.click(custom, 150, 100)
        assert config.lines == ()
        assert author.state is AuthoringState.AWAITING_SECOND_POINT
        assert author.pending_point == (0, -50)

        config = author.click(config, 150, 140)
        assert config.lines == (CustomLine(0, -50, 0, -10, 3, 0xFF0000),)
        assert author.state is AuthoringState.AWAITING_FIRST_POINT

    def test_lines_accumulate_in_order(
        self, author: CustomShapeAuthor, custom: CrosshairConfig
    ) -> None:
        config = custom
        for x, y in [(140, 150), (160, 150), (150, 140), (150, 160)]:
            config = author.click(config, x, y)
        assert [(line.start_x, line.end_x) for line in config.lines] == [(-10, 10), (0, 0)]

    def test_line_uses_current_thickness_and_color(
        self, author: CustomShapeAuthor, custom: CrosshairConfig
    ) -> None:
        config = author.click(custom, 150, 150)
        config = config.replace(thickness=6, color=0x0000FF)
        config = author.click(config, 155, 150)
        assert config.lines[0].thickness == 6
        assert config.lines[0].color == 0x0000FF

    def test_deactivate_discards_pending(
        self, author: CustomShapeAuthor, custom: CrosshairConfig
    ) -> None:
        author.click(custom, 100, 100)
        author.set_active(False)
        assert author.state is AuthoringState.IDLE
        assert author.pending_point is None

        author.set_active(True)
        config = author.click(custom, 120, 120)
        assert config.lines == ()
        assert author.pending_point == (-30, -30)


class TestClickFiltering:
    """Tests for clicks that must be ignored."""

    def test_inactive_ignores_clicks(self, custom: CrosshairConfig) -> None:
        author = CustomShapeAuthor()
        config = author.click(custom, 10, 10)
        config = author.click(config, 20, 20)
        assert config is custom
        assert author.pending_point is None

    def test_non_custom_style_ignores_clicks(self, author: CustomShapeAuthor) -> None:
        classic = CrosshairConfig()
        assert author.click(classic, 10, 10) is classic
        assert author.pending_point is None


class TestRounding:
    """Tests for canvas to local translation."""

    @pytest.mark.parametrize(
        ("click", "expected"),
        [
            ((150.0, 150.0), (0, 0)),
            ((150.5, 149.5), (1, 0)),
            ((149.4, 150.6), (-1, 1)),
            ((0.0, 300.0), (-150, 150)),
        ],
    )
    def test_to_local(self, click: tuple[float, float], expected: tuple[int, int]) -> None:
        author = CustomShapeAuthor(canvas_center=(150, 150))
        assert author.to_local(*click) == expected

    def test_custom_center(self) -> None:
        author = CustomShapeAuthor(canvas_center=(200, 100))
        assert author.to_local(200, 100) == (0, 0)


class TestClear:
    """Tests for clearing authored lines."""

    def test_clear_empties_lines_and_pending(
        self, author: CustomShapeAuthor, custom: CrosshairConfig
    ) -> None:
        config = author.click(custom, 140, 150)
        config = author.click(config, 160, 150)
        config = author.click(config, 150, 140)

        cleared = author.clear(config)
        assert cleared.lines == ()
        assert author.pending_point is None
        assert author.state is AuthoringState.AWAITING_FIRST_POINT
        assert cleared.replace(lines=config.lines) == config
