"""Unit tests for starter templates and named colors."""

import pytest

from reticle.core.compositor import render
from reticle.core.templates import DEFAULT_CONFIG, PRESET_COLORS, STARTER_TEMPLATES, get_template
from reticle.domain import CrosshairConfig, CrosshairStyle


class TestTemplates:
    """Tests for the built-in starter templates."""

    def test_ids_unique(self) -> None:
        ids = [t.id for t in STARTER_TEMPLATES]
        assert len(ids) == len(set(ids)) == 6

    def test_lookup_case_insensitive(self) -> None:
        template = get_template("TShape")
        assert template is not None
        assert template.config.style is CrosshairStyle.TSHAPE
        assert template.config.t_length == 12

    def test_unknown(self) -> None:
        assert get_template("hexagon") is None

    @pytest.mark.parametrize("template", STARTER_TEMPLATES, ids=lambda t: t.id)
    def test_every_template_renders(self, template) -> None:
        assert render(template.config, (150, 150))

    def test_default_config(self) -> None:
        assert DEFAULT_CONFIG == CrosshairConfig()


class TestColors:
    """Tests for the named color palette."""

    def test_palette(self) -> None:
        assert len(PRESET_COLORS) == 8
        assert PRESET_COLORS["Orange"] == 0xFFA500
        assert all(0 <= value <= 0xFFFFFF for value in PRESET_COLORS.values())
