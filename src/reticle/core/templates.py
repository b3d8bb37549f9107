"""Built-in default configuration, starter templates and named colors."""

from dataclasses import dataclass

from reticle.domain import CrosshairConfig, CrosshairStyle

DEFAULT_CONFIG = CrosshairConfig()

PRESET_COLORS: dict[str, int] = {
    "Green": 0x00FF00,
    "Red": 0xFF0000,
    "Yellow": 0xFFFF00,
    "Cyan": 0x00FFFF,
    "White": 0xFFFFFF,
    "Magenta": 0xFF00FF,
    "Orange": 0xFFA500,
    "Pink": 0xFF69B4,
}


@dataclass(frozen=True)
class StarterTemplate:
    """A ready-made design offered before any editing."""

    id: str
    name: str
    description: str
    config: CrosshairConfig


STARTER_TEMPLATES: tuple[StarterTemplate, ...] = (
    StarterTemplate(
        id="classic",
        name="Classic",
        description="Traditional crosshair with four lines",
        config=DEFAULT_CONFIG.replace(
            style=CrosshairStyle.CLASSIC,
            size=8,
            thickness=2,
            gap=4,
            show_dot=False,
            show_outline=False,
            color=0x00FF00,
        ),
    ),
    StarterTemplate(
        id="dot",
        name="Dot",
        description="Simple center dot only",
        config=DEFAULT_CONFIG.replace(
            style=CrosshairStyle.DOT,
            size=0,
            thickness=0,
            gap=0,
            show_dot=True,
            dot_size=3,
            show_outline=False,
            color=0xFF0000,
        ),
    ),
    StarterTemplate(
        id="circle",
        name="Circle",
        description="Circular crosshair outline",
        config=DEFAULT_CONFIG.replace(
            style=CrosshairStyle.CIRCLE,
            size=12,
            thickness=2,
            gap=3,
            show_dot=True,
            dot_size=2,
            show_outline=False,
            color=0x00FFFF,
        ),
    ),
    StarterTemplate(
        id="square",
        name="Square",
        description="Square outline crosshair",
        config=DEFAULT_CONFIG.replace(
            style=CrosshairStyle.SQUARE,
            size=10,
            thickness=2,
            gap=2,
            show_dot=False,
            show_outline=False,
            color=0xFFFF00,
        ),
    ),
    StarterTemplate(
        id="tshape",
        name="T-Shape",
        description="T-shaped crosshair design",
        config=DEFAULT_CONFIG.replace(
            style=CrosshairStyle.TSHAPE,
            size=8,
            thickness=2,
            gap=4,
            t_length=12,
            show_dot=False,
            show_outline=False,
            color=0xFF8800,
        ),
    ),
    StarterTemplate(
        id="minimal",
        name="Minimal",
        description="Clean and simple design",
        config=DEFAULT_CONFIG.replace(
            style=CrosshairStyle.CLASSIC,
            size=6,
            thickness=1,
            gap=2,
            show_dot=True,
            dot_size=1,
            show_outline=False,
            color=0xFFFFFF,
        ),
    ),
)


def get_template(template_id: str) -> StarterTemplate | None:
    """Look up a starter template by id (case-insensitive)."""
    wanted = template_id.lower()
    for template in STARTER_TEMPLATES:
        if template.id == wanted:
            return template
    return None
