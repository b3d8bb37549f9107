"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from reticle.core.templates import StarterTemplate
from reticle.domain import CrosshairConfig, PaintOp, Preset, color_to_hex

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

COLOR_FIELDS = ("color", "outline_color", "shadow_color")


def _swatch(color: int) -> Text:
    """Hex color text with a colored block in front."""
    hex_color = color_to_hex(color)
    text = Text("■ ", style=hex_color)
    text.append(hex_color)
    return text


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Reticle[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    console.print(f"\n{SYM_STEP} {message}")


def print_success(message: str) -> None:
    console.print(f"[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_config(config: CrosshairConfig, title: str = "Crosshair") -> None:
    """Print every configuration field as a two-column table."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")

    for name, value in config.to_dict().items():
        if name in COLOR_FIELDS:
            table.add_row(name, _swatch(value))
        elif name == "lines":
            table.add_row(name, f"{len(value)} segments")
        else:
            table.add_row(name, str(value))

    console.print(table)
    console.print(f"  {SYM_DOT} Overlay window {config.overlay_extent()}px square")


def print_paint_ops(ops: Iterable[PaintOp]) -> None:
    """Print a paint sequence, one op per row, back to front."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Layer")
    table.add_column("Kind")
    table.add_column("Points")
    table.add_column("Radius", justify="right")
    table.add_column("Width", justify="right")
    table.add_column("Color")
    table.add_column("Alpha", justify="right")

    count = 0
    for index, op in enumerate(ops):
        points = " ".join(f"({p.x:.1f}, {p.y:.1f})" for p in op.points)
        table.add_row(
            str(index),
            op.layer.value,
            op.kind.value,
            points,
            f"{op.radius:g}" if op.radius else "",
            f"{op.width:g}",
            _swatch(op.color),
            f"{op.opacity:.2f}",
        )
        count += 1

    if count == 0:
        console.print(f"  {SYM_DOT} Nothing to paint")
        return
    console.print(table)


def print_presets(presets: list[Preset]) -> None:
    if not presets:
        console.print(f"  {SYM_DOT} No saved presets yet")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Style")
    table.add_column("Color")
    table.add_column("Created")
    for preset in presets:
        table.add_row(
            preset.id,
            preset.name,
            preset.config.style.value,
            _swatch(preset.config.color),
            preset.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


def print_templates(templates: Iterable[StarterTemplate]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Style")
    table.add_column("Description")
    for template in templates:
        table.add_row(
            template.id,
            template.name,
            template.config.style.value,
            template.description,
        )
    console.print(table)


def print_favorites(favorites: list[CrosshairConfig]) -> None:
    if not favorites:
        console.print(f"  {SYM_DOT} No favorites yet")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Style")
    table.add_column("Size")
    table.add_column("Gap")
    table.add_column("Color")
    for index, config in enumerate(favorites, start=1):
        table.add_row(
            str(index),
            config.style.value,
            str(config.size),
            str(config.gap),
            _swatch(config.color),
        )
    console.print(table)
