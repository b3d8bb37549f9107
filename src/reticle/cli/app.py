"""CLI application entry point for reticle.

This module provides the main CLI interface using Typer.
"""

import asyncio
import json
from collections.abc import Coroutine
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer

from reticle import __version__
from reticle.cli.output import (
    console,
    print_config,
    print_error,
    print_favorites,
    print_header,
    print_paint_ops,
    print_presets,
    print_step,
    print_success,
    print_templates,
)
from reticle.config import LoggingConfig, ReticleSettings, StorageConfig
from reticle.config.settings import DEFAULT_DATA_DIR
from reticle.core import (
    STARTER_TEMPLATES,
    DesignerSession,
    PresetStore,
    get_template,
    layers_present,
    render,
)
from reticle.domain import CrosshairConfig, CrosshairStyle, Preset, hex_to_color
from reticle.exceptions import ConfigValidationError, ReticleError
from reticle.io import JsonFileStore, decode_config, write_svg
from reticle.utils import configure_logging

T = TypeVar("T")

# Create the Typer app
app = typer.Typer(
    name="reticle",
    help="Design, preview and manage crosshair overlays.",
    add_completion=False,
    no_args_is_help=True,
)
config_app = typer.Typer(help="Show and edit the active crosshair.", no_args_is_help=True)
presets_app = typer.Typer(help="Manage saved presets.", no_args_is_help=True)
favorites_app = typer.Typer(help="Manage favorite crosshairs.", no_args_is_help=True)
app.add_typer(config_app, name="config")
app.add_typer(presets_app, name="presets")
app.add_typer(favorites_app, name="favorites")

_BOOL_WORDS = {
    "true": True,
    "on": True,
    "yes": True,
    "1": True,
    "false": False,
    "off": False,
    "no": False,
    "0": False,
}


@dataclass
class CliState:
    """Per-invocation objects shared by every command."""

    settings: ReticleSettings
    store: JsonFileStore

    def session(self) -> DesignerSession:
        return DesignerSession(
            self.store,
            favorites_backend=self.store,
            authoring_center=self.settings.preview.authoring_center,
        )

    def presets(self) -> PresetStore:
        return PresetStore(self.store)


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine, turning domain errors into a clean exit."""
    try:
        return asyncio.run(coro)
    except ReticleError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _state(ctx: typer.Context) -> CliState:
    state: CliState = ctx.obj
    return state


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Reticle[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    data_dir: Annotated[
        Path,
        typer.Option(
            "--data-dir",
            "-d",
            help="Directory holding config, presets and favorites",
            envvar="RETICLE_DATA_DIR",
        ),
    ] = DEFAULT_DATA_DIR,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Design, preview and manage crosshair overlays."""
    settings = ReticleSettings(
        storage=StorageConfig(data_dir=data_dir),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = CliState(settings=settings, store=JsonFileStore(settings.storage.data_dir))


def parse_field_value(field: str, raw: str) -> Any:
    """Convert a command-line string into a value for a configuration field.

    Raises:
        ConfigValidationError: If the field is unknown or the text does not parse
    """
    defaults = CrosshairConfig()
    if field not in CrosshairConfig.field_names() or field == "lines":
        raise ConfigValidationError(field, "unknown or non-editable field")

    current = getattr(defaults, field)
    if field == "style":
        return CrosshairStyle.parse(raw)
    if field in ("color", "outline_color", "shadow_color"):
        if raw.startswith("#"):
            return hex_to_color(raw)
        try:
            return int(raw, 0)
        except ValueError:
            raise ConfigValidationError(field, f"expected #rrggbb or an integer, got {raw!r}") from None
    if isinstance(current, bool):
        try:
            return _BOOL_WORDS[raw.lower()]
        except KeyError:
            raise ConfigValidationError(field, f"expected true/false, got {raw!r}") from None
    if isinstance(current, float):
        try:
            return float(raw)
        except ValueError:
            raise ConfigValidationError(field, f"expected a number, got {raw!r}") from None
    try:
        return int(raw)
    except ValueError:
        raise ConfigValidationError(field, f"expected an integer, got {raw!r}") from None


def _find_preset(presets: list[Preset], preset_id: str) -> Preset:
    """Match a preset by exact id, or by a unique id prefix."""
    for preset in presets:
        if preset.id == preset_id:
            return preset
    matches = [preset for preset in presets if preset.id.startswith(preset_id)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        print_error(f"No preset with id '{preset_id}'")
    else:
        print_error(f"Id prefix '{preset_id}' matches {len(matches)} presets")
    raise typer.Exit(code=1)


@app.command("render")
def render_command(
    ctx: typer.Context,
    template: Annotated[
        str | None,
        typer.Option("--template", "-t", help="Render a starter template instead of the active crosshair"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Render a configuration JSON file"),
    ] = None,
    size: Annotated[
        int,
        typer.Option("--size", "-s", help="Side length of the preview surface", min=50, max=4096),
    ] = 400,
    svg: Annotated[
        Path | None,
        typer.Option("--svg", help="Write the preview as an SVG file"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the paint sequence as JSON"),
    ] = False,
    background: Annotated[
        bool,
        typer.Option("--background/--no-background", help="Draw the preview backdrop in SVG output"),
    ] = True,
) -> None:
    """Resolve and composite a crosshair into its paint sequence."""
    state = _state(ctx)
    state.settings.preview.size = size
    state.settings.preview.show_background = background

    if template is not None and config_file is not None:
        print_error("Use either --template or --config, not both")
        raise typer.Exit(code=1)

    if template is not None:
        found = get_template(template)
        if found is None:
            print_error(
                f"Unknown template: {template}",
                details="Valid values: " + ", ".join(t.id for t in STARTER_TEMPLATES),
            )
            raise typer.Exit(code=1)
        config = found.config
    elif config_file is not None:
        if not config_file.is_file():
            print_error(f"Config file not found: {config_file}")
            raise typer.Exit(code=1)
        try:
            config = decode_config(config_file.read_bytes())
        except ReticleError as e:
            print_error(f"Could not read config: {e}")
            raise typer.Exit(code=1) from e
    else:
        config = _run(state.session().start())

    preview = state.settings.preview
    ops = render(config, preview.center)

    if as_json:
        console.print_json(json.dumps([op.to_dict() for op in ops]))
    elif svg is None:
        print_header(__version__)
        layers = ", ".join(layer.value for layer in layers_present(ops)) or "none"
        console.print(f"  {config.style.value} {len(ops)} paint ops on a {size}px surface")
        console.print(f"  Layers: {layers}")
        print_paint_ops(ops)

    if svg is not None:
        write_svg(svg, ops, preview.size, preview.size, preview.show_background)
        if not as_json:
            print_success(f"Wrote {svg}")


@app.command("templates")
def templates_command() -> None:
    """List the built-in starter templates."""
    print_templates(STARTER_TEMPLATES)


@config_app.command("show")
def config_show(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
) -> None:
    """Show the active crosshair configuration."""
    config = _run(_state(ctx).session().start())
    if as_json:
        console.print_json(json.dumps(config.to_dict()))
    else:
        print_config(config)


@config_app.command("set")
def config_set(
    ctx: typer.Context,
    field: Annotated[str, typer.Argument(help="Field name, e.g. size or color")],
    value: Annotated[str, typer.Argument(help="New value, e.g. 12, #ff0000, true, Circle")],
) -> None:
    """Change one field of the active crosshair and save it."""
    try:
        parsed = parse_field_value(field, value)
    except ConfigValidationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    async def _set() -> CrosshairConfig:
        session = _state(ctx).session()
        await session.start()
        config = await session.update(**{field: parsed})
        await session.save()
        return config

    config = _run(_set())
    print_success(f"{field} = {config.to_dict()[field]}")


@config_app.command("use")
def config_use(
    ctx: typer.Context,
    template: Annotated[str, typer.Argument(help="Starter template id")],
) -> None:
    """Replace the active crosshair with a starter template."""
    found = get_template(template)
    if found is None:
        print_error(f"Unknown template: {template}")
        raise typer.Exit(code=1)

    async def _use() -> None:
        session = _state(ctx).session()
        await session.start()
        await session.apply(found.config)
        await session.save()

    _run(_use())
    print_success(f"Using template '{found.name}'")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Restore the built-in default crosshair."""

    async def _reset() -> None:
        session = _state(ctx).session()
        await session.reset()
        await session.save()

    _run(_reset())
    print_success("Configuration reset to defaults")


@config_app.command("toggle")
def config_toggle(ctx: typer.Context) -> None:
    """Turn the crosshair on or off."""

    async def _toggle() -> bool:
        session = _state(ctx).session()
        await session.start()
        enabled = await session.toggle()
        await session.save()
        return enabled

    enabled = _run(_toggle())
    print_success("Crosshair ON" if enabled else "Crosshair OFF")


@presets_app.command("list")
def presets_list(ctx: typer.Context) -> None:
    """List saved presets."""
    print_presets(_run(_state(ctx).presets().list_presets()))


@presets_app.command("save")
def presets_save(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Preset name")],
) -> None:
    """Save the active crosshair as a new preset."""
    if not name.strip():
        print_error("Preset name cannot be empty")
        raise typer.Exit(code=1)

    async def _save() -> Preset:
        state = _state(ctx)
        config = await state.session().start()
        return await state.presets().create(name.strip(), config)

    preset = _run(_save())
    print_success(f"Saved preset '{preset.name}' ({preset.id})")


@presets_app.command("load")
def presets_load(
    ctx: typer.Context,
    preset_id: Annotated[str, typer.Argument(help="Preset id or unique prefix")],
) -> None:
    """Make a preset the active crosshair."""
    state = _state(ctx)
    preset = _find_preset(_run(state.presets().list_presets()), preset_id)

    async def _load() -> None:
        session = state.session()
        await session.start()
        await session.apply(preset.config)
        await session.save()

    _run(_load())
    print_success(f"Loaded preset '{preset.name}'")


@presets_app.command("rename")
def presets_rename(
    ctx: typer.Context,
    preset_id: Annotated[str, typer.Argument(help="Preset id or unique prefix")],
    name: Annotated[str, typer.Argument(help="New name")],
) -> None:
    """Rename a preset."""
    store = _state(ctx).presets()
    preset = _find_preset(_run(store.list_presets()), preset_id)
    renamed = _run(store.rename(preset, name))
    print_success(f"Renamed '{preset.name}' to '{renamed.name}'")


@presets_app.command("duplicate")
def presets_duplicate(
    ctx: typer.Context,
    preset_id: Annotated[str, typer.Argument(help="Preset id or unique prefix")],
) -> None:
    """Copy a preset under a new id."""
    store = _state(ctx).presets()
    preset = _find_preset(_run(store.list_presets()), preset_id)
    copy = _run(store.duplicate(preset))
    print_success(f"Created '{copy.name}' ({copy.id})")


@presets_app.command("delete")
def presets_delete(
    ctx: typer.Context,
    preset_id: Annotated[str, typer.Argument(help="Preset id or unique prefix")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
) -> None:
    """Delete a preset."""
    store = _state(ctx).presets()
    preset = _find_preset(_run(store.list_presets()), preset_id)
    if not yes and not typer.confirm(f"Delete preset '{preset.name}'?"):
        raise typer.Exit(code=0)
    _run(store.delete(preset.id))
    print_success(f"Deleted '{preset.name}'")


@presets_app.command("export")
def presets_export(
    ctx: typer.Context,
    output: Annotated[Path, typer.Argument(help="Destination JSON file")],
) -> None:
    """Export every preset into one JSON file."""
    data = _run(_state(ctx).presets().export_all())
    output.write_bytes(data)
    print_success(f"Exported presets to {output}")


@presets_app.command("import")
def presets_import(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="JSON file produced by export")],
) -> None:
    """Import presets from an exported JSON file."""
    if not source.is_file():
        print_error(f"Import file not found: {source}")
        raise typer.Exit(code=1)

    print_step(f"Importing {source}")
    imported = _run(_state(ctx).presets().import_all(source.read_bytes()))
    print_success(f"Imported {len(imported)} presets")


@favorites_app.command("list")
def favorites_list(ctx: typer.Context) -> None:
    """List favorite crosshairs."""

    async def _list() -> list[CrosshairConfig]:
        session = _state(ctx).session()
        await session.start()
        return list(session.favorites)

    print_favorites(_run(_list()))


@favorites_app.command("toggle")
def favorites_toggle(ctx: typer.Context) -> None:
    """Add the active crosshair to favorites, or remove it."""

    async def _toggle() -> bool:
        session = _state(ctx).session()
        await session.start()
        return await session.toggle_favorite()

    added = _run(_toggle())
    print_success("Added to favorites" if added else "Removed from favorites")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
