"""CLI entry point for pluginref-sdk.

Invoked as::

    pluginref [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m pluginref.cli.main
"""
from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, TextIO

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from pluginref.reference.descriptor import PluginDescriptor
    from pluginref.schema.settings import PluginRefSettings

console = Console()
error_console = Console(stderr=True, style="bold red")


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="pluginref-sdk")
@click.option(
    "--settings",
    "settings_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to a pluginref settings file (YAML or JSON).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, settings_path: str | None, verbose: bool) -> None:
    """Inspect CI plugin references, checkout identifiers and hook environments"""
    from pluginref.config.loader import SettingsLoader
    from pluginref.schema.errors import ConfigurationError

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    loader = SettingsLoader()
    try:
        if settings_path:
            settings = loader.load_file(settings_path)
        else:
            settings = loader.load_auto()
    except ConfigurationError as exc:
        error_console.print(f"Could not load settings: {exc}")
        raise SystemExit(1) from exc

    ctx.obj = settings


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from pluginref import __version__

    console.print(f"[bold]pluginref-sdk[/bold] v{__version__}")
    console.print(f"Python {sys.version}")


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


def _describe(plugin: PluginDescriptor) -> dict[str, object]:
    from pluginref.schema.errors import IncompleteReferenceError

    details = plugin.to_dict()
    try:
        details["repository"] = plugin.repository()
        details["subdirectory"] = plugin.repository_subdirectory()
    except IncompleteReferenceError as exc:
        details["repository"] = None
        details["subdirectory"] = None
        details["repository_error"] = str(exc)
    return details


@cli.command(name="parse")
@click.argument("reference")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    show_default=True,
    help="Output format.",
)
@click.pass_obj
def parse_command(settings: PluginRefSettings, reference: str, output_format: str) -> None:
    """Parse REFERENCE and show its derived names and repository."""
    from pluginref.reference.descriptor import create_plugin
    from pluginref.schema.errors import FormatError

    try:
        plugin = create_plugin(reference, settings=settings)
    except FormatError as exc:
        error_console.print(str(exc))
        raise SystemExit(1) from exc

    details = _describe(plugin)
    if output_format == "json":
        console.print_json(json.dumps(details))
        return

    table = Table(title=reference, show_header=True, header_style="bold cyan")
    table.add_column("Field", style="dim")
    table.add_column("Value")
    for key, value in details.items():
        if key == "configuration":
            continue
        table.add_row(key, "(unresolved)" if value is None else str(value))
    console.print(table)


# ---------------------------------------------------------------------------
# env
# ---------------------------------------------------------------------------


@cli.command(name="env")
@click.argument("reference")
@click.option(
    "--config",
    "config_json",
    default="{}",
    show_default=True,
    help="Plugin configuration as a JSON object.",
)
@click.pass_obj
def env_command(settings: PluginRefSettings, reference: str, config_json: str) -> None:
    """Print the hook environment for REFERENCE configured with --config."""
    from pluginref.reference.descriptor import create_plugin
    from pluginref.schema.errors import FormatError

    try:
        config = json.loads(config_json)
    except json.JSONDecodeError as exc:
        error_console.print(f"Invalid --config JSON: {exc}")
        raise SystemExit(1) from exc
    if not isinstance(config, dict):
        error_console.print("--config must be a JSON object")
        raise SystemExit(1)

    try:
        plugin = create_plugin(reference, config, settings=settings)
    except FormatError as exc:
        error_console.print(str(exc))
        raise SystemExit(1) from exc

    for line in plugin.configuration_to_list():
        click.echo(line)


# ---------------------------------------------------------------------------
# decode
# ---------------------------------------------------------------------------


@cli.command(name="decode")
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    show_default=True,
    help="Output format.",
)
@click.pass_obj
def decode_command(settings: PluginRefSettings, source: TextIO, output_format: str) -> None:
    """Decode a JSON plugin list from SOURCE (a file, or - for stdin)."""
    from pluginref.reference.batch import decode_plugins_json
    from pluginref.schema.errors import FormatError

    try:
        plugins = decode_plugins_json(source.read(), settings=settings)
    except FormatError as exc:
        error_console.print(str(exc))
        raise SystemExit(1) from exc

    if output_format == "json":
        console.print_json(json.dumps([_describe(plugin) for plugin in plugins]))
        return

    if not plugins:
        console.print("[dim](No plugins declared)[/dim]")
        return

    table = Table(title="Plugins", header_style="bold cyan")
    table.add_column("label")
    table.add_column("name")
    table.add_column("identifier")
    table.add_column("repository")
    table.add_column("subdirectory")
    for plugin in plugins:
        details = _describe(plugin)
        table.add_row(
            plugin.label,
            plugin.name,
            plugin.identifier,
            str(details["repository"] or "(unresolved)"),
            str(details["subdirectory"] or ""),
        )
    console.print(table)


if __name__ == "__main__":
    cli()
