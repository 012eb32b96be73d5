"""
Config commands: init, show, path.
"""

from typing import Annotated

import typer
from rich import print as rprint

from ._shared import config_app


CONFIG_TEMPLATE = """\
# mdprint configuration
# Location: ~/.mdprint/config.yaml (directory overridable with MDPRINT_DIR)

# Syntax highlighting (Pygments style name and the languages to load)
# highlight:
#   theme: default
#   languages: [c, python, javascript, typescript, bash, json, yaml, markdown,
#               ruby, sql, html, css, java, go, rust, php, csharp, cpp]

# Renderer waits, in seconds
# renderer:
#   navigation_timeout: 30      # page load; failure aborts the conversion
#   font_timeout: 10            # web fonts; proceeds with system fonts on timeout
#   diagram_timeout: 30         # Mermaid diagrams; proceeds on timeout
#   diagram_poll_interval: 1
#   settle_timeout: 3           # diagram layout settling before printing

# Where the page loads Mermaid from
# mermaid:
#   script_url: https://cdn.jsdelivr.net/npm/mermaid@10.6.1/dist/mermaid.min.js
"""


@config_app.callback(invoke_without_command=True)
def config_default(ctx: typer.Context):
    """Show current configuration (default when no subcommand given)."""
    if ctx.invoked_subcommand is None:
        _config_show()


@config_app.command("init")
def config_init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing config file")
    ] = False,
):
    """Create a config file with documented defaults.

    Creates ~/.mdprint/config.yaml with all options commented out.
    Use --force to overwrite an existing config file.
    """
    from ..config import CONFIG_PATH

    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)

    if CONFIG_PATH.exists() and not force:
        rprint(f"[yellow]Config file already exists:[/yellow] {CONFIG_PATH}")
        rprint("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(1)

    CONFIG_PATH.write_text(CONFIG_TEMPLATE)
    rprint(f"[green]✓[/green] Created config file: [bold]{CONFIG_PATH}[/bold]")
    rprint("[dim]Edit to customize your settings[/dim]")


@config_app.command("show")
def config_show():
    """Show effective configuration."""
    _config_show()


def _config_show():
    """Display effective settings, noting whether a config file exists."""
    from ..config import (
        CONFIG_PATH,
        get_highlight_config,
        get_mermaid_script_url,
        get_renderer_timeouts,
    )

    if CONFIG_PATH.exists():
        rprint(f"[bold]Configuration[/bold] ({CONFIG_PATH}):\n")
    else:
        rprint(f"[dim]No config file found at {CONFIG_PATH}; showing defaults[/dim]")
        rprint("[dim]Run 'mdprint config init' to create one[/dim]\n")

    theme, languages = get_highlight_config()
    rprint("  highlight:")
    rprint(f"    theme: {theme}")
    rprint(f"    languages: {', '.join(languages)}")

    timeouts = get_renderer_timeouts()
    rprint("  renderer:")
    rprint(f"    navigation_timeout: {timeouts.navigation:g}s")
    rprint(f"    font_timeout: {timeouts.fonts:g}s")
    rprint(f"    diagram_timeout: {timeouts.diagrams:g}s")
    rprint(f"    diagram_poll_interval: {timeouts.diagram_poll_interval:g}s")
    rprint(f"    settle_timeout: {timeouts.settle:g}s")

    rprint("  mermaid:")
    rprint(f"    script_url: {get_mermaid_script_url()}")


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Dotted key, e.g. renderer.diagram_timeout")],
    value: Annotated[str, typer.Argument(help="New value, parsed as YAML")],
):
    """Set one configuration value.

    Examples:
        mdprint config set highlight.theme monokai
        mdprint config set renderer.diagram_timeout 45
        mdprint config set highlight.languages "[python, bash, sql]"
    """
    import yaml

    from ..config import CONFIG_KEYS, CONFIG_PATH, set_config_value

    if key not in CONFIG_KEYS:
        rprint(f"[red]Error: Unknown key '{key}'[/red]")
        rprint(f"[dim]Known keys: {', '.join(CONFIG_KEYS)}[/dim]")
        raise typer.Exit(code=1)

    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError as e:
        rprint(f"[red]Error: Cannot parse value: {e}[/red]")
        raise typer.Exit(code=1)

    set_config_value(key, parsed)
    rprint(f"[green]✓ Set {key} = {parsed!r}[/green] in {CONFIG_PATH}")


@config_app.command("path")
def config_path():
    """Show the config file path."""
    from ..config import CONFIG_PATH
    print(CONFIG_PATH)
