"""
Shared CLI state: Typer apps, consoles, options, and the conversion runner.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from ..presets import DOCUMENT, LANDSCAPE, SLIDES

# Main app
app = typer.Typer(
    name="mdprint",
    help="Convert Markdown to PDF documents and slide decks",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Config subcommand group
config_app = typer.Typer(
    name="config",
    help="Manage configuration",
    no_args_is_help=False,
    invoke_without_command=True,
)
app.add_typer(config_app, name="config")

# Consoles for rich output; diagnostics go to stderr
console = Console()
err_console = Console(stderr=True)

# Standalone program name and extra usage line for each mode
PROGRAMS = {
    DOCUMENT: ("md-to-pdf", None),
    LANDSCAPE: ("md-to-pdf-landscape", None),
    SLIDES: ("md-to-slides", "Slides are separated by --- in the markdown file"),
}

InputArgument = Annotated[
    Optional[str],
    typer.Argument(help="Markdown file to convert", show_default=False),
]

OutputArgument = Annotated[
    Optional[str],
    typer.Argument(
        help="PDF to write (default: next to the input, same name, .pdf)",
        show_default=False,
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log debug detail"),
]

LogFileOption = Annotated[
    Optional[Path],
    typer.Option("--log-file", help="Also append log records to this file", show_default=False),
]


def usage_text(program: str, extra: Optional[str] = None) -> str:
    lines = [
        f"Usage: {program} <input.md> [output.pdf]",
        "If output.pdf is not specified, it will be generated in the same directory as input.md",
    ]
    if extra:
        lines.append(extra)
    return "\n".join(lines)


def run_conversion(
    mode: str,
    input_path: Optional[str],
    output_path: Optional[str],
    verbose: bool = False,
    program: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> None:
    """Run one conversion and exit like the standalone scripts.

    Missing input prints usage and exits 1. Any failure prints a short
    message plus the traceback on stderr and exits 1.
    """
    default_program, extra = PROGRAMS[mode]
    if not input_path:
        typer.echo(usage_text(program or default_program, extra))
        raise typer.Exit(1)

    from ..converter import convert_file, resolve_paths
    from ..logging_config import setup_cli_logging

    log = setup_cli_logging(verbose=verbose, log_file=log_file)
    source, target = resolve_paths(input_path, output_path)
    log.info(f"Converting ({mode}): {source} -> {target}")

    try:
        result = convert_file(source, target, mode=mode)
    except Exception as e:
        err_console.print(f"[red]❌ Error:[/red] {e}")
        err_console.print_exception()
        raise typer.Exit(1)

    console.print(f"[green]✅ Successfully converted to PDF:[/green] {result}")
