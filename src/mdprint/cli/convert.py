"""
Conversion commands: document, landscape, slides.

Each mode is available as a subcommand of `mdprint` and as its own
standalone program (md-to-pdf, md-to-pdf-landscape, md-to-slides).
"""

import typer

from ..presets import DOCUMENT, LANDSCAPE, SLIDES
from ._shared import (
    PROGRAMS,
    InputArgument,
    OutputArgument,
    LogFileOption,
    VerboseOption,
    app,
    run_conversion,
)


@app.command("document")
def document(
    input_path: InputArgument = None,
    output_path: OutputArgument = None,
    verbose: VerboseOption = False,
    log_file: LogFileOption = None,
):
    """Convert Markdown to an A4 portrait PDF."""
    run_conversion(DOCUMENT, input_path, output_path, verbose, program="mdprint document", log_file=log_file)


@app.command("landscape")
def landscape(
    input_path: InputArgument = None,
    output_path: OutputArgument = None,
    verbose: VerboseOption = False,
    log_file: LogFileOption = None,
):
    """Convert Markdown to an A4 landscape PDF."""
    run_conversion(LANDSCAPE, input_path, output_path, verbose, program="mdprint landscape", log_file=log_file)


@app.command("slides")
def slides(
    input_path: InputArgument = None,
    output_path: OutputArgument = None,
    verbose: VerboseOption = False,
    log_file: LogFileOption = None,
):
    """Convert Markdown to a landscape slide deck PDF.

    Slides are separated by a line of three or more hyphens.
    """
    run_conversion(SLIDES, input_path, output_path, verbose, program="mdprint slides", log_file=log_file)


def _standalone_app(mode: str, help_text: str) -> typer.Typer:
    program, _ = PROGRAMS[mode]
    standalone = typer.Typer(name=program, help=help_text, add_completion=False)

    @standalone.command(help=help_text)
    def convert(
        input_path: InputArgument = None,
        output_path: OutputArgument = None,
        verbose: VerboseOption = False,
        log_file: LogFileOption = None,
    ):
        run_conversion(mode, input_path, output_path, verbose, program=program, log_file=log_file)

    return standalone


document_app = _standalone_app(DOCUMENT, "Convert Markdown to an A4 portrait PDF.")
landscape_app = _standalone_app(LANDSCAPE, "Convert Markdown to an A4 landscape PDF.")
slides_app = _standalone_app(
    SLIDES,
    "Convert Markdown to a landscape slide deck PDF (slides separated by ---).",
)
