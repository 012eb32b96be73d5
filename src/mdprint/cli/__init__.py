"""
CLI interface for mdprint using Typer.

`mdprint` is the umbrella command; md-to-pdf, md-to-pdf-landscape and
md-to-slides are single-purpose entry points sharing the same runner.
"""

# Import shared state (apps, options, runner) first
from ._shared import app, config_app, run_conversion, usage_text  # noqa: F401

# Import submodules to register their commands with the Typer apps
from . import convert  # noqa: F401
from . import config  # noqa: F401

from .convert import document_app, landscape_app, slides_app  # noqa: F401


def main():
    """Main entry point for the CLI."""
    app()


def main_document():
    """Entry point for md-to-pdf."""
    document_app()


def main_landscape():
    """Entry point for md-to-pdf-landscape."""
    landscape_app()


def main_slides():
    """Entry point for md-to-slides."""
    slides_app()


if __name__ == "__main__":
    main()
