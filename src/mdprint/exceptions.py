"""
Exceptions raised by mdprint.

User input problems and fatal renderer failures propagate to the CLI, which
turns them into exit code 1. UnsupportedLanguageError never leaves the
rewriter: it only selects the plain code block fallback.
"""


class MdPrintError(Exception):
    """Base class for all mdprint errors."""


class InputFileError(MdPrintError):
    """Source Markdown file is missing, unreadable or not UTF-8."""


class FrontMatterError(MdPrintError):
    """Leading front matter block is not valid YAML."""


class UnsupportedLanguageError(MdPrintError):
    """Highlighter has no grammar for the requested language tag."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")


class BrowserLaunchError(MdPrintError):
    """Headless Chromium could not be started."""


class RenderError(MdPrintError):
    """Page load or PDF printing failed."""
