"""
Protocol definitions for the pipeline's external collaborators.

These interfaces allow dependency injection for testing, so the converter
can run with a stub highlighter or a renderer that never launches Chromium.
"""

from typing import Protocol, Tuple, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from .presets import RenderConfig


@runtime_checkable
class HighlighterInterface(Protocol):
    """Interface for syntax highlighting"""

    @property
    def languages(self) -> Tuple[str, ...]:
        """Language tags this highlighter accepts."""
        ...

    def supports(self, language: str) -> bool:
        """Check whether a language tag has a loaded grammar."""
        ...

    def highlight(self, code: str, language: str) -> str:
        """Render source text as styled markup.

        Args:
            code: Raw source text
            language: Fence language tag

        Returns:
            Self-contained HTML fragment

        Raises:
            UnsupportedLanguageError: If no grammar matches the tag
        """
        ...


@runtime_checkable
class RendererInterface(Protocol):
    """Interface for printing an HTML document to PDF"""

    def render(self, html: str, config: "RenderConfig") -> bytes:
        """Print a complete HTML document.

        Args:
            html: Full HTML document
            config: Page geometry and print options

        Returns:
            PDF bytes

        Raises:
            BrowserLaunchError: If the browser cannot start
            RenderError: If loading or printing fails
        """
        ...
