"""
Syntax highlighting backed by Pygments.

Output uses inline styles (noclasses) so a highlighted block carries its own
colors into the PDF without a separate stylesheet.
"""

import logging
import threading
from typing import Dict, Iterable, Optional, Tuple

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .exceptions import UnsupportedLanguageError
from .settings import DEFAULT_THEME, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

PLAIN_TEXT = "text"


class Highlighter:
    """Pygments highlighter restricted to a fixed set of grammars.

    Each configured language is resolved once at construction and indexed
    under every alias Pygments knows for it, so "py" and "python" share a
    lexer. Read-only afterwards.
    """

    def __init__(
        self,
        languages: Iterable[str] = SUPPORTED_LANGUAGES,
        theme: str = DEFAULT_THEME,
    ):
        self._lexers: Dict[str, Lexer] = {}
        self._languages = []

        for name in (PLAIN_TEXT, *languages):
            try:
                lexer = get_lexer_by_name(name, stripnl=False)
            except ClassNotFound:
                logger.warning("No grammar for configured language %r, skipping", name)
                continue
            if name not in self._languages:
                self._languages.append(name)
            for alias in (name, *lexer.aliases):
                self._lexers.setdefault(alias.lower(), lexer)

        try:
            get_style_by_name(theme)
        except ClassNotFound:
            logger.warning("Unknown highlight theme %r, using %r", theme, DEFAULT_THEME)
            theme = DEFAULT_THEME
        self.theme = theme
        self._formatter = HtmlFormatter(style=theme, noclasses=True, cssclass="highlight")

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(self._languages)

    def supports(self, language: str) -> bool:
        return language.lower() in self._lexers

    def highlight(self, code: str, language: str) -> str:
        """Highlight code as an HTML fragment.

        Raises:
            UnsupportedLanguageError: If the tag matches no loaded grammar
        """
        lexer = self._lexers.get(language.lower())
        if lexer is None:
            raise UnsupportedLanguageError(language)
        return pygments_highlight(code, lexer, self._formatter)


_highlighter: Optional[Highlighter] = None
_highlighter_lock = threading.Lock()


def get_highlighter() -> Highlighter:
    """Get the process-wide highlighter, creating it on first use.

    Theme and languages come from the user config.
    """
    global _highlighter
    if _highlighter is None:
        with _highlighter_lock:
            if _highlighter is None:
                from .config import get_highlight_config

                theme, languages = get_highlight_config()
                logger.info("Initializing highlighter (%d languages, theme %s)", len(languages), theme)
                _highlighter = Highlighter(languages=languages, theme=theme)
                logger.debug("Highlighter ready")
    return _highlighter


def reset_highlighter() -> None:
    """Drop the process-wide highlighter so the next call rebuilds it."""
    global _highlighter
    with _highlighter_lock:
        _highlighter = None
