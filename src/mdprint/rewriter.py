"""
Code block rewriting for the Markdown token stream.

Fenced and indented code blocks are replaced with pre-rendered markup before
markdown-it renders the document:

- blocks tagged "mermaid" become a <div class="mermaid"> holding the raw
  diagram source, which the page's Mermaid script renders client-side;
- everything else is highlighted; a tag with no grammar keeps the token
  as-is so markdown-it emits a plain <pre><code> block.

The transform itself is pure (token in, token out). TokenRewriter hooks it
into a parser as a single core rule.
"""

import logging
from typing import List, Optional

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from .exceptions import UnsupportedLanguageError
from .protocols import HighlighterInterface
from .settings import DIAGRAM_LANGUAGE

logger = logging.getLogger(__name__)

CODE_TOKEN_TYPES = ("fence", "code_block")
RULE_NAME = "mdprint_code_blocks"
DEFAULT_LANGUAGE = "text"


def is_code_token(token: Token) -> bool:
    return token.type in CODE_TOKEN_TYPES


def token_language(token: Token) -> str:
    """Language tag from the fence info string ("python {.x}" -> "python")."""
    info = (token.info or "").strip()
    return info.split()[0] if info else DEFAULT_LANGUAGE


def _raw_text(token: Token) -> str:
    # markdown-it keeps the newline that precedes the closing fence
    content = token.content
    return content[:-1] if content.endswith("\n") else content


def diagram_markup(source: str) -> str:
    """Wrapper element the diagram script picks up; source is kept verbatim."""
    return f'<div class="mermaid">{source}</div>\n'


def _as_html(token: Token, markup: str) -> Token:
    return token.copy(type="html_block", tag="", info="", markup="", content=markup)


def rewrite_token(token: Token, highlighter: HighlighterInterface) -> Token:
    """Rewrite one token.

    Returns:
        A new html_block token for diagram and highlighted code blocks, or
        the input token when it is not code or cannot be highlighted
    """
    if not is_code_token(token):
        return token

    language = token_language(token)
    code = _raw_text(token)

    if language == DIAGRAM_LANGUAGE:
        return _as_html(token, diagram_markup(code))

    try:
        markup = highlighter.highlight(code, language)
    except UnsupportedLanguageError as e:
        logger.warning("Failed to highlight %s, using plain code: %s", language, e)
        return token
    return _as_html(token, markup)


def rewrite_tokens(tokens: List[Token], highlighter: HighlighterInterface) -> List[Token]:
    """Apply rewrite_token to every token, preserving order."""
    return [rewrite_token(token, highlighter) for token in tokens]


class TokenRewriter:
    """Installs the code block rewrite on a MarkdownIt parser.

    Installation is guarded: a parser that already carries the rule is left
    alone, so code blocks are never processed twice.
    """

    def __init__(self, highlighter: HighlighterInterface):
        self.highlighter = highlighter
        self.rewritten = 0

    def install(self, md: MarkdownIt) -> bool:
        """Register the rewrite as a core rule on md.

        Returns:
            True if registered, False if md already had the rule
        """
        if RULE_NAME in md.core.ruler.get_all_rules():
            logger.debug("Code block rewriter already installed, skipping")
            return False
        md.core.ruler.push(RULE_NAME, self._core_rule)
        return True

    def _core_rule(self, state: StateCore) -> None:
        self.rewritten += sum(1 for token in state.tokens if is_code_token(token))
        state.tokens[:] = rewrite_tokens(state.tokens, self.highlighter)


def build_parser(rewriter: Optional[TokenRewriter] = None) -> MarkdownIt:
    """Create the GitHub-flavoured parser used for every conversion.

    Raw HTML is passed through; tables and strikethrough are enabled.
    """
    md = MarkdownIt("commonmark", {"html": True, "breaks": False})
    md.enable(["table", "strikethrough"])
    if rewriter is not None:
        rewriter.install(md)
    return md
