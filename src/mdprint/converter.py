"""
Markdown to PDF conversion pipeline.

One pipeline serves all three output modes; a Preset supplies everything
that differs between them. Steps run strictly in order:

    read -> strip front matter -> parse + rewrite -> assemble -> render -> write
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .assembler import assemble_document, assemble_slides
from .exceptions import InputFileError
from .front_matter import parse_front_matter
from .logging_config import get_structured_logger
from .presets import DOCUMENT, Preset, get_preset
from .protocols import HighlighterInterface, RendererInterface
from .rewriter import TokenRewriter, build_parser
from .slides import split_slides

PathLike = Union[str, Path]


def resolve_paths(input_path: PathLike, output_path: Optional[PathLike] = None) -> Tuple[Path, Path]:
    """Resolve CLI paths.

    Backslashes in the input path are normalized to forward slashes. Without
    an explicit output, the PDF goes next to the input: docs/a.md -> docs/a.pdf.
    An explicit output is used verbatim.
    """
    source = Path(str(input_path).replace("\\", "/"))
    if output_path:
        return source, Path(output_path)
    return source, (source.parent / f"{source.stem}.pdf").resolve()


class Converter:
    """Converts Markdown files to PDF for one preset.

    The highlighter and renderer are injected; when omitted, the
    process-wide highlighter and a PlaywrightRenderer are created on first
    use. The Markdown parser is configured once per converter.
    """

    def __init__(
        self,
        preset: Preset,
        highlighter: Optional[HighlighterInterface] = None,
        renderer: Optional[RendererInterface] = None,
        mermaid_url: Optional[str] = None,
    ):
        self.preset = preset
        self._highlighter = highlighter
        self._renderer = renderer
        self._mermaid_url = mermaid_url
        self._parser = None
        self._rewriter: Optional[TokenRewriter] = None
        self.log = get_structured_logger("converter").with_context(mode=preset.name)

    @property
    def highlighter(self) -> HighlighterInterface:
        if self._highlighter is None:
            from .highlighter import get_highlighter

            self._highlighter = get_highlighter()
        return self._highlighter

    @property
    def renderer(self) -> RendererInterface:
        if self._renderer is None:
            from .renderer import PlaywrightRenderer

            self._renderer = PlaywrightRenderer()
        return self._renderer

    @property
    def mermaid_url(self) -> str:
        if self._mermaid_url is None:
            from .config import get_mermaid_script_url

            self._mermaid_url = get_mermaid_script_url()
        return self._mermaid_url

    @property
    def rewriter(self) -> TokenRewriter:
        if self._rewriter is None:
            self._rewriter = TokenRewriter(self.highlighter)
        return self._rewriter

    def configure_parser(self):
        """Build the parser and install the rewriter; repeat calls reuse it."""
        if self._parser is None:
            self._parser = build_parser()
        self.rewriter.install(self._parser)
        return self._parser

    def render_markdown(self, markdown: str) -> str:
        """Render Markdown to an HTML fragment with code blocks rewritten."""
        return self.configure_parser().render(markdown)

    def generate_html(self, markdown: str, front_matter: Optional[Dict[str, Any]] = None) -> str:
        """Build the complete HTML page for this converter's preset."""
        front_matter = front_matter or {}
        if self.preset.slides:
            slides = split_slides(markdown)
            self.log.info(f"Found {len(slides)} slides")
            fragments = [self.render_markdown(slide) for slide in slides]
            return assemble_slides(fragments, front_matter, self.preset, self.mermaid_url)
        fragment = self.render_markdown(markdown)
        return assemble_document(fragment, front_matter, self.preset, self.mermaid_url)

    def convert(self, input_path: PathLike, output_path: PathLike) -> Path:
        """Convert one Markdown file to a PDF file.

        Nothing is written unless rendering succeeds.

        Returns:
            Resolved output path

        Raises:
            InputFileError: If the source cannot be read
            FrontMatterError: If the front matter is malformed
            BrowserLaunchError, RenderError: If rendering fails
        """
        source = Path(input_path)
        target = Path(output_path)

        self.log.info(f"Reading markdown file: {source}")
        text = read_markdown(source)
        self.log.info(f"File size: {len(text)} characters")

        front_matter, content = parse_front_matter(text)
        self.log.info(f"Content size after frontmatter: {len(content)} characters")

        html = self.generate_html(content, front_matter)
        self.log.info(f"Generated HTML size: {len(html)} characters")

        pdf = self.renderer.render(html, self.preset.render)
        self.log.info(f"Generated PDF size: {len(pdf)} bytes")

        target = target.resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(pdf)
        return target


def read_markdown(path: Path) -> str:
    """Read a UTF-8 Markdown file.

    Raises:
        InputFileError: If the file is missing, unreadable, or not UTF-8
    """
    if not path.is_file():
        raise InputFileError(f"Input file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputFileError(f"Input file is not valid UTF-8: {path}") from e
    except OSError as e:
        raise InputFileError(f"Cannot read input file {path}: {e}") from e


def convert_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    mode: str = DOCUMENT,
) -> Path:
    """Convert a Markdown file using the named mode's preset.

    Returns:
        Path of the written PDF
    """
    source, target = resolve_paths(input_path, output_path)
    return Converter(get_preset(mode)).convert(source, target)
