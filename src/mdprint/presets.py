"""
Layout presets: page geometry plus the stylesheet parameters for each of the
three output modes.

Viewports match the A4 aspect ratio of the printed page because Mermaid lays
diagrams out against the viewport, not the final page.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

from .settings import FONT_SIZES

DOCUMENT = "document"
LANDSCAPE = "landscape"
SLIDES = "slides"


def _margin(top: str, right: str, bottom: str, left: str) -> Mapping[str, str]:
    # Read-only: presets are shared process-wide
    return MappingProxyType({"top": top, "right": right, "bottom": bottom, "left": left})


@dataclass(frozen=True)
class RenderConfig:
    """Print options handed unchanged to the renderer."""

    viewport_width: int
    viewport_height: int
    landscape: bool
    margin: Mapping[str, str] = field(default_factory=lambda: _margin("0.5in", "0.5in", "0.5in", "0.5in"))
    display_header_footer: bool = False
    print_background: bool = True
    page_format: str = "A4"
    log_message: str = "Generating PDF..."


@dataclass(frozen=True)
class Preset:
    """Everything that distinguishes one output mode from another."""

    name: str
    render: RenderConfig
    page_size: str
    page_margin: str
    default_title: str
    slides: bool = False
    body_font_size: str = "11pt"
    line_height: str = "1.4"
    heading_sizes: tuple = ("20pt", "16pt", "14pt", "13pt")
    table_font_size: str = FONT_SIZES.table
    code_block_font_size: str = FONT_SIZES.code_block
    inline_code_font_size: str = FONT_SIZES.inline_code
    diagram_font_size: str = FONT_SIZES.diagram
    diagram_max_height: int = 800
    script_context: str = "better settings for A4"


PRESETS: Dict[str, Preset] = {
    DOCUMENT: Preset(
        name=DOCUMENT,
        render=RenderConfig(
            viewport_width=794,
            viewport_height=1123,
            landscape=False,
            log_message="Generating clean A4 portrait PDF...",
        ),
        page_size="A4 portrait",
        page_margin="0.5in",
        default_title="Document",
        table_font_size="10pt",
        script_context="better settings for A4 portrait",
    ),
    LANDSCAPE: Preset(
        name=LANDSCAPE,
        render=RenderConfig(
            viewport_width=1123,
            viewport_height=794,
            landscape=True,
            log_message="Generating clean A4 landscape PDF...",
        ),
        page_size="A4 landscape",
        page_margin="0.5in",
        default_title="Document",
        script_context="better settings for A4 landscape",
    ),
    SLIDES: Preset(
        name=SLIDES,
        render=RenderConfig(
            viewport_width=1123,
            viewport_height=794,
            landscape=True,
            margin=_margin("0.2in", "0.35in", "0.2in", "0.35in"),
            log_message="Generating landscape PDF for slides...",
        ),
        page_size="A4 landscape",
        page_margin="0.2in 0.35in",
        default_title="Presentation",
        slides=True,
        body_font_size="13pt",
        line_height="1.5",
        heading_sizes=("31pt", "23pt", "19pt", "15pt"),
        table_font_size=FONT_SIZES.table_slides,
        code_block_font_size=FONT_SIZES.code_block_slides,
        inline_code_font_size=FONT_SIZES.inline_code_slides,
        diagram_max_height=600,
        script_context="settings for landscape slides",
    ),
}


def get_preset(name: str) -> Preset:
    """Look up a preset by mode name.

    Raises:
        ValueError: If name is not one of document, landscape, slides
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown mode {name!r}; expected one of {', '.join(PRESETS)}") from None
