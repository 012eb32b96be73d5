"""
Static defaults for mdprint.

Everything here can be overridden from ~/.mdprint/config.yaml (see config.py);
these values are what a fresh install uses.
"""

import os
from dataclasses import dataclass
from pathlib import Path


def get_mdprint_dir() -> Path:
    """Base directory for mdprint's config file.

    Respects MDPRINT_DIR so tests and CI can isolate themselves.
    """
    env_dir = os.environ.get("MDPRINT_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".mdprint"


# Languages the highlighter loads grammars for. Anything else falls back to
# a plain code block.
SUPPORTED_LANGUAGES = (
    "c", "python", "javascript", "typescript", "bash", "json", "yaml",
    "markdown", "ruby", "sql", "html", "css", "java", "go", "rust",
    "php", "csharp", "cpp",
)

# Pygments style used for inline-colored code blocks
DEFAULT_THEME = "default"

# Fence tag reserved for client-side diagrams
DIAGRAM_LANGUAGE = "mermaid"

MERMAID_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mermaid@10.6.1/dist/mermaid.min.js"
FONT_STYLESHEET_URL = (
    "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"
)

# Chromium flags for headless printing in containers and CI
CHROMIUM_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
    "--disable-web-security",
    "--disable-features=VizDisplayCompositor",
)


@dataclass(frozen=True)
class RendererTimeouts:
    """Bounds (seconds) for every wait the renderer performs."""

    navigation: float = 30.0
    fonts: float = 10.0
    diagrams: float = 30.0
    diagram_poll_interval: float = 1.0
    settle: float = 3.0


TIMEOUTS = RendererTimeouts()


@dataclass(frozen=True)
class FontSizes:
    """Font sizes shared by the document and slide stylesheets."""

    table: str = "8pt"
    table_slides: str = "9pt"
    code_block: str = "8pt"
    code_block_slides: str = "10pt"
    inline_code: str = "8pt"
    inline_code_slides: str = "10pt"
    diagram: str = "8pt"


FONT_SIZES = FontSizes()
