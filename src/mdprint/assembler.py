"""
HTML document assembly.

Wraps rendered Markdown in a complete page for one preset: @page geometry,
the preset's stylesheet, the Mermaid loader and its initialization script.
Pure string composition.
"""

import html
from typing import Any, Dict, List, Optional

from .front_matter import get_title
from .presets import Preset
from .settings import FONT_STYLESHEET_URL, MERMAID_SCRIPT_URL

SETTLED_FLAG = "__mdprintLayoutSettled"


def _base_css(preset: Preset) -> str:
    h1, h2, h3, h4 = preset.heading_sizes
    return f"""
    @import url('{FONT_STYLESHEET_URL}');

    @page {{
      size: {preset.page_size};
      margin: {preset.page_margin};
    }}

    * {{
      box-sizing: border-box;
    }}

    body {{
      font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
      font-size: {preset.body_font_size};
      line-height: {preset.line_height};
      color: #222222;
      margin: 0;
      padding: 0;
      background: white;
      width: 100%;
      overflow-x: hidden;
    }}

    h1, h2, h3, h4, h5, h6 {{
      font-family: 'Inter', sans-serif;
      color: #1a1a1a;
      page-break-after: avoid !important;
      break-after: avoid-page !important;
      page-break-inside: avoid !important;
      break-inside: avoid !important;
    }}

    h1 {{ font-size: {h1}; font-weight: 700; margin-top: 0; }}
    h2 {{ font-size: {h2}; font-weight: 600; color: #2d3748; }}
    h3 {{ font-size: {h3}; font-weight: 600; }}
    h4 {{ font-size: {h4}; font-weight: 500; }}

    table {{
      border-collapse: collapse;
      width: 100%;
      margin: 1em 0;
      font-size: {preset.table_font_size};
      page-break-inside: avoid;
    }}

    th, td {{
      border: 1px solid #e2e8f0;
      text-align: left;
      vertical-align: top;
    }}

    th {{
      background: #f7fafc;
      font-weight: 600;
    }}

    /* Highlighted and plain code blocks; keep colors when printing */
    .highlight, pre {{
      border-radius: 4px;
      page-break-inside: avoid;
      break-inside: avoid;
      -webkit-print-color-adjust: exact;
      print-color-adjust: exact;
      color-adjust: exact;
    }}

    .highlight pre, pre {{
      font-family: 'SF Mono', Monaco, Consolas, monospace;
      font-size: {preset.code_block_font_size};
      overflow-x: auto;
      white-space: pre-wrap;
      border: 1px solid #e2e8f0;
      border-radius: 4px;
    }}

    .highlight pre {{
      margin: 0;
    }}

    :not(pre) > code {{
      font-family: 'SF Mono', Monaco, Consolas, monospace;
      font-size: {preset.inline_code_font_size};
      background: #f1f3f4;
      border-radius: 3px;
    }}

    h1 code, h2 code, h3 code, h4 code, h5 code, h6 code {{
      font-size: 0.85em;
      background: #f1f3f4;
    }}

    .mermaid {{
      text-align: center;
      margin: 1.5em 0;
      padding: 1em;
      background: #f8f9fa;
      border-radius: 6px;
      overflow-x: auto;
      page-break-inside: avoid;
      break-inside: avoid;
      page-break-before: avoid;
      max-height: {preset.diagram_max_height}px;
    }}

    .mermaid svg {{
      max-width: 100%;
      max-height: {preset.diagram_max_height - 50}px;
      height: auto;
      display: block;
      margin: 0 auto;
    }}

    .mermaid svg text,
    .mermaid svg tspan,
    .mermaid svg foreignObject {{
      font-size: {preset.diagram_font_size} !important;
    }}

    strong {{ font-weight: 600; }}
    em {{ font-style: italic; }}

    :is(h1,h2,h3,h4,h5,h6) + :is(p, ul, ol, pre, table, blockquote, .highlight, .mermaid) {{
      break-before: avoid-page !important;
    }}
"""


def _document_css() -> str:
    return """
    .container {
      max-width: 100%;
      margin: 0 auto;
      padding: 0;
    }

    h1, h2, h3, h4, h5, h6 {
      margin: 1.5em 0 0.5em 0;
      clear: both;
    }

    h1 { margin-top: 0; }

    p {
      margin: 0 0 0.8em 0;
    }

    ul, ol {
      margin: 0.5em 0;
      padding-left: 1.2em;
      page-break-inside: avoid;
    }

    li {
      margin: 0.2em 0;
      page-break-inside: avoid;
    }

    p, li {
      orphans: 3;
      widows: 3;
    }

    th, td { padding: 6px 10px; }

    .highlight pre, pre { padding: 0.8em; }
    .highlight { margin: 0.8em 0; }
    pre { margin: 0.8em 0; }
    :not(pre) > code { padding: 2px 4px; }

    blockquote {
      border-left: 4px solid #e2e8f0;
      padding-left: 1em;
      margin: 1em 0;
      color: #666;
      page-break-inside: avoid;
    }

    .page-break {
      page-break-before: always;
      break-before: page;
    }
"""


def _slides_css(preset: Preset) -> str:
    return f"""
    .slide {{
      width: 100%;
      min-height: 100vh;
      padding: 0.75em 1em;
      page-break-after: always;
      break-after: page;
      page-break-inside: avoid;
      break-inside: avoid;
      display: flex;
      flex-direction: column;
      justify-content: flex-start;
    }}

    .slide:last-child {{
      page-break-after: auto;
      break-after: auto;
    }}

    h1, h2, h3, h4, h5, h6 {{
      margin: 0.5em 0 0.5em 0;
    }}

    h1 {{ margin-top: 0; color: #0066cc; }}

    p {{
      margin: 0 0 1em 0;
      font-size: {preset.body_font_size};
    }}

    ul, ol {{
      margin: 0.5em 0;
      padding-left: 1.5em;
      page-break-inside: avoid;
    }}

    li {{
      margin: 0.4em 0;
      page-break-inside: avoid;
      font-size: {preset.body_font_size};
    }}

    th, td {{ padding: 8px 12px; }}

    .highlight pre, pre {{ padding: 1em; border-radius: 6px; }}
    .highlight {{ margin: 1em 0; border-radius: 6px; }}
    pre {{ margin: 1em 0; }}
    :not(pre) > code {{ padding: 2px 6px; }}

    blockquote {{
      border-left: 4px solid #0066cc;
      padding-left: 1em;
      margin: 1em 0;
      color: #666;
      page-break-inside: avoid;
      font-style: italic;
    }}
"""


def build_stylesheet(preset: Preset) -> str:
    """CSS for a preset: shared rules plus the document or slide layer."""
    layer = _slides_css(preset) if preset.slides else _document_css()
    return _base_css(preset) + layer


def diagram_init_script(context: str) -> str:
    """Mermaid initialization for the page.

    Diagrams are rendered explicitly with mermaid.run(). Two animation frames
    after that settles (or straight away when Mermaid failed to load),
    window.__mdprintLayoutSettled is set so the renderer knows layout is done.
    """
    return f"""
    window.{SETTLED_FLAG} = false;
    (function () {{
      function settle() {{
        requestAnimationFrame(function () {{
          requestAnimationFrame(function () {{
            window.{SETTLED_FLAG} = true;
          }});
        }});
      }}

      if (!window.mermaid) {{
        console.warn('Mermaid not loaded; diagrams stay as source text');
        settle();
        return;
      }}

      // Initialize Mermaid with {context}
      mermaid.initialize({{
        startOnLoad: false,
        theme: 'default',
        themeVariables: {{
          fontFamily: 'Inter, sans-serif'
        }},
        flowchart: {{
          useMaxWidth: true,
          htmlLabels: true
        }},
        sequence: {{
          useMaxWidth: true
        }},
        gantt: {{
          useMaxWidth: true
        }}
      }});

      mermaid.run({{ querySelector: '.mermaid' }})
        .catch(function (err) {{
          console.error('Mermaid rendering failed', err);
        }})
        .then(function () {{
          document.querySelectorAll('.mermaid svg').forEach(function (svg) {{
            svg.style.maxWidth = '100%';
            svg.style.height = 'auto';
          }});
          settle();
        }});
    }})();"""


def _page(title: str, preset: Preset, body: str, mermaid_url: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{html.escape(title)}</title>
  <script src="{html.escape(mermaid_url)}"></script>
  <style>{build_stylesheet(preset)}
  </style>
</head>
<body>
{body}
  <script>{diagram_init_script(preset.script_context)}
  </script>
</body>
</html>"""


def assemble_document(
    fragment: str,
    front_matter: Dict[str, Any],
    preset: Preset,
    mermaid_url: Optional[str] = None,
) -> str:
    """Wrap one rendered fragment in a full document page."""
    title = get_title(front_matter, preset.default_title)
    body = f'  <div class="container">\n{fragment}\n  </div>'
    return _page(title, preset, body, mermaid_url or MERMAID_SCRIPT_URL)


def assemble_slides(
    fragments: List[str],
    front_matter: Dict[str, Any],
    preset: Preset,
    mermaid_url: Optional[str] = None,
) -> str:
    """Wrap each slide fragment in its own page-breaking slide container.

    Slides sit alone inside a deck element so the last one is also the last
    child and drops its page break.
    """
    title = get_title(front_matter, preset.default_title)
    slides = "\n".join(f'    <div class="slide">{fragment}</div>' for fragment in fragments)
    body = f'  <div class="deck">\n{slides}\n  </div>'
    return _page(title, preset, body, mermaid_url or MERMAID_SCRIPT_URL)
