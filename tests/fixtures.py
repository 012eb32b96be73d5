"""
Test doubles for mdprint unit tests.

StubHighlighter and RecordingRenderer stand in for Pygments and Chromium so
pipeline tests run without a browser.
"""

import html
from typing import List, Optional, Tuple

from mdprint.exceptions import UnsupportedLanguageError

# Smallest byte string a PDF reader recognizes as a header
FAKE_PDF = b"%PDF-1.7\n%fake\n%%EOF\n"


class StubHighlighter:
    """Highlighter that wraps code in a marker element.

    Records every call so tests can assert how often each block was
    highlighted.
    """

    def __init__(self, languages: Tuple[str, ...] = ("text", "python", "bash")):
        self._languages = languages
        self.calls: List[Tuple[str, str]] = []

    @property
    def languages(self) -> Tuple[str, ...]:
        return self._languages

    def supports(self, language: str) -> bool:
        return language in self._languages

    def highlight(self, code: str, language: str) -> str:
        self.calls.append((code, language))
        if not self.supports(language):
            raise UnsupportedLanguageError(language)
        return f'<pre class="stub-{language}">{html.escape(code)}</pre>\n'


class RecordingRenderer:
    """Renderer that records its input and returns a fixed PDF."""

    def __init__(self, pdf: bytes = FAKE_PDF, error: Optional[Exception] = None):
        self.pdf = pdf
        self.error = error
        self.calls = []

    def render(self, html: str, config) -> bytes:
        self.calls.append((html, config))
        if self.error is not None:
            raise self.error
        return self.pdf

    @property
    def last_html(self) -> str:
        return self.calls[-1][0]

    @property
    def last_config(self):
        return self.calls[-1][1]


SAMPLE_DOCUMENT = """\
---
title: Pipeline Test
---
# Overview

Some text.

```python
print(1)
```

```mermaid
graph TD; A-->B;
```
"""
