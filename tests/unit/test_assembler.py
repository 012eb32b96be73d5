"""Tests for HTML assembly."""

import re
from html.parser import HTMLParser

import pytest

from mdprint.assembler import (
    SETTLED_FLAG,
    assemble_document,
    assemble_slides,
    build_stylesheet,
    diagram_init_script,
)
from mdprint.presets import DOCUMENT, LANDSCAPE, SLIDES, get_preset
from mdprint.settings import MERMAID_SCRIPT_URL


class TestBuildStylesheet:
    """Tests for per-preset stylesheets"""

    def test_portrait_page_size(self):
        css = build_stylesheet(get_preset(DOCUMENT))
        assert "size: A4 portrait;" in css
        assert "margin: 0.5in;" in css

    def test_landscape_page_size(self):
        css = build_stylesheet(get_preset(LANDSCAPE))
        assert "size: A4 landscape;" in css

    def test_slides_page_geometry(self):
        css = build_stylesheet(get_preset(SLIDES))
        assert "size: A4 landscape;" in css
        assert "margin: 0.2in 0.35in;" in css
        assert ".slide {" in css
        assert ".slide:last-child {" in css

    def test_document_css_has_no_slide_rules(self):
        assert ".slide" not in build_stylesheet(get_preset(DOCUMENT))

    @pytest.mark.parametrize("mode,table,code", [
        (DOCUMENT, "10pt", "8pt"),
        (LANDSCAPE, "8pt", "8pt"),
        (SLIDES, "9pt", "10pt"),
    ])
    def test_font_size_tables(self, mode, table, code):
        css = build_stylesheet(get_preset(mode))
        table_rule = re.search(r"table \{[^}]*font-size: ([^;]+);", css)
        code_rule = re.search(r"\.highlight pre, pre \{[^}]*font-size: ([^;]+);", css)
        assert table_rule.group(1) == table
        assert code_rule.group(1) == code

    def test_diagram_font_size_is_shared(self):
        for mode in (DOCUMENT, LANDSCAPE, SLIDES):
            assert "font-size: 8pt !important;" in build_stylesheet(get_preset(mode))


class TestDiagramInitScript:
    """Tests for the Mermaid initialization script"""

    def test_runs_mermaid_explicitly(self):
        script = diagram_init_script("testing")
        assert "startOnLoad: false" in script
        assert "mermaid.run(" in script

    def test_sets_settled_flag(self):
        script = diagram_init_script("testing")
        assert f"window.{SETTLED_FLAG} = false;" in script
        assert f"window.{SETTLED_FLAG} = true;" in script

    def test_handles_missing_mermaid(self):
        assert "if (!window.mermaid)" in diagram_init_script("testing")

    def test_context_in_comment(self):
        assert "// Initialize Mermaid with A4 portrait" in diagram_init_script("A4 portrait")


class TestAssembleDocument:
    """Tests for assemble_document"""

    def test_wraps_fragment(self):
        html = assemble_document("<p>hello</p>", {}, get_preset(DOCUMENT))
        assert html.startswith("<!DOCTYPE html>")
        assert '<div class="container">\n<p>hello</p>\n  </div>' in html

    def test_title_from_front_matter(self):
        html = assemble_document("", {"title": "Annual Report"}, get_preset(DOCUMENT))
        assert "<title>Annual Report</title>" in html

    def test_default_title(self):
        html = assemble_document("", {}, get_preset(LANDSCAPE))
        assert "<title>Document</title>" in html

    def test_title_is_escaped(self):
        html = assemble_document("", {"title": "R&D <2024>"}, get_preset(DOCUMENT))
        assert "<title>R&amp;D &lt;2024&gt;</title>" in html

    def test_loads_mermaid(self):
        html = assemble_document("", {}, get_preset(DOCUMENT))
        assert f'<script src="{MERMAID_SCRIPT_URL}"></script>' in html

    def test_custom_mermaid_url(self):
        html = assemble_document("", {}, get_preset(DOCUMENT), mermaid_url="file:///opt/mermaid.js")
        assert '<script src="file:///opt/mermaid.js"></script>' in html

    def test_diagram_fragment_untouched(self):
        fragment = '<div class="mermaid">graph TD; A-->B;</div>\n'
        html = assemble_document(fragment, {}, get_preset(DOCUMENT))
        assert fragment in html


class ChildCollector(HTMLParser):
    """Records (tag, class) of the direct children of the first element with parent_class."""

    VOID = {"meta", "link", "br", "hr", "img"}

    def __init__(self, parent_class):
        super().__init__()
        self.parent_class = parent_class
        self.children = []
        self._depth = 0
        self._inside = None

    def handle_starttag(self, tag, attrs):
        if tag in self.VOID:
            return
        self._depth += 1
        css_class = dict(attrs).get("class")
        if self._inside is None and css_class == self.parent_class:
            self._inside = self._depth
        elif self._inside is not None and self._depth == self._inside + 1:
            self.children.append((tag, css_class))

    def handle_endtag(self, tag):
        if tag in self.VOID:
            return
        if self._depth == self._inside:
            self._inside = -1
        self._depth -= 1


def deck_children(html):
    collector = ChildCollector("deck")
    collector.feed(html)
    return collector.children


class TestAssembleSlides:
    """Tests for assemble_slides"""

    def test_each_fragment_in_slide_container(self):
        html = assemble_slides(["<h1>A</h1>", "<h1>B</h1>", "<h1>C</h1>"], {}, get_preset(SLIDES))
        slides = re.findall(r'<div class="slide">(.*?)</div>', html)
        assert slides == ["<h1>A</h1>", "<h1>B</h1>", "<h1>C</h1>"]

    def test_last_slide_is_last_child(self):
        html = assemble_slides(["<h1>A</h1>", "<h1>B</h1>"], {}, get_preset(SLIDES))
        assert deck_children(html) == [("div", "slide"), ("div", "slide")]

    def test_scripts_outside_deck(self):
        html = assemble_slides(["<h1>A</h1>"], {}, get_preset(SLIDES))
        body = html.split("<body>", 1)[1]
        assert body.rfind("</div>") < body.rfind("<script>")

    def test_default_title(self):
        html = assemble_slides(["<p>x</p>"], {}, get_preset(SLIDES))
        assert "<title>Presentation</title>" in html

    def test_title_from_front_matter(self):
        html = assemble_slides(["<p>x</p>"], {"title": "Kickoff"}, get_preset(SLIDES))
        assert "<title>Kickoff</title>" in html

    def test_no_container_div(self):
        html = assemble_slides(["<p>x</p>"], {}, get_preset(SLIDES))
        assert '<div class="container">' not in html
