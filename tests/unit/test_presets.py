"""Tests for layout presets."""

import pytest

from mdprint.presets import DOCUMENT, LANDSCAPE, PRESETS, SLIDES, get_preset


class TestPresets:
    """Tests for the three built-in presets"""

    def test_three_modes(self):
        assert set(PRESETS) == {DOCUMENT, LANDSCAPE, SLIDES}

    def test_portrait_document(self):
        render = get_preset(DOCUMENT).render
        assert render.landscape is False
        assert (render.viewport_width, render.viewport_height) == (794, 1123)
        assert render.margin == {"top": "0.5in", "right": "0.5in", "bottom": "0.5in", "left": "0.5in"}

    def test_landscape_document(self):
        render = get_preset(LANDSCAPE).render
        assert render.landscape is True
        assert (render.viewport_width, render.viewport_height) == (1123, 794)

    def test_slides(self):
        preset = get_preset(SLIDES)
        assert preset.slides is True
        assert preset.render.landscape is True
        assert preset.render.margin == {"top": "0.2in", "right": "0.35in", "bottom": "0.2in", "left": "0.35in"}
        assert preset.default_title == "Presentation"

    @pytest.mark.parametrize("mode", [DOCUMENT, LANDSCAPE, SLIDES])
    def test_margin_is_read_only(self, mode):
        margin = get_preset(mode).render.margin
        with pytest.raises(TypeError):
            margin["top"] = "0in"
        assert get_preset(mode).render.margin["top"] != "0in"

    @pytest.mark.parametrize("mode", [DOCUMENT, LANDSCAPE, SLIDES])
    def test_common_print_options(self, mode):
        render = get_preset(mode).render
        assert render.page_format == "A4"
        assert render.print_background is True
        assert render.display_header_footer is False

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown mode"):
            get_preset("poster")
