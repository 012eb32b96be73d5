"""
End-to-end conversions through a real Chromium.

Network access is not required: when the font and Mermaid CDNs are
unreachable the bounded waits time out and printing goes ahead.
"""

import subprocess
import sys

import pytest

from mdprint.converter import convert_file
from tests.fixtures import SAMPLE_DOCUMENT

pytestmark = pytest.mark.e2e


def assert_pdf(path):
    data = path.read_bytes()
    assert data.startswith(b"%PDF")
    assert len(data) > 1000


class TestConvertFile:
    """In-process conversion for each mode"""

    @pytest.mark.parametrize("mode", ["document", "landscape", "slides"])
    def test_writes_pdf(self, tmp_path, chromium_available, mode):
        source = tmp_path / "sample.md"
        source.write_text(SAMPLE_DOCUMENT)

        result = convert_file(source, mode=mode)

        assert result == (tmp_path / "sample.pdf").resolve()
        assert_pdf(result)

    def test_slide_deck(self, tmp_path, chromium_available):
        source = tmp_path / "deck.md"
        source.write_text("# One\n\n- a\n- b\n---\n# Two\n\n```bash\necho hi\n```\n---\n# Three\n")
        target = tmp_path / "out" / "deck.pdf"

        result = convert_file(source, target, mode="slides")

        assert result == target.resolve()
        assert_pdf(target)

    def test_unsupported_language_still_renders(self, tmp_path, chromium_available):
        source = tmp_path / "odd.md"
        source.write_text("# Odd\n\n```brainfuck-ish\n+++\n```\n")

        assert_pdf(convert_file(source))


class TestCommandLine:
    """The standalone scripts as subprocesses"""

    def test_document_via_module(self, tmp_path, chromium_available, subprocess_env):
        source = tmp_path / "doc.md"
        source.write_text(SAMPLE_DOCUMENT)

        result = subprocess.run(
            [sys.executable, "-m", "mdprint", "document", str(source)],
            capture_output=True,
            text=True,
            env=subprocess_env,
            timeout=180,
        )

        assert result.returncode == 0, result.stderr
        assert "Successfully converted" in result.stdout
        assert_pdf(tmp_path / "doc.pdf")

    def test_missing_input_exits_nonzero(self, tmp_path, subprocess_env):
        result = subprocess.run(
            [sys.executable, "-m", "mdprint", "slides", str(tmp_path / "missing.md")],
            capture_output=True,
            text=True,
            env=subprocess_env,
            timeout=60,
        )

        assert result.returncode == 1
        assert "Input file not found" in result.stderr
        assert not (tmp_path / "missing.pdf").exists()
