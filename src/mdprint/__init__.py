"""
mdprint - Markdown to PDF documents and slide decks via headless Chromium.
"""

from importlib.metadata import PackageNotFoundError, version


def _source_tree_version() -> str:
    # Running from a checkout without an install: read pyproject.toml
    import tomllib
    from pathlib import Path

    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    with open(pyproject, "rb") as f:
        return tomllib.load(f)["project"]["version"]


try:
    __version__ = version("mdprint")
except PackageNotFoundError:
    __version__ = _source_tree_version()
