"""
Front matter parsing.

A document may open with a YAML block fenced by "---" lines:

    ---
    title: Quarterly Review
    ---
    # Body starts here

Only "title" is used downstream, but the whole mapping is returned.
"""

import re
from typing import Any, Dict, Tuple

import yaml

from .exceptions import FrontMatterError

_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?P<yaml>.*?)(?:\r?\n)?^---[ \t]*\r?$(?:\r?\n)?",
    re.DOTALL | re.MULTILINE,
)


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a document into (front matter, content).

    Args:
        text: Full document text

    Returns:
        Tuple of (metadata mapping, remaining Markdown). A document without a
        front matter block returns ({}, text) unchanged.

    Raises:
        FrontMatterError: If the block is not valid YAML
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group("yaml"))
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid front matter: {e}") from e

    content = text[match.end():]
    if not isinstance(data, dict):
        return {}, content
    return data, content


def get_title(front_matter: Dict[str, Any], default: str) -> str:
    """Title field as a string, or default when absent or empty."""
    title = front_matter.get("title")
    if title is None or str(title).strip() == "":
        return default
    return str(title)
