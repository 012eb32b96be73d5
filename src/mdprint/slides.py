"""
Slide partitioning for slide-deck output.

A line consisting solely of three or more hyphens separates slides.
"""

import re
from typing import List

SLIDE_SEPARATOR_RE = re.compile(r"^---+[ \t]*\r?$", re.MULTILINE)


def split_slides(markdown: str) -> List[str]:
    """Split Markdown into ordered slide segments.

    Each segment is stripped; empty segments (leading/trailing separators,
    doubled separators) are dropped.
    """
    segments = (segment.strip() for segment in SLIDE_SEPARATOR_RE.split(markdown))
    return [segment for segment in segments if segment]
