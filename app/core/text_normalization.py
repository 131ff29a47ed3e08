"""
Line normalization and section anchors for profile export text.

Everything downstream works on the canonical line sequence produced here:
pagination markers removed, whitespace trimmed, blank lines dropped. Line
position is the only structure the export gives us, so sections are located
by whole-line anchor matches rather than keyword searches.
"""

import re
from typing import List, Optional, Sequence, Tuple


PAGE_MARKER_RE = re.compile(r"Page [0-9]+ of [0-9]+")

# ===== SECTION ANCHORS =====
# Fixed headers written by the export. Matched case-sensitively, whole line.

TOP_SKILLS_ANCHOR = "Top Skills"
EXPERIENCE_ANCHOR = "Experience"
EDUCATION_ANCHOR = "Education"

# Headers of the left-hand sidebar column
SIDEBAR_SECTIONS = (
    "Contact",
    "Top Skills",
    "Languages",
    "Honors-Awards",
    "Publications",
    "Certifications",
)


def normalize_lines(text: Optional[str]) -> List[str]:
    """
    Turn raw extracted text into the canonical line sequence.

    Examples:
        "Jane Doe\\n\\n  Engineer  \\nPage 1 of 2\\n" -> ["Jane Doe", "Engineer"]
        "" -> []
    """
    if not text:
        return []
    text = PAGE_MARKER_RE.sub("", text)
    return [ln.strip() for ln in text.split("\n") if ln.strip()]


def is_sidebar_header(line: str) -> bool:
    return line in SIDEBAR_SECTIONS


def find_anchor(lines: Sequence[str], anchor: str) -> Optional[int]:
    """Index of the first line exactly equal to anchor, or None."""
    for idx, line in enumerate(lines):
        if line == anchor:
            return idx
    return None


def section_bounds(
    lines: Sequence[str], anchor: str, end_anchor: Optional[str] = None
) -> Optional[Tuple[int, int]]:
    """
    Content range (start, end) of the section headed by anchor.

    start is the line after the anchor. end is the index of end_anchor when it
    is present, otherwise the end of the sequence. If end_anchor comes before
    anchor the range is empty. Returns None when anchor is missing.
    """
    start = find_anchor(lines, anchor)
    if start is None:
        return None

    end = len(lines)
    if end_anchor is not None:
        end_idx = find_anchor(lines, end_anchor)
        if end_idx is not None:
            end = end_idx
    return start + 1, max(start + 1, end)
