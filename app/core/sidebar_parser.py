"""
Skills and headline extraction.

Both live around the sidebar/main-column seam of the export: skills are the
lines under the "Top Skills" sidebar header, and the headline is the line the
profile owner wrote under their name, right above the "Experience" anchor.
"""

import logging
from typing import List, Optional, Sequence

from app.core.config import MAX_HEADLINE_LENGTH, MAX_SKILL_LENGTH
from app.core.line_shapes import is_location_like
from app.core.schemas import ParsedSkill
from app.core.text_normalization import (
    EDUCATION_ANCHOR,
    EXPERIENCE_ANCHOR,
    TOP_SKILLS_ANCHOR,
    find_anchor,
    is_sidebar_header,
)

logger = logging.getLogger(__name__)


def _ends_skill_list(line: str) -> bool:
    if is_sidebar_header(line):
        return True
    if line in (EXPERIENCE_ANCHOR, EDUCATION_ANCHOR):
        return True
    # Longer lines are body text, not skill names
    return len(line) > MAX_SKILL_LENGTH


def extract_skills(lines: Sequence[str]) -> List[ParsedSkill]:
    """
    Collect the skill names listed under "Top Skills".

    Stops at the first line that is another section header or too long to be
    a skill name. Order is kept and duplicates are not removed.
    """
    anchor = find_anchor(lines, TOP_SKILLS_ANCHOR)
    if anchor is None:
        return []

    skills: List[ParsedSkill] = []
    for line in lines[anchor + 1:]:
        if _ends_skill_list(line):
            break
        skills.append(ParsedSkill(name=line))

    logger.debug(f"Extracted {len(skills)} skills")
    return skills


def extract_headline(lines: Sequence[str]) -> Optional[str]:
    """
    Find the self-authored headline above the "Experience" anchor.

    The export writes [name, headline?, location?] directly above
    "Experience". A trailing location line is skipped. The candidate is
    dropped when it is a sidebar header, or when the line above it is one
    (then the candidate is the name and there is no headline).
    """
    exp_idx = find_anchor(lines, EXPERIENCE_ANCHOR)
    if exp_idx is None or exp_idx < 2:
        return None

    idx = exp_idx - 1
    if is_location_like(lines[idx]):
        idx -= 1

    candidate = lines[idx]
    if is_sidebar_header(candidate):
        return None

    if idx - 1 < 0:
        return None
    if is_sidebar_header(lines[idx - 1]):
        return None

    return candidate[:MAX_HEADLINE_LENGTH]
