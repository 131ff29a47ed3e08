"""
Profile export parsing entry point.

Runs every extractor over one shared normalized line sequence and folds the
results into a ParsedProfile. Sparse or malformed input degrades to warnings;
this module never raises on account of the text it is given.
"""

import logging
from typing import List

from app.core.education_parser import parse_education_entries
from app.core.experience_parser import parse_experiences
from app.core.schemas import ParsedEducation, ParsedExperience, ParsedProfile
from app.core.sidebar_parser import extract_headline, extract_skills
from app.core.text_normalization import (
    EDUCATION_ANCHOR,
    EXPERIENCE_ANCHOR,
    normalize_lines,
    section_bounds,
)

logger = logging.getLogger(__name__)

NO_SKILLS_WARNING = "Could not find skills in this PDF."
NO_EXPERIENCE_WARNING = "Could not find Experience section in this PDF."
NO_EDUCATION_WARNING = "Could not find Education section in this PDF."
NOTHING_FOUND_WARNING = (
    "We couldn't find experience, education, or skills data in this PDF. "
    "You can add entries manually."
)


def parse_profile_text(text: str) -> ParsedProfile:
    lines = normalize_lines(text)
    warnings: List[str] = []

    skills = extract_skills(lines)
    if not skills:
        warnings.append(NO_SKILLS_WARNING)

    headline = extract_headline(lines)

    experiences: List[ParsedExperience] = []
    exp_bounds = section_bounds(lines, EXPERIENCE_ANCHOR, end_anchor=EDUCATION_ANCHOR)
    if exp_bounds is not None:
        start, end = exp_bounds
        experiences = parse_experiences(lines[start:end])
    else:
        warnings.append(NO_EXPERIENCE_WARNING)

    education: List[ParsedEducation] = []
    edu_bounds = section_bounds(lines, EDUCATION_ANCHOR)
    if edu_bounds is not None:
        start, end = edu_bounds
        education = parse_education_entries(lines[start:end])
    else:
        warnings.append(NO_EDUCATION_WARNING)

    if not experiences and not education and not skills:
        warnings.append(NOTHING_FOUND_WARNING)

    logger.info(
        f"Parsed profile: {len(experiences)} experiences, {len(education)} education, "
        f"{len(skills)} skills, {len(warnings)} warnings"
    )

    return ParsedProfile(
        headline=headline,
        experiences=experiences,
        education=education,
        skills=skills,
        warnings=warnings,
    )
