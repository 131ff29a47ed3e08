"""
Education section parsing.

Each entry in the export is an institution line followed by one detail line:

    University of Waterloo
    Bachelor of Computer Science, Computer Engineering · (July 2023 - May 2028)

Long detail lines wrap onto the next physical line, so the detail is
reassembled before it is split into degree, field of study and dates.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from app.core.line_shapes import parse_closed_date_range
from app.core.schemas import ParsedEducation

logger = logging.getLogger(__name__)

DETAIL_SEPARATOR = "·"


def _join_detail(lines: Sequence[str], i: int) -> Tuple[str, int]:
    """
    Assemble the detail line starting at index i.

    Continuation rules, applied in order:
    1. while the last consumed line has no separator and the next one does
    2. once more if the assembled detail still has no separator and the next
       line does
    3. once if the detail opens a parenthesis without closing it (date range
       wrapped mid-way)

    Returns the detail text and the index of the first unconsumed line.
    """
    detail = lines[i]
    i += 1

    while i < len(lines) and DETAIL_SEPARATOR not in lines[i - 1] and DETAIL_SEPARATOR in lines[i]:
        detail += " " + lines[i]
        i += 1

    if i < len(lines) and DETAIL_SEPARATOR not in detail and DETAIL_SEPARATOR in lines[i]:
        detail += " " + lines[i]
        i += 1

    if i < len(lines) and "(" in detail and ")" not in detail:
        detail += " " + lines[i]
        i += 1

    return detail, i


def split_degree_and_field(detail: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Split the part before the separator into (degree, field_of_study).

    Examples:
        "Bachelor of Computer Science, Computer Engineering · (...)"
            -> ("Bachelor of Computer Science", "Computer Engineering")
        "Master of Science, Physics, Optics" -> ("Master of Science", "Physics, Optics")
        "High School Diploma · (...)" -> ("High School Diploma", None)
    """
    before_sep = detail.split(DETAIL_SEPARATOR)[0].strip()
    if not before_sep:
        return None, None

    parts = [p.strip() for p in before_sep.split(",")]
    if len(parts) >= 2:
        return parts[0] or None, ", ".join(parts[1:]).strip() or None
    return parts[0] or None, None


def parse_education_detail(institution: str, detail: str) -> ParsedEducation:
    start_date, end_date = parse_closed_date_range(detail)
    degree, field_of_study = split_degree_and_field(detail)
    return ParsedEducation(
        institution=institution,
        degree=degree,
        field_of_study=field_of_study,
        start_date=start_date,
        end_date=end_date,
    )


def parse_education_entries(lines: Sequence[str]) -> List[ParsedEducation]:
    """
    Parse the lines after the "Education" anchor into entries, in source order.

    An institution on the last line still yields an entry, with every detail
    field None.
    """
    entries: List[ParsedEducation] = []
    i = 0

    while i < len(lines):
        institution = lines[i]
        i += 1

        if i >= len(lines):
            entries.append(ParsedEducation(institution=institution))
            break

        detail, i = _join_detail(lines, i)
        entries.append(parse_education_detail(institution, detail))

    logger.debug(f"Parsed {len(entries)} education entries")
    return entries
