"""
Line-shape classifiers for profile export text.

The export never labels what a line is. Company, title, location and
description lines are told apart only by where they sit relative to the
nearest date-range line, so every rule downstream is keyed on the shape
classes defined here.

Grammars
--------
DATE_RANGE        Month YYYY <dash> (Present | Month YYYY) (annotation)
                  e.g. "January 2026 - Present (2 months)"
                  dash is "-", "–" or "—"; the parenthetical annotation is
                  required and discarded. Months are full English names.
DURATION_SUMMARY  the whole line is "N years M months", "N years" or
                  "N months" (singular forms allowed)
                  e.g. "3 years 6 months"
LOCATION_LIKE     "City, Region" or "City, Region, Country", starting with
                  an uppercase letter, no digits; or "San Francisco Bay Area"
PLAIN             anything else
"""

import re
from enum import Enum
from typing import List, Optional, Sequence, Tuple


MONTHS = {
    "January": "01",
    "February": "02",
    "March": "03",
    "April": "04",
    "May": "05",
    "June": "06",
    "July": "07",
    "August": "08",
    "September": "09",
    "October": "10",
    "November": "11",
    "December": "12",
}

MONTH_PATTERN = "|".join(MONTHS)
DASH_PATTERN = r"[-–—]"

DATE_RANGE_RE = re.compile(
    rf"({MONTH_PATTERN})\s+([0-9]{{4}})\s*{DASH_PATTERN}\s*"
    rf"(Present|({MONTH_PATTERN})\s+([0-9]{{4}}))\s*\(.*?\)"
)

# Education detail lines: parentheses optional, no "Present"
CLOSED_DATE_RANGE_RE = re.compile(
    rf"\(?\s*({MONTH_PATTERN})\s+([0-9]{{4}})\s*{DASH_PATTERN}\s*"
    rf"({MONTH_PATTERN})\s+([0-9]{{4}})\s*\)?"
)

DURATION_SUMMARY_RE = re.compile(
    r"^[0-9]+\s+years?\s*[0-9]*\s*months?$|^[0-9]+\s+months?$|^[0-9]+\s+years?$"
)

LOCATION_RE = re.compile(
    r"^[A-Z][a-zA-Zà-ÿ\s.]+,\s+[A-Za-zà-ÿ\s.]+(?:,\s+[A-Za-zà-ÿ\s.]+)?$"
    r"|^San Francisco Bay Area$"
)


class LineShape(str, Enum):
    DATE_RANGE = "date_range"
    DURATION_SUMMARY = "duration_summary"
    LOCATION_LIKE = "location_like"
    PLAIN = "plain"


def month_year_to_iso(month: str, year: str) -> Optional[str]:
    """'July', '2023' -> '2023-07'. Unknown month names give None."""
    mm = MONTHS.get(month)
    if mm is None or not re.fullmatch(r"[0-9]{4}", year or ""):
        return None
    return f"{year}-{mm}"


def is_date_range(line: str) -> bool:
    return DATE_RANGE_RE.search(line) is not None


def is_duration_summary(line: str) -> bool:
    return DURATION_SUMMARY_RE.match(line) is not None


def is_location_like(line: str) -> bool:
    return LOCATION_RE.match(line) is not None


def parse_date_range(line: str) -> Optional[Tuple[str, Optional[str]]]:
    """
    Extract (start_date, end_date) from a date-range line.

    Dates are canonical YYYY-MM. "Present" gives an end_date of None.
    Returns None when the line is not a date range.
    """
    m = DATE_RANGE_RE.search(line)
    if not m:
        return None

    start_date = month_year_to_iso(m.group(1), m.group(2))
    if m.group(3) == "Present" or not m.group(4):
        end_date = None
    else:
        end_date = month_year_to_iso(m.group(4), m.group(5))
    return start_date, end_date


def parse_closed_date_range(text: str) -> Tuple[Optional[str], Optional[str]]:
    """Find 'Month YYYY - Month YYYY' anywhere in text. (None, None) if absent."""
    m = CLOSED_DATE_RANGE_RE.search(text)
    if not m:
        return None, None
    return month_year_to_iso(m.group(1), m.group(2)), month_year_to_iso(m.group(3), m.group(4))


def classify_line(line: str) -> LineShape:
    # The shape classes are disjoint: date ranges need digits and a
    # parenthesis, durations are digits and units only, locations have no digits.
    if is_date_range(line):
        return LineShape.DATE_RANGE
    if is_duration_summary(line):
        return LineShape.DURATION_SUMMARY
    if is_location_like(line):
        return LineShape.LOCATION_LIKE
    return LineShape.PLAIN


def classify_lines(lines: Sequence[str]) -> List[LineShape]:
    return [classify_line(line) for line in lines]
