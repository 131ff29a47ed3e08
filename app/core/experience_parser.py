"""
Experience section segmentation.

The export writes each role as

    Company                 <- omitted when the role sits under a multi-role company
    Title
    Month YYYY - Month YYYY (duration)
    City, Region            <- optional
    free text ...           <- optional description

and groups several roles at one employer as

    Company
    N years M months        <- duration summary
    Title / dates / ...     (repeated)

No line is labelled, so the segmenter walks the classified lines with a small
state machine. Every decision is keyed on the shape of the current line or the
shape of the line one or two ahead.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from app.core.config import MAX_DESCRIPTION_LENGTH
from app.core.line_shapes import LineShape, classify_lines, parse_date_range
from app.core.schemas import ParsedExperience

logger = logging.getLogger(__name__)

UNKNOWN_COMPANY = "Unknown"


class Phase(str, Enum):
    """
    Where the walk is relative to the role being read.

    AWAITING_DATE_LINE is informational: it marks that the walk is inside a
    role header (a date line is one or two lines ahead, or a duration summary
    was just read) and is visible in the state for debugging and tests. Both
    scanning phases apply the same transition rules, since every scan decision
    is already keyed on the shape of the lines ahead.
    """
    SEEKING_ENTRY_START = "seeking_entry_start"
    AWAITING_DATE_LINE = "awaiting_date_line"
    COLLECTING_LOCATION = "collecting_location"
    COLLECTING_DESCRIPTION = "collecting_description"


@dataclass(frozen=True)
class _Draft:
    """Entry opened at a date-range line, still collecting location/description."""
    company: str
    title: str
    start_date: str
    end_date: Optional[str]
    location: Optional[str] = None
    description_lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SegmenterState:
    phase: Phase = Phase.SEEKING_ENTRY_START
    index: int = 0
    # Employer shared by consecutive roles, set by a duration-summary line
    carried_company: Optional[str] = None
    draft: Optional[_Draft] = None


@dataclass
class _Walk:
    lines: Sequence[str]
    shapes: List[LineShape]
    emitted: List[ParsedExperience] = field(default_factory=list)

    def shape_at(self, idx: int) -> Optional[LineShape]:
        if 0 <= idx < len(self.shapes):
            return self.shapes[idx]
        return None

    def date_ahead(self, idx: int, offset: int) -> bool:
        return self.shape_at(idx + offset) is LineShape.DATE_RANGE


def _resolve_company(walk: _Walk, state: SegmenterState) -> str:
    """
    Company for a role whose date line is at state.index.

    A carried multi-role company wins. Otherwise the line two above the date
    is the company, unless it has a non-plain shape (then the role belongs to
    the previous entry's company).
    """
    if state.carried_company:
        return state.carried_company

    company_idx = state.index - 2
    if company_idx < 0:
        return UNKNOWN_COMPANY

    if walk.shapes[company_idx] is LineShape.PLAIN:
        return walk.lines[company_idx]

    if walk.emitted:
        return walk.emitted[-1].company
    return UNKNOWN_COMPANY


def _open_entry(walk: _Walk, state: SegmenterState) -> SegmenterState:
    i = state.index
    start_date, end_date = parse_date_range(walk.lines[i])
    title = walk.lines[i - 1] if i >= 1 else ""
    draft = _Draft(
        company=_resolve_company(walk, state),
        title=title,
        start_date=start_date,
        end_date=end_date,
    )
    return replace(state, phase=Phase.COLLECTING_LOCATION, index=i + 1, draft=draft)


def _scan(walk: _Walk, state: SegmenterState) -> SegmenterState:
    """
    SEEKING_ENTRY_START / AWAITING_DATE_LINE: look for the next role.

    The incoming phase is not consulted; the next phase is derived from the
    shapes ahead of state.index.
    """
    i = state.index
    shape = walk.shapes[i]

    if shape is LineShape.DURATION_SUMMARY:
        carried = walk.lines[i - 1] if i >= 1 else state.carried_company
        return replace(state, phase=Phase.AWAITING_DATE_LINE, index=i + 1, carried_company=carried)

    if shape is LineShape.DATE_RANGE:
        return _open_entry(walk, state)

    carried = state.carried_company
    if walk.date_ahead(i, 2):
        # Company line of a new block: company, title, date
        carried = None

    phase = Phase.AWAITING_DATE_LINE if walk.date_ahead(i, 1) or walk.date_ahead(i, 2) else Phase.SEEKING_ENTRY_START
    return replace(state, phase=phase, index=i + 1, carried_company=carried)


def _collect_location(walk: _Walk, state: SegmenterState) -> SegmenterState:
    i = state.index
    draft = state.draft
    if walk.shape_at(i) is LineShape.LOCATION_LIKE:
        draft = replace(draft, location=walk.lines[i])
        i += 1
    return replace(state, phase=Phase.COLLECTING_DESCRIPTION, index=i, draft=draft)


def _starts_next_entry(walk: _Walk, idx: int) -> bool:
    if walk.shapes[idx] in (LineShape.DATE_RANGE, LineShape.DURATION_SUMMARY):
        return True
    # idx is the next title (date one ahead) or the next company (date two ahead)
    return walk.date_ahead(idx, 1) or walk.date_ahead(idx, 2)


def _close_entry(walk: _Walk, state: SegmenterState) -> SegmenterState:
    draft = state.draft
    description = " ".join(draft.description_lines).strip()[:MAX_DESCRIPTION_LENGTH] or None
    walk.emitted.append(
        ParsedExperience(
            company=draft.company,
            title=draft.title,
            start_date=draft.start_date,
            end_date=draft.end_date,
            location=draft.location,
            description=description,
        )
    )
    return replace(state, phase=Phase.SEEKING_ENTRY_START, draft=None)


def _collect_description(walk: _Walk, state: SegmenterState) -> SegmenterState:
    i = state.index
    if i >= len(walk.lines) or _starts_next_entry(walk, i):
        return _close_entry(walk, state)
    draft = replace(state.draft, description_lines=state.draft.description_lines + (walk.lines[i],))
    return replace(state, index=i + 1, draft=draft)


_TRANSITIONS = {
    Phase.SEEKING_ENTRY_START: _scan,
    Phase.AWAITING_DATE_LINE: _scan,
    Phase.COLLECTING_LOCATION: _collect_location,
    Phase.COLLECTING_DESCRIPTION: _collect_description,
}


def parse_experiences(lines: Sequence[str]) -> List[ParsedExperience]:
    """
    Segment the lines of the Experience section into roles.

    Args:
        lines: normalized lines between the "Experience" anchor and the next
            section anchor (exclusive on both ends)

    Returns:
        Roles in source order.
    """
    walk = _Walk(lines=lines, shapes=classify_lines(lines))
    state = SegmenterState()

    while True:
        scanning = state.phase in (Phase.SEEKING_ENTRY_START, Phase.AWAITING_DATE_LINE)
        if scanning and state.index >= len(lines):
            break
        state = _TRANSITIONS[state.phase](walk, state)

    logger.debug(f"Segmented {len(walk.emitted)} experience entries from {len(lines)} lines")
    return walk.emitted
