import re
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from typing import Annotated, Optional, Tuple


ISO_MONTH_RE = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])")


def _check_iso_month(value: str) -> str:
    if not ISO_MONTH_RE.fullmatch(value):
        raise ValueError(f"date must be YYYY-MM, got {value!r}")
    return value


IsoMonth = Annotated[str, AfterValidator(_check_iso_month)]


class ParsedExperience(BaseModel):
    """One role, in the order the export lists them (most recent first)."""
    model_config = ConfigDict(frozen=True)

    company: str
    title: str
    start_date: IsoMonth = Field(..., description="YYYY-MM")
    end_date: Optional[IsoMonth] = Field(default=None, description="YYYY-MM, None while the role is current")
    location: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=500)


class ParsedEducation(BaseModel):
    model_config = ConfigDict(frozen=True)

    institution: str
    degree: Optional[str] = None  # Bachelor of Computer Science, ...
    field_of_study: Optional[str] = None
    start_date: Optional[IsoMonth] = None
    end_date: Optional[IsoMonth] = None


class ParsedSkill(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class ParsedProfile(BaseModel):
    """Best-effort draft of a profile. Callers validate before persisting."""
    model_config = ConfigDict(frozen=True)

    headline: Optional[str] = Field(default=None, max_length=200)
    experiences: Tuple[ParsedExperience, ...] = ()
    education: Tuple[ParsedEducation, ...] = ()
    skills: Tuple[ParsedSkill, ...] = ()
    warnings: Tuple[str, ...] = ()


class ParseTextRequest(BaseModel):
    text: str = Field(..., description="Text already extracted from a profile export")


class ParseResponse(BaseModel):
    parsed: ParsedProfile
