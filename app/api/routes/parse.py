from fastapi import APIRouter, UploadFile, File, HTTPException
from fastapi.concurrency import run_in_threadpool

from app.core.config import PDF_UPLOAD_MAX_BYTES
from app.core.pdf_extractor import ProfileImportError, parse_profile_pdf
from app.core.profile_parser import parse_profile_text
from app.core.schemas import ParseResponse, ParseTextRequest

router = APIRouter(tags=["parse"])

_PROFILE_EXAMPLE = {
    "parsed": {
        "headline": "Engineering @ UWaterloo",
        "experiences": [
            {
                "company": "The Cansbridge Fellowship",
                "title": "Cansbridge Fellow",
                "start_date": "2026-01",
                "end_date": None,
                "location": "San Francisco Bay Area",
                "description": "One of 15 fellows selected nationally.",
            }
        ],
        "education": [
            {
                "institution": "University of Waterloo",
                "degree": "Bachelor of Computer Science",
                "field_of_study": "Computer Engineering",
                "start_date": "2023-07",
                "end_date": "2028-05",
            }
        ],
        "skills": [{"name": "PyTorch"}, {"name": "VHDL"}],
        "warnings": [],
    }
}


def _size_limit_label() -> str:
    return f"{PDF_UPLOAD_MAX_BYTES // (1024 * 1024)}MB"


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Profile PDF",
    description="Extract headline, experience, education and skills from a 'save profile to PDF' export. Sections that cannot be recognized are reported in warnings.",
    responses={
        200: {
            "description": "Parsed profile draft",
            "content": {"application/json": {"example": _PROFILE_EXAMPLE}},
        },
        400: {"description": "Missing, oversized, unreadable or password-protected PDF"},
    },
)
async def parse_profile(
    file: UploadFile = File(..., description="Profile export (PDF)")
):
    """
    Parse an uploaded profile export.

    The result is a best-effort draft for the user to review: empty sections
    are reported as warnings, never as errors.
    """
    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()
    if content_type != "application/pdf" and not filename.endswith(".pdf"):
        raise HTTPException(status_code=400, detail="File must be a PDF.")

    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="No file provided.")
    if len(raw) > PDF_UPLOAD_MAX_BYTES:
        raise HTTPException(status_code=400, detail=f"PDF must be under {_size_limit_label()}.")

    try:
        parsed = await run_in_threadpool(parse_profile_pdf, raw)
    except ProfileImportError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ParseResponse(parsed=parsed)


@router.post(
    "/parse/text",
    response_model=ParseResponse,
    summary="Parse Profile Text",
    description="Parse text already extracted from a profile export.",
)
def parse_profile_text_route(body: ParseTextRequest):
    return ParseResponse(parsed=parse_profile_text(body.text))
