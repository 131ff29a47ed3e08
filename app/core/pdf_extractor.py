"""
Text extraction for "save profile to PDF" exports.

This is the only layer that touches document bytes. Decoding failures are
raised here as ProfileImportError subclasses, before any text reaches the
parser, so the parser itself never sees encryption or corrupt-file problems.
"""

from io import BytesIO
from typing import Any, Iterator, List
import logging

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect

from app.core.config import PDF_LINE_Y_TOLERANCE, PDF_X_TOLERANCE
from app.core.profile_parser import parse_profile_text
from app.core.schemas import ParsedProfile

logger = logging.getLogger(__name__)

PASSWORD_PROTECTED_MESSAGE = "This PDF appears to be password-protected. Please upload an unprotected PDF."
INVALID_PDF_MESSAGE = "Failed to parse PDF. Please ensure it is a valid PDF file."


class ProfileImportError(Exception):
    """Base class for failures that stop an import before parsing."""


class PDFExtractionError(ProfileImportError):
    def __init__(self, message: str = INVALID_PDF_MESSAGE):
        super().__init__(message)


class PasswordProtectedPDFError(PDFExtractionError):
    def __init__(self, message: str = PASSWORD_PROTECTED_MESSAGE):
        super().__init__(message)


def _error_chain(err: BaseException) -> Iterator[BaseException]:
    # pdfplumber wraps pdfminer errors; the wrapped error can sit in args or __cause__
    seen = set()
    stack = [err]
    while stack:
        e = stack.pop()
        if id(e) in seen:
            continue
        seen.add(id(e))
        yield e
        stack.extend(a for a in e.args if isinstance(a, BaseException))
        if e.__cause__ is not None:
            stack.append(e.__cause__)
        if e.__context__ is not None:
            stack.append(e.__context__)


def _is_password_error(err: BaseException) -> bool:
    return any(
        isinstance(e, PDFPasswordIncorrect) or "password" in str(e).lower()
        for e in _error_chain(err)
    )


def _words_to_text(page: Any, *, x_tolerance: float, line_y_tolerance: float) -> str:
    """
    Rebuild the lines of a page from pdfplumber word objects.

    Words are kept in text-flow order, so the sidebar column comes out before
    the main column the way the export wrote them. A new line starts whenever
    a word's top edge moves by more than line_y_tolerance.
    """
    words = page.extract_words(
        x_tolerance=x_tolerance,
        keep_blank_chars=False,
        use_text_flow=True,
    )
    if not words:
        return ""

    lines: List[str] = []
    current_words: List[str] = []
    current_top = None

    for w in words:
        if current_top is None or abs(w["top"] - current_top) <= line_y_tolerance:
            current_words.append(w["text"])
            if current_top is None:
                current_top = w["top"]
        else:
            lines.append(" ".join(current_words))
            current_words = [w["text"]]
            current_top = w["top"]

    if current_words:
        lines.append(" ".join(current_words))

    return "\n".join(lines)


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Extract the text of every page, pages separated by a newline.

    Raises:
        PasswordProtectedPDFError: the document is encrypted
        PDFExtractionError: the bytes are not a readable PDF
    """
    if not pdf_bytes:
        raise PDFExtractionError()

    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            pages = [
                _words_to_text(page, x_tolerance=PDF_X_TOLERANCE, line_y_tolerance=PDF_LINE_Y_TOLERANCE)
                for page in pdf.pages
            ]
    except Exception as e:
        if _is_password_error(e):
            logger.info("Rejected password-protected PDF")
            raise PasswordProtectedPDFError() from e
        logger.warning(f"PDF extraction failed: {type(e).__name__}: {e}")
        raise PDFExtractionError() from e

    logger.debug(f"Extracted {len(pages)} pages of text")
    return "\n".join(pages)


def parse_profile_pdf(pdf_bytes: bytes) -> ParsedProfile:
    """Extract the text of a profile export and parse it."""
    return parse_profile_text(extract_pdf_text(pdf_bytes))
