"""
Tests for PDF text extraction.

pdfplumber is replaced by small fakes so the tests exercise line grouping and
error translation without needing fixture documents.
"""

import pytest
from pdfminer.pdfdocument import PDFPasswordIncorrect

from app.core import pdf_extractor
from app.core.pdf_extractor import (
    PDFExtractionError,
    PasswordProtectedPDFError,
    extract_pdf_text,
    parse_profile_pdf,
)


class FakePage:
    def __init__(self, words):
        self._words = words

    def extract_words(self, **kwargs):
        return list(self._words)


class FakePDF:
    def __init__(self, pages):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def _word(text, top, x0=0.0):
    return {"text": text, "top": top, "x0": x0}


def _patch_open(monkeypatch, pages=None, error=None):
    def _open(stream):
        if error is not None:
            raise error
        return FakePDF(pages)

    monkeypatch.setattr(pdf_extractor.pdfplumber, "open", _open)


def test_words_grouped_into_lines_in_flow_order(monkeypatch):
    sidebar_and_main = FakePage([
        _word("Top", 100), _word("Skills", 100.5),
        _word("PyTorch", 115),
        # main column starts back at the top of the page
        _word("Jane", 40, x0=200), _word("Doe", 40.2, x0=230),
        _word("Experience", 90, x0=200),
    ])
    _patch_open(monkeypatch, pages=[sidebar_and_main])

    assert extract_pdf_text(b"%PDF") == "Top Skills\nPyTorch\nJane Doe\nExperience"


def test_pages_joined_with_newline(monkeypatch):
    _patch_open(monkeypatch, pages=[
        FakePage([_word("Experience", 10)]),
        FakePage([]),
        FakePage([_word("Education", 10)]),
    ])

    assert extract_pdf_text(b"%PDF") == "Experience\n\nEducation"


def test_empty_bytes_rejected():
    with pytest.raises(PDFExtractionError):
        extract_pdf_text(b"")


def test_password_error_translated(monkeypatch):
    _patch_open(monkeypatch, error=PDFPasswordIncorrect())

    with pytest.raises(PasswordProtectedPDFError) as exc:
        extract_pdf_text(b"%PDF")
    assert "password-protected" in str(exc.value)


def test_wrapped_password_error_translated(monkeypatch):
    """pdfplumber wraps pdfminer errors in its own exception type."""
    _patch_open(monkeypatch, error=RuntimeError(PDFPasswordIncorrect()))

    with pytest.raises(PasswordProtectedPDFError):
        extract_pdf_text(b"%PDF")


def test_other_errors_are_generic(monkeypatch):
    _patch_open(monkeypatch, error=ValueError("No /Root object! - Is this really a PDF?"))

    with pytest.raises(PDFExtractionError) as exc:
        extract_pdf_text(b"%PDF")
    assert not isinstance(exc.value, PasswordProtectedPDFError)
    assert str(exc.value) == pdf_extractor.INVALID_PDF_MESSAGE


def test_garbage_bytes_raise_extraction_error():
    with pytest.raises(PDFExtractionError):
        extract_pdf_text(b"this is not a pdf")


def test_parse_profile_pdf(monkeypatch):
    _patch_open(monkeypatch, pages=[FakePage([
        _word("Experience", 10),
        _word("Acme", 20),
        _word("Engineer", 30),
        _word("May", 40), _word("2020", 40), _word("-", 40), _word("Present", 40),
        _word("(5", 40), _word("years)", 40),
        _word("Page", 50), _word("1", 50), _word("of", 50), _word("1", 50),
    ])])

    profile = parse_profile_pdf(b"%PDF")
    assert profile.experiences[0].company == "Acme"
    assert profile.experiences[0].start_date == "2020-05"
    assert profile.experiences[0].end_date is None
    assert profile.experiences[0].description is None
