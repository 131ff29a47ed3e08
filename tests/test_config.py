"""Tests for environment-driven settings."""

import pytest

from app.core.config import _env_number


def test_unset_variable_uses_default(monkeypatch):
    monkeypatch.delenv("PDF_UPLOAD_MAX_BYTES", raising=False)
    assert _env_number("PDF_UPLOAD_MAX_BYTES", 5 * 1024 * 1024, int) == 5 * 1024 * 1024


def test_valid_values_are_parsed(monkeypatch):
    monkeypatch.setenv("PDF_UPLOAD_MAX_BYTES", " 1048576 ")
    monkeypatch.setenv("PDF_X_TOLERANCE", "2.5")

    assert _env_number("PDF_UPLOAD_MAX_BYTES", 0, int) == 1048576
    assert _env_number("PDF_X_TOLERANCE", 1.5, float) == 2.5


@pytest.mark.parametrize("name,raw,cast", [
    ("PDF_UPLOAD_MAX_BYTES", "5MB", int),
    ("PDF_UPLOAD_MAX_BYTES", "", int),
    ("PDF_X_TOLERANCE", "wide", float),
    ("PDF_LINE_Y_TOLERANCE", "3px", float),
])
def test_malformed_value_names_the_variable(monkeypatch, name, raw, cast):
    monkeypatch.setenv(name, raw)
    with pytest.raises(ValueError, match=name) as exc_info:
        _env_number(name, 1, cast)
    assert repr(raw) in str(exc_info.value)
