"""Tests for headline extraction above the Experience anchor."""

from app.core.sidebar_parser import extract_headline


def test_headline_with_location():
    lines = [
        "Certifications",
        "Deep Learning Specialization",
        "Jane Doe",
        "Computer Engineering @ UWaterloo | ML",
        "Waterloo, Ontario, Canada",
        "Experience",
    ]
    assert extract_headline(lines) == "Computer Engineering @ UWaterloo | ML"


def test_headline_without_location():
    lines = ["Languages", "English", "Jane Doe", "ML Engineer", "Experience"]
    assert extract_headline(lines) == "ML Engineer"


def test_name_only_under_sidebar_header():
    """Name directly under a sidebar header with no headline line."""
    lines = ["Languages", "Jane Doe", "Toronto, Ontario, Canada", "Experience"]
    assert extract_headline(lines) is None


def test_candidate_is_sidebar_header():
    lines = ["Jane Doe", "Top Skills", "Experience"]
    assert extract_headline(lines) is None


def test_no_line_above_candidate():
    lines = ["Jane Doe", "Toronto, Ontario, Canada", "Experience"]
    assert extract_headline(lines) is None


def test_experience_too_early():
    assert extract_headline(["Jane Doe", "Experience"]) is None
    assert extract_headline(["Experience", "WAT.ai"]) is None


def test_missing_experience_anchor():
    assert extract_headline(["Jane Doe", "ML Engineer", "Education"]) is None


def test_headline_truncated_to_200():
    headline = "Builder " * 40
    lines = ["Jane Doe", headline.strip(), "Experience"]
    result = extract_headline(lines)
    assert len(result) == 200
    assert result == headline.strip()[:200]
