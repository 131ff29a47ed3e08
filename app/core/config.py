"""
Runtime settings for the profile import service.

Values come from environment variables (optionally loaded from a .env file).
Parsing limits that are part of the output contract are module constants and
are not configurable.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env next to the project root, then the current directory
_env_path = Path(__file__).resolve().parents[2] / ".env"
if _env_path.exists():
    load_dotenv(_env_path)
else:
    load_dotenv()


def _env_number(name, default, cast):
    """Read a numeric setting; a malformed value fails with the variable's name."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        kind = "an integer" if cast is int else "a number"
        raise ValueError(f"{name} must be {kind}, got {raw!r}") from None


# Upload limits
PDF_UPLOAD_MAX_BYTES = _env_number("PDF_UPLOAD_MAX_BYTES", 5 * 1024 * 1024, int)

# PDF word grouping (pdfplumber)
PDF_X_TOLERANCE = _env_number("PDF_X_TOLERANCE", 1.5, float)
PDF_LINE_Y_TOLERANCE = _env_number("PDF_LINE_Y_TOLERANCE", 3.0, float)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Output limits
MAX_SKILL_LENGTH = 50
MAX_HEADLINE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 500
