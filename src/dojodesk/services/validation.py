"""Input validation helpers shared by the services.

Every helper either returns a cleaned value or raises
:class:`~dojodesk.errors.ValidationError` with a message naming the field.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..errors import ValidationError

_EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9_+&*-]+(?:\.[a-zA-Z0-9_+&*-]+)*@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,24}$"
)
# 7 or 8 digits, optionally grouped with dots or spaces: 12.345.678 / 12 345 678
_DNI_PATTERN = re.compile(r"^\d{1,2}[. ]?\d{3}[. ]?\d{3}$")


def require_text(value: Optional[str], field: str) -> str:
    """Return ``value`` stripped, rejecting None and blank strings."""

    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required.")
    return str(value).strip()


def require_min_length(value: Optional[str], field: str, min_length: int) -> str:
    text = require_text(value, field)
    if len(text) < min_length:
        raise ValidationError(f"{field} must be at least {min_length} characters long.")
    return text


def parse_int(value: Optional[str], field: str) -> int:
    """Parse a whole number typed by the user."""

    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a whole number.") from None


def parse_float(value: Optional[str], field: str) -> float:
    """Parse a decimal number typed by the user; accepts a comma separator."""

    try:
        return float(str(value).strip().replace(",", "."))
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number.") from None


def parse_date(value: Optional[str], field: str, *, optional: bool = False) -> Optional[date]:
    """Parse an ISO ``YYYY-MM-DD`` date.

    Returns None for blank input when ``optional`` is set.
    """

    if value is None or not str(value).strip():
        if optional:
            return None
        raise ValidationError(f"{field} is required.")
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must use the YYYY-MM-DD format.") from None


def validate_email(value: Optional[str], field: str = "Email", *, optional: bool = False) -> Optional[str]:
    """Return the trimmed address, or None for blank optional input."""

    if value is None or not str(value).strip():
        if optional:
            return None
        raise ValidationError(f"{field} is required.")
    email = str(value).strip()
    if not _EMAIL_PATTERN.match(email):
        raise ValidationError(f"{field} is not a valid email address.")
    return email


def normalize_dni(value: Optional[str], field: str = "DNI") -> str:
    """Validate a national id number and return it as bare digits."""

    text = require_text(value, field)
    if not _DNI_PATTERN.match(text):
        raise ValidationError(f"{field} must have 7 or 8 digits.")
    return re.sub(r"\D", "", text)


def ensure_positive_id(value: Optional[int], field: str) -> int:
    if value is None or isinstance(value, bool) or int(value) <= 0:
        raise ValidationError(f"{field} must be a positive number.")
    return int(value)


def ensure_not_future(value: Optional[date], field: str, *, today: Optional[date] = None) -> date:
    """Reject missing dates and dates after ``today``."""

    if value is None:
        raise ValidationError(f"{field} is required.")
    reference = today or date.today()
    if value > reference:
        raise ValidationError(f"{field} cannot be in the future.")
    return value
