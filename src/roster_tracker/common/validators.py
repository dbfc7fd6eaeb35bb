from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import Gender
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    value = "" if value is None else str(value).strip()
    if not value:
        raise ValidationError(f"{field_name} is required")
    return value


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def optional_date(value, field_name: str) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    value = str(value).strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def require_gender(value: Optional[str]) -> Gender:
    try:
        return Gender(str(value or "").strip().lower())
    except ValueError:
        raise ValidationError("Gender must be 'male' or 'female'")


def as_flag(value) -> bool:
    """Interpret a form/JSON checkbox value."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "on", "yes"}
