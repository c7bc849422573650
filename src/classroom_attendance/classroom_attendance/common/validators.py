from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: Optional[str], field_name: str = "Date") -> str:
    value = require_non_empty(value, field_name)
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format")
    return value
