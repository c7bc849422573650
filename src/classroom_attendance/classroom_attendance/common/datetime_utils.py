from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT


def today_iso() -> str:
    """Today's date as YYYY-MM-DD."""
    return date.today().strftime(DATE_FORMAT)


def format_long_date(value: str) -> str:
    """Render YYYY-MM-DD as e.g. 'January 10, 2024'; unparsable values are returned as-is."""
    try:
        d = datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        return str(value)
    return f"{d.strftime('%B')} {d.day}, {d.year}"
