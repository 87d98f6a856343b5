from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date."""
    if len(value) != 10:
        raise ValueError(f"date must be YYYY-MM-DD: {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()
