"""
Date helpers for the days-together counter.
"""

from datetime import date
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse a YYYY-MM-DD string. Raises ValueError if malformed."""
    return date.fromisoformat(value.strip())


def days_since(start: date, today: Optional[date] = None) -> int:
    """
    Whole calendar days from `start` to `today`.

    Negative when `start` is in the future.
    """
    today = today or date.today()
    return (today - start).days
