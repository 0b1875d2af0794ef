"""
Utility modules for the Love Note API.
"""

from .dates import days_since, parse_iso_date

__all__ = [
    "days_since",
    "parse_iso_date",
]
