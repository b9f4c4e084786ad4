"""
Utility functions for the rental ledger
"""
from __future__ import annotations
from datetime import date, datetime


def parse_date(s: str) -> date:
    """Parse YYYY-MM-DD date string (month and day may be unpadded)"""
    return datetime.strptime(s.strip(), "%Y-%m-%d").date()


def days_between(start: date, end: date) -> int:
    """
    Whole days from start to end. A same-day rental counts as 0 days,
    not 1; pricing relies on this.
    """
    return (end - start).days
