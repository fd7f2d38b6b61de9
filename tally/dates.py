"""Date utilities for tally.

Pure functions for resolving and labelling report periods.
"""

from datetime import date, datetime


def resolve_period(month: int | None, year: int | None, today: date | None = None) -> tuple[int, int]:
    """Fill in a missing month and/or year from today's date.

    Args:
        month: Month number (1-12) or None for the current month.
        year: Year or None for the current year.
        today: Reference date. If None, uses the system date.

    Returns:
        Tuple of (month, year).

    Raises:
        ValueError: If month is outside 1-12.
    """
    if today is None:
        today = date.today()
    resolved_month = today.month if month is None else month
    resolved_year = today.year if year is None else year
    if not 1 <= resolved_month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {resolved_month}")
    return resolved_month, resolved_year


def format_period(month: int, year: int) -> str:
    """Format a period as "M/YYYY" (e.g., "1/2024")."""
    return f"{month}/{year}"


def month_label(month: int, year: int) -> str:
    """Human-readable month (e.g., "January 2024")."""
    return datetime(year, month, 1).strftime("%B %Y")
