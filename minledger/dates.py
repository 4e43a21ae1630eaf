"""Date utilities for minledger.

Pure functions for month keys, month bounds and formatting.
"""

from datetime import date, datetime, timedelta

from minledger.domain.models import Month


def month_key(day: date) -> Month:
    """Get the month key a date falls in.

    Args:
        day: Calendar date.

    Returns:
        Month in YYYY-MM format.
    """
    return Month(f"{day.year:04d}-{day.month:02d}")


def parse_month(month: str) -> Month:
    """Validate and normalize a month string.

    Args:
        month: Month in YYYY-MM format (single-digit months accepted).

    Returns:
        Normalized Month.

    Raises:
        ValueError: If the string is not a valid month.
    """
    dt = datetime.strptime(month.strip(), "%Y-%m")
    return Month(dt.strftime("%Y-%m"))


def month_bounds(month: Month) -> tuple[date, date]:
    """Get the first and last day of a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (first_day, last_day).

    Raises:
        ValueError: If month is not in YYYY-MM format.
    """
    first = datetime.strptime(month, "%Y-%m").date()
    next_month = (first.replace(day=28) + timedelta(days=4)).replace(day=1)
    return first, next_month - timedelta(days=1)


def days_in_month(month: Month) -> int:
    """Count the days in a month (last day minus first, plus one)."""
    first, last = month_bounds(month)
    return (last - first).days + 1


def month_label(month: Month) -> str:
    """Format a month for display (e.g., "January 2025")."""
    return datetime.strptime(month, "%Y-%m").strftime("%B %Y")


def parse_iso_date(value: str) -> date:
    """Parse a YYYY-MM-DD date.

    Raises:
        ValueError: If the string is not a valid ISO calendar date.
    """
    return date.fromisoformat(value)
