"""Date and week helpers."""

import re
from datetime import date, datetime, timedelta, timezone

from metrics.config import WEEKDAY_TOKENS


def today_utc() -> date:
    """Current date in UTC."""
    return datetime.now(timezone.utc).date()


def parse_date(value: str | date | None) -> date:
    """Parse a YYYY-MM-DD string (or pass through a date).

    None resolves to today (UTC).
    """
    if value is None:
        return today_utc()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def get_week_start(day: date) -> date:
    """Get Monday of the week containing the date."""
    return day - timedelta(days=day.weekday())


def weekday_index(day: date) -> int:
    """Index of the weekday, Monday = 0 .. Sunday = 6."""
    return day.weekday()


def iso(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def parse_training_days(text) -> list[bool]:
    """Parse a free-text day selection into a Monday..Sunday vector.

    Accepts German two-letter abbreviations or full weekday names separated
    by commas, spaces, semicolons or slashes, e.g. "Mo,Mi,Fr,So". Tokens must
    match exactly, so words like "frei" select nothing. Empty or invalid input
    yields seven False values.

    Args:
        text: Plan text from the wellness record (may be None)

    Returns:
        List of 7 booleans
    """
    days = [False] * 7
    if not isinstance(text, str):
        return days

    for token in re.split(r"[,;/\s]+", text.strip().lower()):
        index = WEEKDAY_TOKENS.get(token)
        if index is not None:
            days[index] = True

    return days
