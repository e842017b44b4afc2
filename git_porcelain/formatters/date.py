"""Date formatting utilities."""

from typing import Any

from git_porcelain.constants import SYMBOL_NO_VALUE


def format_date(date: Any) -> str:
    """
    Format a date as YYYY-MM-DD HH:MM.

    Args:
        date: datetime, None, or anything printable

    Returns:
        Formatted date string ("-" for None)
    """
    if date is None:
        return SYMBOL_NO_VALUE
    if hasattr(date, "strftime"):
        return date.strftime("%Y-%m-%d %H:%M")
    return str(date)
