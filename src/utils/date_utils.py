"""Helpers for calendar date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize SQL or adapter values to a calendar date.

    Args:
        value: A date, datetime, or ISO formatted string.

    Returns:
        date: Calendar date without time information.

    Raises:
        ValueError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


__all__ = ["coerce_date"]
