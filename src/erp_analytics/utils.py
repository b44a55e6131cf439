"""Utility functions for date handling and labels."""

from datetime import date, datetime


def to_local(dt: datetime) -> datetime:
    """
    Convert a datetime to an aware datetime in the local timezone.

    Naive datetimes are interpreted as local time.

    Args:
        dt: Datetime to convert

    Returns:
        Aware datetime in the local timezone
    """
    return dt.astimezone()


def local_now() -> datetime:
    """Get the current time as an aware local datetime."""
    return datetime.now().astimezone()


def local_date(dt: datetime) -> date:
    """Get the local calendar date of a datetime."""
    return to_local(dt).date()


def format_day_label(day: date) -> str:
    """
    Format a date as a short chart label.

    Args:
        day: Calendar date

    Returns:
        Label such as "Oct 7"
    """
    return f"{day.strftime('%b')} {day.day}"


def capitalize_label(value: str) -> str:
    """
    Uppercase the first character of a label, leaving the rest untouched.

    Args:
        value: Raw label (e.g. "pending")

    Returns:
        Display label (e.g. "Pending")
    """
    if not value:
        return value
    return value[0].upper() + value[1:]


def matches_term(term: str, *fields: str | None) -> bool:
    """
    Case-insensitive substring match across optional text fields.

    An empty term matches everything.

    Args:
        term: Search term
        fields: Candidate field values (None values are skipped)

    Returns:
        True if any field contains the term
    """
    if not term:
        return True

    needle = term.lower()
    return any(field is not None and needle in field.lower() for field in fields)
