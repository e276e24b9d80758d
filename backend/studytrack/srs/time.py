"""Local-time helpers for SRS scheduling.

Review scheduling works in whole calendar days in the user's local zone. The
zone comes from STUDYTRACK_TIMEZONE, falling back to the system local zone.
Due dates are stored as YYYY-MM-DD strings.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo

from studytrack.config import get_settings


DUE_DATE_FORMAT = "%Y-%m-%d"


def local_timezone() -> tzinfo:
    """Return the configured zone, or the system local zone."""
    zone = get_settings().zoneinfo()
    if zone is not None:
        return zone
    return datetime.now().astimezone().tzinfo


def local_now() -> datetime:
    """Return timezone-aware local 'now'. The only reader of the real clock."""
    return datetime.now(local_timezone())


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to an aware local datetime.

    Naive datetimes are taken to already be local wall-clock time.
    """
    zone = get_settings().zoneinfo()
    if dt.tzinfo is None:
        if zone is None:
            return dt.astimezone()
        return dt.replace(tzinfo=zone)
    if zone is None:
        return dt.astimezone()
    return dt.astimezone(zone)


def local_day(value: date | datetime) -> date:
    """Truncate a date or datetime to its local calendar day."""
    if isinstance(value, datetime):
        return to_local(value).date()
    return value


def start_of_day(day: date) -> datetime:
    """Return local midnight (00:00:00.000) at the start of the given day."""
    return to_local(datetime.combine(day, time.min))


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def format_due_date(value: date | datetime) -> str:
    """Format a due date in its YYYY-MM-DD storage form."""
    return local_day(value).strftime(DUE_DATE_FORMAT)


def parse_due_date(s: str) -> date:
    """Parse a stored due date.

    Accepts YYYY-MM-DD or a full ISO-8601 timestamp (trailing 'Z' allowed),
    in which case its local calendar day is kept.

    Raises:
        ValueError: If the string is neither form
    """
    raw = s
    s = s.strip()
    try:
        return datetime.strptime(s, DUE_DATE_FORMAT).date()
    except ValueError:
        pass
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return local_day(datetime.fromisoformat(s))
    except ValueError:
        raise ValueError(f"Invalid due date: {raw!r}") from None
