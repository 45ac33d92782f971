"""Date and time utilities for forkscan."""

import datetime
from typing import Optional, Union

from dateutil.parser import parse as parse_date

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
MONTH = DAY * 30
YEAR = DAY * 365


def make_aware_datetime(dt: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    """Attach UTC to a naive datetime (GitHub timestamps are UTC)."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt


def parse_timestamp(
    value: Union[str, datetime.datetime, None]
) -> Optional[datetime.datetime]:
    """Parse an ISO-8601 GitHub timestamp into an aware datetime."""
    if not value:
        return None
    if isinstance(value, datetime.datetime):
        return make_aware_datetime(value)
    return make_aware_datetime(parse_date(value))


def relative_date(
    value: Union[str, datetime.datetime, None],
    now: Optional[datetime.datetime] = None,
) -> str:
    """
    Describe how long ago a timestamp was, e.g. "3 days ago".

    Args:
        value: Timestamp as ISO-8601 string or datetime
        now: Reference time (defaults to the current UTC time)

    Returns:
        str: Human-readable relative age
    """
    dt = parse_timestamp(value)
    if dt is None:
        return "never"

    now = make_aware_datetime(now) or datetime.datetime.now(datetime.timezone.utc)
    delta = round((now - dt).total_seconds())

    if delta < 30:
        return "just now"
    if delta < MINUTE:
        return f"{delta} seconds ago"
    if delta < 2 * MINUTE:
        return "a minute ago"
    if delta < HOUR:
        return f"{delta // MINUTE} minutes ago"
    if delta // HOUR == 1:
        return "an hour ago"
    if delta < DAY:
        return f"{delta // HOUR} hours ago"
    if delta < 2 * DAY:
        return "yesterday"
    if delta < WEEK:
        return f"{delta // DAY} days ago"
    if delta // WEEK == 1:
        return "a week ago"
    if delta < MONTH:
        return f"{delta // WEEK} weeks ago"
    if delta // MONTH == 1:
        return "a month ago"
    if delta < YEAR:
        return f"{delta // MONTH} months ago"
    if delta // YEAR == 1:
        return "a year ago"
    return f"{delta // YEAR} years ago"
