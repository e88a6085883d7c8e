"""Conversions between directive strings and time values.

``expires`` uses a fixed RFC 1123-like layout, always in UTC::

    Thu, 30 Dec 2015 12:00:00 UTC

Day and month names are always English, independent of ``LC_TIME``.
``max-age`` is a number of seconds and converts to a ``timedelta``.
"""

import re
from datetime import UTC, datetime, timedelta

from biscuits.errors import FormatError

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# ddd, dd MMM yyyy HH:mm:ss UTC -- names are filled in from the tables above
EXPIRES_FORMAT = "{weekday}, %d {month} %Y %H:%M:%S UTC"
EXPIRES_LAYOUT = "ddd, dd MMM yyyy HH:mm:ss UTC"
MAX_AGE_LAYOUT = "<seconds>"

_EXPIRES_RE = re.compile(
    rf"({'|'.join(_WEEKDAYS)}), (\d{{2}}) ({'|'.join(_MONTHS)}) (\d{{4}}) "
    r"(\d{2}):(\d{2}):(\d{2}) UTC"
)


def parse_expires(value: str | None) -> datetime:
    """Parse an ``expires`` string into an aware UTC ``datetime``.

    The weekday name is not checked against the date.

    Raises:
        FormatError: *value* is empty or does not match the layout.
    """
    if not value:
        raise FormatError("expires", value, EXPIRES_LAYOUT)
    match = _EXPIRES_RE.fullmatch(value)
    if match is None:
        raise FormatError("expires", value, EXPIRES_LAYOUT)
    _, day, month, year, hour, minute, second = match.groups()
    try:
        return datetime(
            int(year),
            _MONTHS.index(month) + 1,
            int(day),
            int(hour),
            int(minute),
            int(second),
            tzinfo=UTC,
        )
    except ValueError as exc:
        raise FormatError("expires", value, EXPIRES_LAYOUT) from exc


def format_expires(when: datetime) -> str:
    """Render *when* in the ``expires`` layout.

    Naive datetimes are taken to be UTC already; aware ones are converted.
    """
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    else:
        when = when.astimezone(UTC)
    layout = EXPIRES_FORMAT.format(
        weekday=_WEEKDAYS[when.weekday()],
        month=_MONTHS[when.month - 1],
    )
    return when.strftime(layout)


def parse_max_age(value: str | None) -> timedelta:
    """Parse a ``max-age`` string (seconds, fractions allowed) into a ``timedelta``.

    Raises:
        FormatError: *value* is empty, non-numeric, or out of range.
    """
    if not value:
        raise FormatError("max-age", value, MAX_AGE_LAYOUT)
    try:
        return timedelta(seconds=float(value))
    except (ValueError, OverflowError) as exc:
        raise FormatError("max-age", value, MAX_AGE_LAYOUT) from exc


def format_max_age(duration: timedelta) -> str:
    """Render *duration* as a whole number of seconds (truncated toward zero)."""
    return str(int(duration.total_seconds()))
