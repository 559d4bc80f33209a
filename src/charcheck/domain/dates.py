"""Calendar-date parsing and age-bound arithmetic.

All dates are plain :class:`datetime.date` values read as UTC calendar
days. Time of day and local timezone never enter a comparison, so an age
check gives the same answer at 00:01 and 23:59.

INVARIANT: Unparseable input fails closed for both age bounds. It is
too young AND too old. The rule table puts ``invalid_date`` ahead of the
age rules, so callers see the format error first.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta

# Exact shape only: 4 digits, dash, 2 digits, dash, 2 digits.
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_NUMERIC = re.compile(r"[0-9]+")

# Years below this cannot round-trip: two-digit years were historically
# read as 19xx by the form's date widget.
MIN_CALENDAR_YEAR = 100


def _build_date(year: int, month: int, day: int) -> date:
    """Build a date, rolling overflowing months and days forward.

    ``(2023, 13, 1)`` becomes 2024-01-01 and ``(2023, 2, 30)`` becomes
    2023-03-02. Raises ``ValueError``/``OverflowError`` outside the
    representable range.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def parse_calendar_date(text: str | None) -> date | None:
    """Parse ``YYYY-MM-DD``-ish text into a date, or None if unparseable.

    Splits on ``-`` and uses the first three components. Any missing,
    non-numeric, or zero component makes the text unparseable.

    Examples:
        >>> parse_calendar_date("2020-06-15")
        datetime.date(2020, 6, 15)
        >>> parse_calendar_date("2020-00-15") is None
        True
    """
    parts = (text or "").split("-")
    if len(parts) < 3:
        return None
    numbers: list[int] = []
    for part in parts[:3]:
        part = part.strip()
        if not _NUMERIC.fullmatch(part):
            return None
        value = int(part)
        if value == 0:
            return None
        numbers.append(value)
    year, month, day = numbers
    try:
        return _build_date(year, month, day)
    except (ValueError, OverflowError):
        return None


def today_utc(now: datetime | None = None) -> date:
    """Return the current UTC calendar date, dropping time of day."""
    moment = now if now is not None else datetime.now(UTC)
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return moment.date()


def shift_years(day: date, years: int) -> date:
    """Move *day* by *years*, keeping month and day.

    Feb 29 in a non-leap target year rolls forward to Mar 1.
    """
    target = day.year + years
    try:
        return day.replace(year=target)
    except ValueError:
        return date(target, 3, 1)


def is_too_young(text: str | None, min_years: int = 8, today: date | None = None) -> bool:
    """True if the birth date is later than *today* minus *min_years*.

    A person born exactly *min_years* ago today is old enough.
    """
    dob = parse_calendar_date(text)
    if dob is None:
        return True
    cutoff = shift_years(today or today_utc(), -min_years)
    return dob > cutoff


def is_too_old(text: str | None, max_years: int = 100, today: date | None = None) -> bool:
    """True if the birth date is earlier than *today* minus *max_years*.

    A person born exactly *max_years* ago today is still accepted.
    """
    dob = parse_calendar_date(text)
    if dob is None:
        return True
    cutoff = shift_years(today or today_utc(), -max_years)
    return dob < cutoff


def is_valid_calendar_date(text: str | None) -> bool:
    """Strict calendar check for ``YYYY-MM-DD``.

    The text must have the exact shape and name a real day: the date
    rebuilt from its components must carry the same year, month, and
    day. ``2023-02-29`` and ``2023-04-31`` fail; ``2024-02-29`` passes.
    """
    if not text or not ISO_DATE_PATTERN.fullmatch(text):
        return False
    year, month, day = (int(part) for part in text.split("-"))
    if year < MIN_CALENDAR_YEAR:
        return False
    try:
        built = _build_date(year, month, day)
    except (ValueError, OverflowError):
        return False
    return (built.year, built.month, built.day) == (year, month, day)
