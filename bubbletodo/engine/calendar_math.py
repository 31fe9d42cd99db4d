"""Calendar helpers for BubbleTodo.

Pure functions over the Gregorian calendar: month lengths, Nth weekday of a
month, month arithmetic and local day boundaries.

Naive datetimes are treated as local wall-clock time. Aware datetimes are
converted to ``time_zone`` (an IANA zone name) when one is given.
"""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from bubbletodo.models.recurrence import LAST_WEEK_OF_MONTH, Weekday


class CalendarError(ValueError):
    """A date could not be built from its components.

    Unreachable for valid inputs; raised instead of substituting a fallback date.
    """


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in the given month (leap-year aware)."""
    try:
        return calendar.monthrange(year, month)[1]
    except (ValueError, OverflowError) as e:
        raise CalendarError(f"Invalid month {year}-{month}") from e


def safe_date(year: int, month: int, day: int) -> date:
    """Build a date, raising CalendarError instead of ValueError."""
    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise CalendarError(f"Invalid date {year}-{month}-{day}") from e


def add_months(year: int, month: int, n: int) -> Tuple[int, int]:
    """Shift (year, month) by n months."""
    index = year * 12 + (month - 1) + n
    return index // 12, index % 12 + 1


def weekday_of(d: date) -> Weekday:
    # Python weekday: Monday=0 ... Sunday=6
    return Weekday((d.weekday() + 1) % 7 + 1)


def _python_weekday(weekday: Weekday) -> int:
    return (int(weekday) - 2) % 7


def nth_weekday_of_month(year: int, month: int, week: int, weekday: int) -> date:
    """Return the date of the ``week``-th ``weekday`` in the month.

    ``week == 5`` returns the last such weekday, whether the month has four
    or five of them.

    Raises:
        CalendarError: month, week or weekday out of range
    """
    if not 1 <= week <= LAST_WEEK_OF_MONTH:
        raise CalendarError(f"Invalid week-of-month {week}")
    try:
        wd = Weekday(weekday)
    except ValueError as e:
        raise CalendarError(f"Invalid weekday {weekday}") from e

    month_length = last_day_of_month(year, month)
    first = safe_date(year, month, 1)
    offset = (_python_weekday(wd) - first.weekday()) % 7
    day = 1 + offset + (week - 1) * 7
    while day > month_length:
        day -= 7
    return safe_date(year, month, day)


def as_date(value) -> date:
    """Calendar day of a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def to_local(dt: datetime, time_zone: Optional[str] = None) -> datetime:
    """Express an aware datetime in ``time_zone``; naive values are returned as-is."""
    if time_zone is None or dt.tzinfo is None:
        return dt
    return dt.astimezone(ZoneInfo(time_zone))


def localize_pair(now: datetime, other: datetime, time_zone: Optional[str] = None) -> Tuple[datetime, datetime]:
    """Put two instants on the same local calendar for day comparisons.

    Without an explicit zone, an aware ``now`` is expressed in ``other``'s zone.
    """
    if time_zone is not None:
        return to_local(now, time_zone), to_local(other, time_zone)
    if now.tzinfo is not None and other.tzinfo is not None:
        return now.astimezone(other.tzinfo), other
    return now, other


def start_of_day(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), time.min, tzinfo=dt.tzinfo)


def start_of_next_day(dt: datetime) -> datetime:
    return datetime.combine(dt.date() + timedelta(days=1), time.min, tzinfo=dt.tzinfo)
