"""Next-occurrence resolution for recurring tasks.

Given a recurrence spec and an anchor, computes the next due date. The result
is always strictly later than the anchor's calendar day.

Spacing for "N times per week/month" is intentionally approximate: the anchor
advances by floor(7/N) or floor(30/N) days, with the week/month boundary
adjustments described on each branch.
"""

from datetime import date, datetime, timedelta
from typing import Union

from bubbletodo.engine.calendar_math import (
    add_months,
    as_date,
    last_day_of_month,
    nth_weekday_of_month,
    safe_date,
    weekday_of,
)
from bubbletodo.models.constants import APPROX_DAYS_PER_MONTH, DAYS_PER_WEEK, WEEKDAY_SCAN_DAYS
from bubbletodo.models.recurrence import (
    LAST_DAY_OF_MONTH,
    DailyRecurrence,
    DayOfMonth,
    MonthlyRecurrence,
    NthWeekday,
    RecurrenceSpec,
    TimesPerMonth,
    Weekday,
    WeeklyRecurrence,
)


def next_occurrence(
    spec: RecurrenceSpec,
    from_: Union[date, datetime],
    first_weekday: Weekday = Weekday.MONDAY,
) -> date:
    """Compute the next occurrence date strictly after ``from_``'s day.

    Args:
        spec: Recurrence rule
        from_: Anchor date or instant (only its calendar day is used)
        first_weekday: First day of the week for weekly rules

    Returns:
        The next occurrence date

    Raises:
        CalendarError: if a calendar date cannot be built (never for valid rules)
    """
    anchor = as_date(from_)

    if isinstance(spec, DailyRecurrence):
        return anchor + timedelta(days=1)

    if isinstance(spec, WeeklyRecurrence):
        return _next_weekly(spec, anchor, Weekday(first_weekday))

    if isinstance(spec, MonthlyRecurrence):
        pattern = spec.pattern
        if isinstance(pattern, TimesPerMonth):
            return _next_times_per_month(pattern.count, anchor)
        if isinstance(pattern, DayOfMonth):
            return _next_day_of_month(pattern.day, anchor)
        if isinstance(pattern, NthWeekday):
            return _next_nth_weekday(pattern.week, pattern.weekday, anchor)

    raise TypeError(f"Unsupported recurrence spec: {spec!r}")


def _last_weekday_of_week(first_weekday: Weekday) -> Weekday:
    return Weekday((int(first_weekday) - 2) % 7 + 1)


def _scan_for_weekday(anchor: date, weekdays) -> date:
    """First date after anchor whose weekday is in ``weekdays``."""
    for offset in range(1, WEEKDAY_SCAN_DAYS + 1):
        candidate = anchor + timedelta(days=offset)
        if weekday_of(candidate) in weekdays:
            return candidate
    return anchor + timedelta(days=DAYS_PER_WEEK)


def _next_weekly(spec: WeeklyRecurrence, anchor: date, first_weekday: Weekday) -> date:
    if spec.specific_weekdays:
        return _scan_for_weekday(anchor, spec.specific_weekdays)

    if spec.times_per_week > 1:
        step = max(DAYS_PER_WEEK // spec.times_per_week, 1)
        candidate = anchor + timedelta(days=step)
        # Keep slots inside the week: the last weekday rolls to the next week's start
        if weekday_of(candidate) == _last_weekday_of_week(first_weekday):
            candidate += timedelta(days=1)
        return candidate

    return _scan_for_weekday(anchor, {first_weekday})


def _next_times_per_month(count: int, anchor: date) -> date:
    if count == 1:
        year, month = add_months(anchor.year, anchor.month, 1)
        return safe_date(year, month, 1)

    candidate = anchor + timedelta(days=APPROX_DAYS_PER_MONTH // count)
    if (candidate.year, candidate.month) != (anchor.year, anchor.month):
        return safe_date(candidate.year, candidate.month, 1)
    return candidate


def _next_day_of_month(day: int, anchor: date) -> date:
    def clamped(year: int, month: int) -> int:
        length = last_day_of_month(year, month)
        if day == LAST_DAY_OF_MONTH:
            return length
        return min(day, length)

    this_month = clamped(anchor.year, anchor.month)
    if this_month > anchor.day:
        return safe_date(anchor.year, anchor.month, this_month)

    year, month = add_months(anchor.year, anchor.month, 1)
    return safe_date(year, month, clamped(year, month))


def _next_nth_weekday(week: int, weekday: Weekday, anchor: date) -> date:
    candidate = nth_weekday_of_month(anchor.year, anchor.month, week, weekday)
    if candidate > anchor:
        return candidate
    year, month = add_months(anchor.year, anchor.month, 1)
    return nth_weekday_of_month(year, month, week, weekday)
