"""Recurrence models for BubbleTodo.

A recurrence spec is a closed tagged union discriminated by ``kind``:
daily, weekly (specific weekdays or N times per week) and monthly
(N times per month, a day of month, or the Nth weekday of the month).

Weekday integers follow the stored-data convention 1=Sunday..7=Saturday.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated, FrozenSet, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class Weekday(IntEnum):
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


# Sentinels
LAST_DAY_OF_MONTH = 0
LAST_WEEK_OF_MONTH = 5


class DailyRecurrence(BaseModel):
    """Repeats every day."""

    kind: Literal["daily"] = "daily"


class WeeklyRecurrence(BaseModel):
    """Repeats on specific weekdays, or N times per week when none are given."""

    kind: Literal["weekly"] = "weekly"
    specific_weekdays: FrozenSet[Weekday] = Field(
        default_factory=frozenset,
        description="Weekdays on which the task recurs (takes precedence over times_per_week)",
    )
    times_per_week: int = Field(1, ge=1, description="For patterns like '3 times per week'")


class TimesPerMonth(BaseModel):
    kind: Literal["times_per_month"] = "times_per_month"
    count: int = Field(..., ge=1, le=30)


class DayOfMonth(BaseModel):
    kind: Literal["day_of_month"] = "day_of_month"
    day: int = Field(..., ge=0, le=31, description="Day of month; 0 means the last day")


class NthWeekday(BaseModel):
    kind: Literal["nth_weekday"] = "nth_weekday"
    week: int = Field(..., ge=1, le=5, description="Occurrence within the month; 5 means the last one")
    weekday: Weekday


MonthlyPattern = Annotated[
    Union[TimesPerMonth, DayOfMonth, NthWeekday],
    Field(discriminator="kind"),
]


class MonthlyRecurrence(BaseModel):
    kind: Literal["monthly"] = "monthly"
    pattern: MonthlyPattern


RecurrenceSpec = Annotated[
    Union[DailyRecurrence, WeeklyRecurrence, MonthlyRecurrence],
    Field(discriminator="kind"),
]

_RECURRENCE_ADAPTER = TypeAdapter(RecurrenceSpec)


def parse_recurrence(data) -> Union[DailyRecurrence, WeeklyRecurrence, MonthlyRecurrence]:
    """Validate stored recurrence data (e.g. a dict) into a RecurrenceSpec.

    Raises:
        pydantic.ValidationError: if the data does not describe a valid recurrence rule
    """
    return _RECURRENCE_ADAPTER.validate_python(data)
