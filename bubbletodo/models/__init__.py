"""Data models for BubbleTodo."""

from bubbletodo.models.task import TaskRecord, DueDateSemantics
from bubbletodo.models.recurrence import (
    Weekday,
    DailyRecurrence,
    WeeklyRecurrence,
    MonthlyRecurrence,
    TimesPerMonth,
    DayOfMonth,
    NthWeekday,
    RecurrenceSpec,
    parse_recurrence,
)
from bubbletodo.models.task_factory import create_task, mark_completed, undo_completion

__all__ = [
    "TaskRecord",
    "DueDateSemantics",
    "Weekday",
    "DailyRecurrence",
    "WeeklyRecurrence",
    "MonthlyRecurrence",
    "TimesPerMonth",
    "DayOfMonth",
    "NthWeekday",
    "RecurrenceSpec",
    "parse_recurrence",
    "create_task",
    "mark_completed",
    "undo_completion",
]
