"""Scheduling & urgency engine for BubbleTodo."""

from bubbletodo.engine.calendar_math import CalendarError, last_day_of_month, nth_weekday_of_month
from bubbletodo.engine.urgency import effective_weight, sort_score
from bubbletodo.engine.visibility import TaskState, should_show_today, task_state, is_overdue, is_due_today
from bubbletodo.engine.ranking import stack_rank, today_tasks

__all__ = [
    "CalendarError",
    "last_day_of_month",
    "nth_weekday_of_month",
    "effective_weight",
    "sort_score",
    "TaskState",
    "should_show_today",
    "task_state",
    "is_overdue",
    "is_due_today",
    "stack_rank",
    "today_tasks",
]
