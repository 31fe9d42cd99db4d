"""Completed-task history for BubbleTodo.

Filters completed tasks by period and totals the effort they represent.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from bubbletodo.engine.calendar_math import add_months, last_day_of_month, start_of_day
from bubbletodo.models.task import TaskRecord


class CompletionPeriod(str, Enum):
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


class EffortSummary(BaseModel):
    task_count: int = Field(0, ge=0)
    total_effort: float = 0.0
    average_effort: float = 0.0


def period_start(period: CompletionPeriod, now: datetime) -> Optional[datetime]:
    """Earliest completion instant included in ``period`` (None = no bound).

    TODAY starts at local midnight, WEEK is the trailing seven days and MONTH
    is one calendar month back (day clamped to the shorter month).
    """
    period = CompletionPeriod(period)
    if period == CompletionPeriod.TODAY:
        return start_of_day(now)
    if period == CompletionPeriod.WEEK:
        return now - timedelta(days=7)
    if period == CompletionPeriod.MONTH:
        year, month = add_months(now.year, now.month, -1)
        return now.replace(year=year, month=month, day=min(now.day, last_day_of_month(year, month)))
    return None


def completed_in_period(tasks: Iterable[TaskRecord], period: CompletionPeriod, now: datetime) -> List[TaskRecord]:
    """Completed tasks inside the period, most recently completed first."""
    start = period_start(period, now)
    out = [
        task for task in tasks
        if task.is_completed and task.completed_at is not None
        and (start is None or task.completed_at >= start)
    ]
    out.sort(key=lambda t: t.completed_at.timestamp(), reverse=True)
    return out


def summarize_effort(tasks: Iterable[TaskRecord]) -> EffortSummary:
    tasks = list(tasks)
    if not tasks:
        return EffortSummary()
    total = sum(task.effort for task in tasks)
    return EffortSummary(task_count=len(tasks), total_effort=total, average_effort=total / len(tasks))
