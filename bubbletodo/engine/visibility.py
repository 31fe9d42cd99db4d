"""Visibility gate for BubbleTodo.

Decides whether a task belongs in "today's" working set, and which
time-driven state it is in:

    ON:     PENDING -> DUE_WINDOW -> OVERDUE (until completed)
    BEFORE: PENDING -> DUE_WINDOW -> EXPIRED

COMPLETED is reached only by an explicit action; undoing it simply clears
completion and the state is recomputed from the clock.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from bubbletodo.engine.calendar_math import localize_pair, start_of_day, start_of_next_day
from bubbletodo.models.task import DueDateSemantics, TaskRecord


class TaskState(str, Enum):
    """Time-driven task state."""
    PENDING = "pending"
    DUE_WINDOW = "due_window"
    OVERDUE = "overdue"  # ON semantics only
    EXPIRED = "expired"  # BEFORE semantics only
    COMPLETED = "completed"


def should_show_today(task: TaskRecord, now: datetime, time_zone: Optional[str] = None) -> bool:
    """Check if a task should be visible today.

    - Completed tasks are never visible
    - Tasks without a due date are always visible
    - ON (and every recurring task): from the start of the due day onwards
    - BEFORE: until the end of the due day
    """
    if task.is_completed:
        return False
    if task.due_date is None:
        return True

    local_now, local_due = localize_pair(now, task.due_date, time_zone)
    if task.effective_semantics == DueDateSemantics.ON:
        return local_now >= start_of_day(local_due)
    return local_now < start_of_next_day(local_due)


def task_state(task: TaskRecord, now: datetime, time_zone: Optional[str] = None) -> TaskState:
    """Compute the task's state at ``now``."""
    if task.is_completed:
        return TaskState.COMPLETED
    if task.due_date is None:
        return TaskState.PENDING

    local_now, local_due = localize_pair(now, task.due_date, time_zone)
    if local_now < start_of_day(local_due):
        return TaskState.PENDING
    if local_now < start_of_next_day(local_due):
        return TaskState.DUE_WINDOW
    if task.effective_semantics == DueDateSemantics.ON:
        return TaskState.OVERDUE
    return TaskState.EXPIRED


def is_overdue(task: TaskRecord, now: datetime) -> bool:
    """True once ``now`` is past the due instant."""
    if task.due_date is None:
        return False
    return now > task.due_date


def is_due_today(task: TaskRecord, now: datetime, time_zone: Optional[str] = None) -> bool:
    if task.due_date is None:
        return False
    local_now, local_due = localize_pair(now, task.due_date, time_zone)
    return local_now.date() == local_due.date()
