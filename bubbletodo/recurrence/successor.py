"""Spawn the next instance of a completed recurring task."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from bubbletodo.models.constants import DEFAULT_BASE_WEIGHT
from bubbletodo.models.recurrence import Weekday
from bubbletodo.models.task import DueDateSemantics, TaskRecord
from bubbletodo.recurrence.resolver import next_occurrence


def create_next_recurring_task(
    task: TaskRecord,
    now: datetime,
    first_weekday: Weekday = Weekday.MONDAY,
) -> Optional[TaskRecord]:
    """Build the successor of a recurring task, or None if it does not recur.

    The anchor is the task's due date, or ``now`` when it has none. The
    successor is due on the next occurrence at the anchor's time of day.
    Title, priority, effort and recurrence are copied; weight and completion
    start fresh.
    """
    if not task.is_recurring or task.recurrence is None:
        return None

    anchor = task.due_date if task.due_date is not None else now
    next_day = next_occurrence(task.recurrence, anchor, first_weekday=first_weekday)

    return TaskRecord(
        id=str(uuid.uuid4()),
        title=task.title,
        priority=task.priority,
        base_weight=DEFAULT_BASE_WEIGHT,
        effort=task.effort,
        due_date=datetime.combine(next_day, anchor.timetz()),
        due_date_semantics=DueDateSemantics.ON,
        is_recurring=True,
        recurrence=task.recurrence,
        created_at=now,
    )
