"""Reminder content selection for BubbleTodo.

Picks when the next reminder should fire and which tasks it should mention.
Formatting and delivery belong to the caller.
"""

from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field

from bubbletodo.engine.calendar_math import to_local
from bubbletodo.engine.ranking import today_tasks
from bubbletodo.models.task import TaskRecord


class ReminderContent(BaseModel):
    """What the next reminder should contain."""
    fire_at: datetime = Field(..., description="When the reminder should fire")
    tasks: List[TaskRecord] = Field(default_factory=list, description="Visible-today tasks, most urgent first")
    badge_count: int = Field(0, ge=0)


def _at(day, t: time, tzinfo) -> datetime:
    return datetime.combine(day, time(t.hour, t.minute), tzinfo=tzinfo)


def next_reminder_at(
    reminder_times: Sequence[time],
    count: int,
    now: datetime,
    time_zone: Optional[str] = None,
) -> Optional[datetime]:
    """Next reminder instant strictly after ``now``.

    Only the first ``count`` configured times are active. If none of them is
    still ahead today, the earliest one tomorrow is used.

    Returns:
        The next fire time, or None when no reminder time is active
    """
    if count <= 0:
        return None
    active = sorted(list(reminder_times)[:count])
    if not active:
        return None

    local_now = to_local(now, time_zone)
    for t in active:
        candidate = _at(local_now.date(), t, local_now.tzinfo)
        if candidate > local_now:
            return candidate
    return _at(local_now.date() + timedelta(days=1), active[0], local_now.tzinfo)


def select_reminder(
    tasks: Iterable[TaskRecord],
    now: datetime,
    reminder_times: Sequence[time],
    count: int,
    time_zone: Optional[str] = None,
) -> Optional[ReminderContent]:
    """Build the next reminder's content from today's task list."""
    fire_at = next_reminder_at(reminder_times, count, now, time_zone)
    if fire_at is None:
        return None
    selected = today_tasks(tasks, now, time_zone)
    return ReminderContent(fire_at=fire_at, tasks=selected, badge_count=len(selected))
