"""Stack ranking logic for BubbleTodo.

Sorts tasks by sort score (highest first). Ties fall back to creation time
and then id, so the ordering is deterministic.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from bubbletodo.engine.urgency import sort_score
from bubbletodo.engine.visibility import should_show_today
from bubbletodo.models.task import TaskRecord


def stack_rank(tasks: Iterable[TaskRecord], now: datetime, time_zone: Optional[str] = None) -> List[TaskRecord]:
    """Stack-rank tasks by urgency at ``now``.

    Args:
        tasks: Tasks to rank
        now: Current instant
        time_zone: Zone whose calendar days decide "today"

    Returns:
        Tasks sorted most urgent first
    """
    scored = [(task, sort_score(task, now, time_zone)) for task in tasks]
    scored.sort(key=lambda x: (-x[1], x[0].created_at.timestamp(), x[0].id))
    return [task for task, _ in scored]


def today_tasks(tasks: Iterable[TaskRecord], now: datetime, time_zone: Optional[str] = None) -> List[TaskRecord]:
    """Visible-today tasks, most urgent first."""
    visible = [task for task in tasks if should_show_today(task, now, time_zone)]
    return stack_rank(visible, now, time_zone)
