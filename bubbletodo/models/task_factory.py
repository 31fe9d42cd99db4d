"""Task creation factory and completion lifecycle for BubbleTodo.

Tasks are treated as values: lifecycle helpers return updated copies
instead of mutating the record in place.
"""

import uuid
from datetime import datetime
from typing import Optional, Dict, Any

from bubbletodo.models.constants import (
    DEFAULT_BASE_WEIGHT,
    DEFAULT_EFFORT,
    DEFAULT_PRIORITY,
)
from bubbletodo.models.recurrence import RecurrenceSpec
from bubbletodo.models.task import DueDateSemantics, TaskRecord


def create_task_defaults() -> Dict[str, Any]:
    """Get default task values as a dictionary."""
    return {
        "priority": DEFAULT_PRIORITY,
        "base_weight": DEFAULT_BASE_WEIGHT,
        "effort": DEFAULT_EFFORT,
        "due_date": None,
        "due_date_semantics": DueDateSemantics.ON,
        "recurrence": None,
    }


def create_task(
    title: str,
    priority: Optional[int] = None,
    effort: Optional[float] = None,
    due_date: Optional[datetime] = None,
    due_date_semantics: Optional[DueDateSemantics] = None,
    recurrence: Optional[RecurrenceSpec] = None,
    created_at: Optional[datetime] = None,
) -> TaskRecord:
    """Create a task with defaults, allowing overrides.

    Args:
        title: Task title (required)
        priority: 1-5 (clamped; defaults to constant)
        effort: Effort in minutes-equivalent (defaults to constant)
        due_date: Optional due instant
        due_date_semantics: ON or BEFORE (defaults to ON)
        recurrence: Recurrence rule; makes the task recurring when given
        created_at: Creation instant (defaults to now)

    Returns:
        TaskRecord with defaults applied
    """
    defaults = create_task_defaults()
    return TaskRecord(
        id=str(uuid.uuid4()),
        title=title,
        priority=priority if priority is not None else defaults["priority"],
        base_weight=defaults["base_weight"],
        effort=effort if effort is not None else defaults["effort"],
        due_date=due_date if due_date is not None else defaults["due_date"],
        due_date_semantics=due_date_semantics if due_date_semantics is not None else defaults["due_date_semantics"],
        is_recurring=recurrence is not None,
        recurrence=recurrence,
        created_at=created_at if created_at is not None else datetime.now(),
    )


def mark_completed(task: TaskRecord, now: datetime) -> TaskRecord:
    """Return a completed copy of the task."""
    return task.model_copy(update={"is_completed": True, "completed_at": now})


def undo_completion(task: TaskRecord) -> TaskRecord:
    """Return a copy of the task with completion cleared."""
    return task.model_copy(update={"is_completed": False, "completed_at": None})
