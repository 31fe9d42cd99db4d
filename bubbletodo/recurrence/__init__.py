"""Recurrence resolution for BubbleTodo."""

from bubbletodo.recurrence.resolver import next_occurrence
from bubbletodo.recurrence.successor import create_next_recurring_task

__all__ = [
    "next_occurrence",
    "create_next_recurring_task",
]
