"""Reminder content selection for BubbleTodo."""

from bubbletodo.notifications.reminders import ReminderContent, next_reminder_at, select_reminder

__all__ = [
    "ReminderContent",
    "next_reminder_at",
    "select_reminder",
]
