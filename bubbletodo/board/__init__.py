"""Task collection ownership and completion history for BubbleTodo."""

from bubbletodo.board.task_board import TaskBoard, CompletionReceipt, TaskNotFoundError, TaskStateError
from bubbletodo.board.history import CompletionPeriod, EffortSummary, completed_in_period, summarize_effort

__all__ = [
    "TaskBoard",
    "CompletionReceipt",
    "TaskNotFoundError",
    "TaskStateError",
    "CompletionPeriod",
    "EffortSummary",
    "completed_in_period",
    "summarize_effort",
]
