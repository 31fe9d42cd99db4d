"""In-process task collection for BubbleTodo.

The board owns the mutable task set. Completing a task, spawning its
recurring successor and inserting it happen under one lock, so an undo
removes exactly the successor that completion created.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from bubbletodo.config import EngineSettings
from bubbletodo.engine.ranking import today_tasks
from bubbletodo.models.recurrence import Weekday
from bubbletodo.models.task import TaskRecord
from bubbletodo.models.task_factory import mark_completed, undo_completion
from bubbletodo.recurrence.successor import create_next_recurring_task

logger = logging.getLogger(__name__)


class TaskNotFoundError(KeyError):
    """No task with the given id is on the board."""


class TaskStateError(ValueError):
    """The requested transition does not apply to the task's current state."""


@dataclass(frozen=True)
class CompletionReceipt:
    """Record of one completion, used to undo it."""
    task_id: str
    completed_at: datetime
    successor_id: Optional[str] = None


class TaskBoard:
    """Thread-safe owner of the active task collection."""

    def __init__(
        self,
        tasks: Optional[Iterable[TaskRecord]] = None,
        *,
        first_weekday: Weekday = Weekday.MONDAY,
        time_zone: Optional[str] = None,
    ):
        self.first_weekday = Weekday(first_weekday)
        self.time_zone = time_zone
        self._lock = threading.RLock()
        self._tasks: Dict[str, TaskRecord] = {}
        for task in tasks or []:
            self._tasks[task.id] = task

    @classmethod
    def from_settings(cls, settings: EngineSettings, tasks: Optional[Iterable[TaskRecord]] = None) -> "TaskBoard":
        return cls(tasks, first_weekday=settings.first_weekday, time_zone=settings.time_zone)

    def _require(self, task_id: str) -> TaskRecord:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def add(self, task: TaskRecord) -> TaskRecord:
        """Insert a task; ids must be unique."""
        with self._lock:
            if task.id in self._tasks:
                raise TaskStateError(f"Task {task.id} already exists")
            self._tasks[task.id] = task
            logger.debug(f"Added task {task.id}: {task.title[:50]}")
            return task

    def get(self, task_id: str) -> Optional[TaskRecord]:
        with self._lock:
            return self._tasks.get(task_id)

    def tasks(self) -> List[TaskRecord]:
        """Snapshot of all tasks, oldest first."""
        with self._lock:
            return sorted(self._tasks.values(), key=lambda t: t.created_at.timestamp())

    def completed_tasks(self) -> List[TaskRecord]:
        return [task for task in self.tasks() if task.is_completed]

    def delete(self, task_id: str) -> TaskRecord:
        with self._lock:
            task = self._require(task_id)
            del self._tasks[task_id]
            logger.debug(f"Deleted task {task_id}")
            return task

    def complete(self, task_id: str, now: Optional[datetime] = None) -> CompletionReceipt:
        """Mark a task completed and insert its recurring successor, atomically.

        Raises:
            TaskNotFoundError: unknown task id
            TaskStateError: task is already completed
        """
        now = now if now is not None else datetime.now()
        with self._lock:
            task = self._require(task_id)
            if task.is_completed:
                raise TaskStateError(f"Task {task_id} is already completed")
            try:
                completed = mark_completed(task, now)
                successor = create_next_recurring_task(completed, now, first_weekday=self.first_weekday)
            except Exception as e:
                logger.error(f"Failed to complete task {task_id}: {type(e).__name__}: {str(e)}")
                raise

            self._tasks[task_id] = completed
            if successor is not None:
                self._tasks[successor.id] = successor
                logger.debug(f"Completed task {task_id}; next occurrence {successor.id} due {successor.due_date}")
            else:
                logger.debug(f"Completed task {task_id}")
            return CompletionReceipt(
                task_id=task_id,
                completed_at=now,
                successor_id=successor.id if successor is not None else None,
            )

    def undo(self, receipt: CompletionReceipt) -> TaskRecord:
        """Revert a completion and remove the successor it spawned.

        Raises:
            TaskNotFoundError: the completed task no longer exists
            TaskStateError: the task is not in the state the receipt recorded, or
                the spawned successor has itself been completed
        """
        with self._lock:
            task = self._require(receipt.task_id)
            if not task.is_completed or task.completed_at != receipt.completed_at:
                raise TaskStateError(f"Task {receipt.task_id} does not match the completion being undone")
            successor = self._tasks.get(receipt.successor_id) if receipt.successor_id is not None else None
            if successor is not None and successor.is_completed:
                raise TaskStateError(f"Next occurrence {successor.id} is already completed; undo that completion first")
            restored = undo_completion(task)
            self._tasks[task.id] = restored
            if receipt.successor_id is not None:
                self._tasks.pop(receipt.successor_id, None)
            logger.debug(f"Undid completion of task {task.id}")
            return restored

    def restore(self, task_id: str) -> TaskRecord:
        """Move a completed task back to the active set, keeping any successor."""
        with self._lock:
            task = self._require(task_id)
            if not task.is_completed:
                raise TaskStateError(f"Task {task_id} is not completed")
            restored = undo_completion(task)
            self._tasks[task_id] = restored
            logger.debug(f"Restored task {task_id}")
            return restored

    def clear_completed(self) -> int:
        """Delete every completed task. Returns the number removed."""
        with self._lock:
            done = [task_id for task_id, task in self._tasks.items() if task.is_completed]
            for task_id in done:
                del self._tasks[task_id]
            logger.debug(f"Cleared {len(done)} completed tasks")
            return len(done)

    def today(self, now: Optional[datetime] = None) -> List[TaskRecord]:
        """Today's visible tasks, most urgent first."""
        now = now if now is not None else datetime.now()
        return today_tasks(self.tasks(), now, self.time_zone)
