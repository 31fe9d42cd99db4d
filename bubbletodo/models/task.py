"""Task data model for BubbleTodo."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from bubbletodo.models.constants import MAX_PRIORITY, MIN_PRIORITY
from bubbletodo.models.recurrence import RecurrenceSpec


class DueDateSemantics(str, Enum):
    """How a due date governs a task.

    ON: relevant only on its due day (or once overdue).
    BEFORE: a deadline, relevant from creation until the end of its due day.
    """
    ON = "on"
    BEFORE = "before"


class TaskRecord(BaseModel):
    """Canonical task record."""

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    title: str = Field(..., description="Task title")
    priority: int = Field(3, description="1-5, where 5 is most urgent")
    base_weight: float = Field(1.0, description="Urgency seed, reset to 1.0 for each recurring instance")
    effort: float = Field(1.0, description="Effort in minutes-equivalent")
    due_date: Optional[datetime] = Field(None, description="Task due date")
    due_date_semantics: DueDateSemantics = Field(DueDateSemantics.ON, description="On-day vs deadline semantics")
    is_recurring: bool = Field(False, description="Whether completing the task spawns a successor")
    recurrence: Optional[RecurrenceSpec] = Field(None, description="Recurrence rule (present iff is_recurring)")
    created_at: datetime = Field(..., description="Task creation timestamp")
    completed_at: Optional[datetime] = Field(None, description="Completion timestamp (present iff is_completed)")
    is_completed: bool = Field(False, description="Whether the task is completed")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True

    @field_validator("priority", mode="before")
    @classmethod
    def _clamp_priority(cls, v):
        return min(max(int(v), MIN_PRIORITY), MAX_PRIORITY)

    @model_validator(mode="after")
    def _check_invariants(self):
        if self.is_recurring != (self.recurrence is not None):
            raise ValueError("recurrence must be set if and only if is_recurring is true")
        if self.is_completed != (self.completed_at is not None):
            raise ValueError("completed_at must be set if and only if is_completed is true")
        return self

    @property
    def effective_semantics(self) -> DueDateSemantics:
        """Semantics actually applied; recurring tasks always use ON."""
        if self.is_recurring:
            return DueDateSemantics.ON
        return DueDateSemantics(self.due_date_semantics)
