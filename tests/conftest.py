"""Pytest fixtures and configuration for BubbleTodo tests."""

import pytest
from datetime import datetime, timedelta
import uuid

from bubbletodo.models.task import TaskRecord, DueDateSemantics
from bubbletodo.models.recurrence import DailyRecurrence


@pytest.fixture
def now():
    """Fixed 'now' used by time-sensitive tests (Wednesday 2024-03-06 12:00)."""
    return datetime(2024, 3, 6, 12, 0, 0)


@pytest.fixture
def sample_task_base(now):
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "title": "Test Task",
        "priority": 3,
        "base_weight": 1.0,
        "effort": 15.0,
        "due_date": None,
        "due_date_semantics": DueDateSemantics.ON,
        "is_recurring": False,
        "recurrence": None,
        "created_at": now,
        "completed_at": None,
        "is_completed": False,
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample TaskRecord for testing."""
    return TaskRecord(**sample_task_base)


@pytest.fixture
def deadline_task(sample_task_base, now):
    """BEFORE-semantics task due today at 18:00."""
    return TaskRecord(**{
        **sample_task_base,
        "id": str(uuid.uuid4()),
        "due_date": now.replace(hour=18),
        "due_date_semantics": DueDateSemantics.BEFORE,
    })


@pytest.fixture
def on_day_task(sample_task_base, now):
    """ON-semantics task due today at 18:00."""
    return TaskRecord(**{**sample_task_base, "id": str(uuid.uuid4()), "due_date": now.replace(hour=18)})


@pytest.fixture
def daily_task(sample_task_base, now):
    """Recurring daily task due today at 09:00."""
    return TaskRecord(**{
        **sample_task_base,
        "id": str(uuid.uuid4()),
        "title": "Water plants",
        "due_date": now.replace(hour=9),
        "is_recurring": True,
        "recurrence": DailyRecurrence(),
    })


@pytest.fixture
def stale_task(sample_task_base, now):
    """Task without a due date created three days ago."""
    return TaskRecord(**{**sample_task_base, "id": str(uuid.uuid4()), "created_at": now - timedelta(days=3)})
