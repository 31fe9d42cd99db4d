from datetime import datetime, timedelta
import uuid

from bubbletodo.engine.ranking import stack_rank, today_tasks
from bubbletodo.models.task import DueDateSemantics, TaskRecord
from bubbletodo.models.task_factory import mark_completed


def test_stack_rank_orders_by_sort_score(sample_task_base, now):
    idle = TaskRecord(**{**sample_task_base, "id": str(uuid.uuid4()), "title": "Idle", "priority": 3})
    soon = TaskRecord(**{
        **sample_task_base,
        "id": str(uuid.uuid4()),
        "title": "Due soon",
        "priority": 3,
        "due_date": now + timedelta(hours=1),
    })
    critical = TaskRecord(**{**sample_task_base, "id": str(uuid.uuid4()), "title": "Critical", "priority": 5})

    ranked = stack_rank([idle, soon, critical], now)
    assert [t.title for t in ranked] == ["Critical", "Due soon", "Idle"]


def test_stack_rank_ties_are_deterministic(sample_task_base, now):
    older = TaskRecord(**{**sample_task_base, "id": "b", "created_at": now - timedelta(hours=2)})
    newer = TaskRecord(**{**sample_task_base, "id": "a", "created_at": now - timedelta(hours=1)})
    same_time = TaskRecord(**{**sample_task_base, "id": "c", "created_at": now - timedelta(hours=1)})

    assert [t.id for t in stack_rank([same_time, newer, older], now)] == ["b", "a", "c"]


def test_today_tasks_filters_and_sorts(sample_task_base, now):
    tomorrow_on = TaskRecord(**{
        **sample_task_base,
        "id": str(uuid.uuid4()),
        "title": "Tomorrow",
        "due_date": now + timedelta(days=1),
    })
    deadline = TaskRecord(**{
        **sample_task_base,
        "id": str(uuid.uuid4()),
        "title": "Deadline",
        "due_date": now + timedelta(days=2),
        "due_date_semantics": DueDateSemantics.BEFORE,
    })
    overdue = TaskRecord(**{
        **sample_task_base,
        "id": str(uuid.uuid4()),
        "title": "Overdue",
        "priority": 1,
        "due_date": now - timedelta(days=2),
    })
    done = mark_completed(TaskRecord(**{**sample_task_base, "id": str(uuid.uuid4()), "title": "Done"}), now)

    result = today_tasks([tomorrow_on, deadline, overdue, done], now)
    assert [t.title for t in result] == ["Overdue", "Deadline"]
