"""Urgency scoring for BubbleTodo.

Two independent, time-varying formulas:
- effective_weight: presentation magnitude, grows as a task ages or passes due
- sort_score: display ordering (higher = more urgent); priority dominates at
  the 1000s scale and due-date urgency fills the gaps between priorities

Both take ``now`` explicitly, so the same inputs always produce the same outputs.
"""

from datetime import datetime, timezone
from typing import Optional

from bubbletodo.engine.calendar_math import localize_pair
from bubbletodo.models.constants import (
    DEADLINE_FAR_PER_HOUR,
    DEADLINE_NEAR_BONUS,
    DEADLINE_NEAR_PER_HOUR,
    DEADLINE_RAMP_FAR_FACTOR,
    DEADLINE_RAMP_FAR_HOURS,
    DEADLINE_RAMP_NEAR_FACTOR,
    DEADLINE_RAMP_NEAR_HOURS,
    DUE_TODAY_AHEAD_BONUS,
    DUE_TODAY_AHEAD_DECAY_PER_HOUR,
    DUE_TODAY_PAST_BONUS,
    DUE_TODAY_PAST_PER_HOUR,
    OVERDUE_BONUS,
    OVERDUE_PER_HOUR,
    OVERDUE_WEIGHT_PER_HOUR,
    PRIORITY_SCORE_SCALE,
    STALE_AFTER_HOURS,
    STALE_SCORE_CAP,
    STALE_SCORE_PER_HOUR,
    STALE_WEIGHT_PER_HOUR,
)
from bubbletodo.models.task import DueDateSemantics, TaskRecord


def _hours(start: datetime, end: datetime) -> float:
    """Real elapsed hours from start to end (negative if end is earlier)."""
    if start.tzinfo is not None and end.tzinfo is not None:
        # Same-zone aware subtraction is wall-clock; go through UTC across DST changes
        start = start.astimezone(timezone.utc)
        end = end.astimezone(timezone.utc)
    return (end - start).total_seconds() / 3600.0


def effective_weight(task: TaskRecord, now: datetime) -> float:
    """Calculate the task's effective urgency weight at ``now``.

    Starting from base_weight:
    1. Overdue: +0.1 per hour past due
    2. BEFORE deadline within 72h: multiplicative ramp (steeper inside 24h)
    3. No due date and older than 24h: +0.05 per hour beyond the first day

    ON tasks with a future due date get no early ramp.

    Args:
        task: Task to weigh
        now: Current instant

    Returns:
        Effective weight
    """
    weight = task.base_weight
    due = task.due_date

    if due is not None and now > due:
        weight += _hours(due, now) * OVERDUE_WEIGHT_PER_HOUR
    elif due is not None:
        if task.effective_semantics == DueDateSemantics.BEFORE:
            hours_until_due = _hours(now, due)
            if hours_until_due < DEADLINE_RAMP_NEAR_HOURS:
                weight *= 1 + (DEADLINE_RAMP_NEAR_HOURS - hours_until_due) / DEADLINE_RAMP_NEAR_HOURS * DEADLINE_RAMP_NEAR_FACTOR
            elif hours_until_due < DEADLINE_RAMP_FAR_HOURS:
                weight *= 1 + (DEADLINE_RAMP_FAR_HOURS - hours_until_due) / DEADLINE_RAMP_FAR_HOURS * DEADLINE_RAMP_FAR_FACTOR
    else:
        hours_since_creation = _hours(task.created_at, now)
        if hours_since_creation > STALE_AFTER_HOURS:
            weight += (hours_since_creation - STALE_AFTER_HOURS) * STALE_WEIGHT_PER_HOUR

    return weight


def sort_score(task: TaskRecord, now: datetime, time_zone: Optional[str] = None) -> float:
    """Calculate the ordering score of a task at ``now`` (higher sorts first).

    Args:
        task: Task to score
        now: Current instant
        time_zone: Zone whose calendar days decide "today" (aware datetimes only)

    Returns:
        priority * 1000 plus a due-date or staleness bonus
    """
    score = float(task.priority * PRIORITY_SCORE_SCALE)
    due = task.due_date

    if due is None:
        hours_since_creation = _hours(task.created_at, now)
        if hours_since_creation > STALE_AFTER_HOURS:
            score += min((hours_since_creation - STALE_AFTER_HOURS) * STALE_SCORE_PER_HOUR, STALE_SCORE_CAP)
        return score

    local_now, local_due = localize_pair(now, due, time_zone)
    today = local_now.date()
    due_day = local_due.date()

    if due_day == today:
        if due > now:
            hours_until_due = _hours(now, due)
            score += max(0.0, DUE_TODAY_AHEAD_BONUS - hours_until_due * DUE_TODAY_AHEAD_DECAY_PER_HOUR)
        else:
            hours_overdue = _hours(due, now)
            score += DUE_TODAY_PAST_BONUS + hours_overdue * DUE_TODAY_PAST_PER_HOUR
    elif due_day < today:
        hours_overdue = _hours(due, now)
        score += OVERDUE_BONUS + hours_overdue * OVERDUE_PER_HOUR
    elif task.effective_semantics == DueDateSemantics.BEFORE:
        hours_until_due = _hours(now, due)
        if hours_until_due < DEADLINE_RAMP_NEAR_HOURS:
            score += DEADLINE_NEAR_BONUS + (DEADLINE_RAMP_NEAR_HOURS - hours_until_due) * DEADLINE_NEAR_PER_HOUR
        elif hours_until_due < DEADLINE_RAMP_FAR_HOURS:
            score += (DEADLINE_RAMP_FAR_HOURS - hours_until_due) * DEADLINE_FAR_PER_HOUR

    return score
