"""Tests for effective weight and sort score (deterministic given 'now').

'now' is 2024-03-06 12:00 (see conftest).
"""

import pytest
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from bubbletodo.engine.urgency import effective_weight, sort_score
from bubbletodo.models.recurrence import DailyRecurrence
from bubbletodo.models.task import DueDateSemantics, TaskRecord


def make(base, **overrides):
    return TaskRecord(**{**base, **overrides})


class TestEffectiveWeight:

    def test_overdue_grows_linearly(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now - timedelta(hours=10))
        assert effective_weight(task, now) == pytest.approx(2.0)

    def test_overdue_adds_to_base_weight(self, sample_task_base, now):
        task = make(sample_task_base, base_weight=2.0, due_date=now - timedelta(hours=5))
        assert effective_weight(task, now) == pytest.approx(2.5)

    def test_overdue_applies_to_before_semantics(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now - timedelta(hours=2), due_date_semantics=DueDateSemantics.BEFORE)
        assert effective_weight(task, now) == pytest.approx(1.2)

    def test_before_ramp_within_24_hours(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=12), due_date_semantics=DueDateSemantics.BEFORE)
        assert effective_weight(task, now) == pytest.approx(1.25)

    def test_before_ramp_within_72_hours(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=36), due_date_semantics=DueDateSemantics.BEFORE)
        assert effective_weight(task, now) == pytest.approx(1.15)

    def test_before_ramp_is_multiplicative(self, sample_task_base, now):
        task = make(
            sample_task_base,
            base_weight=2.0,
            due_date=now + timedelta(hours=12),
            due_date_semantics=DueDateSemantics.BEFORE,
        )
        assert effective_weight(task, now) == pytest.approx(2.5)

    def test_before_exactly_24_hours_uses_far_ramp(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=24), due_date_semantics=DueDateSemantics.BEFORE)
        assert effective_weight(task, now) == pytest.approx(1.2)

    def test_before_exactly_72_hours_unchanged(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=72), due_date_semantics=DueDateSemantics.BEFORE)
        assert effective_weight(task, now) == pytest.approx(1.0)

    def test_before_at_due_instant_gets_full_ramp(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now, due_date_semantics=DueDateSemantics.BEFORE)
        assert effective_weight(task, now) == pytest.approx(1.5)

    def test_before_ramp_counts_real_hours_across_dst(self, sample_task_base):
        berlin = ZoneInfo("Europe/Berlin")
        now = datetime(2024, 3, 30, 12, 0, tzinfo=berlin)
        # Clocks spring forward overnight: 23 real hours until noon the next day
        task = make(
            sample_task_base,
            created_at=now - timedelta(hours=1),
            due_date=datetime(2024, 3, 31, 12, 0, tzinfo=berlin),
            due_date_semantics=DueDateSemantics.BEFORE,
        )
        assert effective_weight(task, now) == pytest.approx(1 + 1 / 24 * 0.5)
        assert sort_score(task, now) == pytest.approx(3208.0)

    def test_before_beyond_72_hours_unchanged(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=100), due_date_semantics=DueDateSemantics.BEFORE)
        assert effective_weight(task, now) == pytest.approx(1.0)

    def test_on_semantics_has_no_early_ramp(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=12))
        assert effective_weight(task, now) == pytest.approx(1.0)

    def test_recurring_task_has_no_early_ramp(self, sample_task_base, now):
        task = make(
            sample_task_base,
            due_date=now + timedelta(hours=12),
            due_date_semantics=DueDateSemantics.BEFORE,
            is_recurring=True,
            recurrence=DailyRecurrence(),
        )
        assert effective_weight(task, now) == pytest.approx(1.0)

    def test_no_due_date_grows_after_first_day(self, sample_task_base, now):
        task = make(sample_task_base, created_at=now - timedelta(hours=48))
        assert effective_weight(task, now) == pytest.approx(2.2)

    def test_no_due_date_fresh_task_unchanged(self, sample_task_base, now):
        task = make(sample_task_base, created_at=now - timedelta(hours=12))
        assert effective_weight(task, now) == pytest.approx(1.0)


class TestSortScore:

    def test_due_today_ahead(self, sample_task_base, now):
        task = make(sample_task_base, priority=5, due_date=now + timedelta(minutes=30))
        assert sort_score(task, now) == pytest.approx(5490.0)

    def test_due_late_today_gets_small_bonus(self, sample_task_base):
        now = datetime(2024, 3, 6, 0, 30)
        task = make(sample_task_base, due_date=datetime(2024, 3, 6, 23, 30))
        assert sort_score(task, now) == pytest.approx(3040.0)

    def test_due_today_already_past(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now - timedelta(hours=3))
        assert sort_score(task, now) == pytest.approx(3800.0)

    def test_overdue_from_prior_day(self, sample_task_base, now):
        task = make(sample_task_base, priority=1, due_date=now - timedelta(hours=48))
        assert sort_score(task, now) == pytest.approx(4400.0)

    def test_future_on_task_gets_no_bonus(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=18))
        assert sort_score(task, now) == pytest.approx(3000.0)

    def test_before_deadline_within_24_hours(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=18), due_date_semantics=DueDateSemantics.BEFORE)
        assert sort_score(task, now) == pytest.approx(3248.0)

    def test_before_deadline_within_72_hours(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=48), due_date_semantics=DueDateSemantics.BEFORE)
        assert sort_score(task, now) == pytest.approx(3067.2)

    def test_before_deadline_exactly_24_hours(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=24), due_date_semantics=DueDateSemantics.BEFORE)
        assert sort_score(task, now) == pytest.approx(3134.4)

    def test_before_deadline_exactly_72_hours(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=72), due_date_semantics=DueDateSemantics.BEFORE)
        assert sort_score(task, now) == pytest.approx(3000.0)

    def test_due_at_this_instant_counts_as_past(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now, due_date_semantics=DueDateSemantics.BEFORE)
        assert sort_score(task, now) == pytest.approx(3500.0)

    def test_before_deadline_far_away(self, sample_task_base, now):
        task = make(sample_task_base, due_date=now + timedelta(hours=100), due_date_semantics=DueDateSemantics.BEFORE)
        assert sort_score(task, now) == pytest.approx(3000.0)

    def test_stale_task_without_due_date(self, sample_task_base, now):
        task = make(sample_task_base, created_at=now - timedelta(hours=36))
        assert sort_score(task, now) == pytest.approx(3024.0)

    def test_stale_bonus_is_capped(self, stale_task, now):
        old = stale_task.model_copy(update={"created_at": now - timedelta(days=10)})
        assert sort_score(old, now) == pytest.approx(3100.0)

    def test_time_zone_decides_today(self, sample_task_base):
        # 23:30 UTC is already the next day in Berlin, so the task is overdue from a prior day there
        now = datetime(2024, 3, 6, 23, 30, tzinfo=timezone.utc)
        due = datetime(2024, 3, 6, 22, 30, tzinfo=timezone.utc)
        task = make(sample_task_base, due_date=due, created_at=due - timedelta(days=1))

        assert sort_score(task, now) == pytest.approx(3000 + 500 + 100)
        assert sort_score(task, now, time_zone="Europe/Berlin") == pytest.approx(3000 + 1000 + 50)

    def test_priority_five_soon_outranks_priority_four_later(self, sample_task_base, now):
        urgent = make(sample_task_base, priority=5, due_date=now + timedelta(minutes=30))
        later = make(sample_task_base, priority=4, due_date=now + timedelta(hours=10))
        assert sort_score(urgent, now) > sort_score(later, now)
        assert sort_score(later, now) == pytest.approx(4300.0)

    def test_long_overdue_low_priority_outranks_idle_priority_three(self, sample_task_base, now):
        overdue = make(sample_task_base, priority=1, due_date=now - timedelta(hours=48))
        tomorrow = make(sample_task_base, priority=3, due_date=now + timedelta(days=1))
        assert sort_score(overdue, now) > sort_score(tomorrow, now)
