"""Unit tests for the pure aggregation functions."""

from datetime import date
from types import SimpleNamespace

import pytest

from study_tracker.services.aggregation import (
    SubjectBreakdown,
    WeeklyStats,
    calendar_intensity,
    goal_progress,
    group_by_date,
    monthly_stats,
    progress_percentage,
    share_percentage,
    sum_minutes,
    weekly_stats,
)

MATH = SimpleNamespace(id=1, name="수학", color="#ef4444")
ENGLISH = SimpleNamespace(id=2, name="영어", color="#3b82f6")
SCIENCE = SimpleNamespace(id=3, name="과학", color="#a855f7")


def _session(subject, day: str, minutes: int, session_id: int = 0, joined=True):
    """Build a session-like row; ``joined=False`` simulates a missing join."""
    return SimpleNamespace(
        id=session_id,
        subject_id=subject.id,
        subject=subject if joined else None,
        study_date=date.fromisoformat(day),
        duration_minutes=minutes,
    )


def _goal(subject, target: int):
    return SimpleNamespace(subject_id=subject.id, target_minutes=target)


class TestWeeklyStats:
    """Tests for weekly_stats grouping and ordering."""

    def test_end_to_end_week_with_tie(self):
        """Tied subjects keep first-seen order; totals add up."""
        sessions = [
            _session(MATH, "2024-01-01", 30, 1),
            _session(MATH, "2024-01-01", 20, 2),
            _session(ENGLISH, "2024-01-02", 50, 3),
        ]

        stats = weekly_stats(sessions, [])

        assert stats.total_minutes == 100
        assert stats.record_count == 3
        assert [(b.subject_id, b.minutes) for b in stats.breakdown] == [
            (MATH.id, 50),
            (ENGLISH.id, 50),
        ]

    def test_breakdown_sorted_descending(self):
        sessions = [
            _session(SCIENCE, "2024-01-03", 10),
            _session(MATH, "2024-01-03", 40),
            _session(ENGLISH, "2024-01-04", 25),
            _session(SCIENCE, "2024-01-05", 5),
        ]

        stats = weekly_stats(sessions)

        minutes = [b.minutes for b in stats.breakdown]
        assert minutes == [40, 25, 15]
        assert minutes == sorted(minutes, reverse=True)

    def test_tie_order_follows_first_seen_subject(self):
        """English is seen first, so it stays ahead of the tied math entry."""
        sessions = [
            _session(ENGLISH, "2024-01-01", 10),
            _session(MATH, "2024-01-01", 30),
            _session(ENGLISH, "2024-01-02", 20),
        ]

        stats = weekly_stats(sessions)

        assert [b.subject_id for b in stats.breakdown] == [ENGLISH.id, MATH.id]

    def test_group_keeps_member_sessions_in_input_order(self):
        first = _session(MATH, "2024-01-02", 10, 1)
        second = _session(MATH, "2024-01-01", 15, 2)

        stats = weekly_stats([first, second])

        assert stats.breakdown[0].sessions == [first, second]

    def test_breakdown_sum_equals_total(self):
        sessions = [
            _session(MATH, "2024-01-01", 30),
            _session(ENGLISH, "2024-01-02", 45),
            _session(SCIENCE, "2024-01-03", 60),
            _session(MATH, "2024-01-07", 5),
        ]

        stats = weekly_stats(sessions)

        assert sum(b.minutes for b in stats.breakdown) == stats.total_minutes
        assert len({b.subject_id for b in stats.breakdown}) == len(stats.breakdown)

    def test_empty_week(self):
        stats = weekly_stats([], [])

        assert stats.total_minutes == 0
        assert stats.record_count == 0
        assert stats.breakdown == []

    def test_missing_subject_join_still_counts(self):
        """A session whose subject could not be resolved keeps its minutes."""
        sessions = [
            _session(MATH, "2024-01-01", 30),
            _session(SCIENCE, "2024-01-02", 20, joined=False),
        ]

        stats = weekly_stats(sessions)

        assert stats.total_minutes == 50
        orphan = next(b for b in stats.breakdown if b.subject_id == SCIENCE.id)
        assert orphan.subject is None
        assert orphan.minutes == 20

    def test_goals_passed_through(self):
        goals = [_goal(MATH, 120)]

        stats = weekly_stats([_session(MATH, "2024-01-01", 30)], goals)

        assert stats.goals == goals

    def test_idempotent(self):
        sessions = [
            _session(MATH, "2024-01-01", 30),
            _session(ENGLISH, "2024-01-02", 45),
        ]

        assert weekly_stats(sessions) == weekly_stats(sessions)

    def test_minutes_for_absent_subject_is_zero(self):
        stats = weekly_stats([_session(MATH, "2024-01-01", 30)])

        assert stats.minutes_for(MATH.id) == 30
        assert stats.minutes_for(ENGLISH.id) == 0


class TestMonthlyStats:
    """Tests for monthly_stats grouping by date."""

    def test_groups_by_date(self):
        sessions = [
            _session(MATH, "2024-02-03", 30),
            _session(ENGLISH, "2024-02-03", 15),
            _session(MATH, "2024-02-10", 60),
        ]

        daily = monthly_stats(sessions, 2024, 2)

        assert list(daily) == [date(2024, 2, 3), date(2024, 2, 10)]
        assert daily[date(2024, 2, 3)].total_minutes == 45
        assert len(daily[date(2024, 2, 3)].sessions) == 2
        assert daily[date(2024, 2, 10)].total_minutes == 60

    def test_days_without_sessions_are_absent(self):
        daily = monthly_stats([_session(MATH, "2024-02-03", 30)], 2024, 2)

        assert date(2024, 2, 4) not in daily

    def test_never_returns_dates_outside_month(self):
        sessions = [
            _session(MATH, "2024-01-31", 30),
            _session(MATH, "2024-02-01", 10),
            _session(MATH, "2024-02-29", 20),
            _session(MATH, "2024-03-01", 40),
        ]

        daily = monthly_stats(sessions, 2024, 2)

        assert list(daily) == [date(2024, 2, 1), date(2024, 2, 29)]

    def test_without_month_keeps_every_date(self):
        sessions = [
            _session(MATH, "2024-03-01", 40),
            _session(MATH, "2024-01-31", 30),
        ]

        daily = monthly_stats(sessions)

        assert list(daily) == [date(2024, 1, 31), date(2024, 3, 1)]

    def test_idempotent(self):
        sessions = [_session(MATH, "2024-02-03", 30)]

        assert monthly_stats(sessions, 2024, 2) == monthly_stats(sessions, 2024, 2)


def test_group_by_date_newest_first():
    sessions = [
        _session(MATH, "2024-01-01", 10),
        _session(MATH, "2024-01-03", 20),
        _session(ENGLISH, "2024-01-02", 30),
    ]

    grouped = group_by_date(sessions)

    assert list(grouped) == [date(2024, 1, 3), date(2024, 1, 2), date(2024, 1, 1)]


def test_sum_minutes():
    assert sum_minutes([]) == 0
    assert sum_minutes([_session(MATH, "2024-01-01", 25)] * 3) == 75


@pytest.mark.parametrize(
    "current,target,expected",
    [
        (0, 0, 0),
        (30, 0, 0),
        (30, -10, 0),
        (30, 60, 50),
        (90, 60, 100),
        (60, 60, 100),
        (0, 60, 0),
        (1, 8, 13),
        (1, 3, 33),
        (2, 3, 67),
    ],
)
def test_progress_percentage(current, target, expected):
    assert progress_percentage(current, target) == expected


@pytest.mark.parametrize(
    "minutes,total,expected",
    [(0, 0, 0), (50, 100, 50), (1, 3, 33), (100, 100, 100), (10, 0, 0)],
)
def test_share_percentage(minutes, total, expected):
    assert share_percentage(minutes, total) == expected


@pytest.mark.parametrize(
    "minutes,level",
    [(0, 0), (1, 1), (29, 1), (30, 2), (59, 2), (60, 3), (119, 3), (120, 4), (600, 4)],
)
def test_calendar_intensity(minutes, level):
    assert calendar_intensity(minutes) == level


def test_goal_progress_joins_minutes_and_clamps():
    stats = WeeklyStats(
        total_minutes=150,
        record_count=3,
        breakdown=[
            SubjectBreakdown(subject_id=MATH.id, subject=MATH, minutes=120),
            SubjectBreakdown(subject_id=ENGLISH.id, subject=ENGLISH, minutes=30),
        ],
        goals=[_goal(MATH, 60), _goal(ENGLISH, 60), _goal(SCIENCE, 0)],
    )

    progress = goal_progress(stats)

    assert [(p.current_minutes, p.percentage) for p in progress] == [
        (120, 100),
        (30, 50),
        (0, 0),
    ]


def test_goal_progress_lists_every_subject_when_given():
    """Subjects without a stored goal get a zero target and keep their minutes."""
    stats = WeeklyStats(
        total_minutes=70,
        record_count=2,
        breakdown=[
            SubjectBreakdown(subject_id=MATH.id, subject=MATH, minutes=40),
            SubjectBreakdown(subject_id=SCIENCE.id, subject=SCIENCE, minutes=30),
        ],
        goals=[_goal(MATH, 80)],
    )

    progress = goal_progress(stats, subjects=[ENGLISH, MATH, SCIENCE])

    assert [
        (p.subject_id, p.target_minutes, p.current_minutes, p.percentage)
        for p in progress
    ] == [
        (ENGLISH.id, 0, 0, 0),
        (MATH.id, 80, 40, 50),
        (SCIENCE.id, 0, 30, 0),
    ]
    assert progress[0].goal is None
    assert progress[1].goal is stats.goals[0]
