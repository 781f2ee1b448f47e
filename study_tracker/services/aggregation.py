"""Pure aggregation over study session rows.

Every function here takes already-fetched rows and returns new summary
objects. Nothing here touches the database or keeps state between calls,
so calling a function twice on the same input gives equal results.

Sessions are expected to expose ``subject_id``, ``study_date``,
``duration_minutes`` and an optional ``subject`` reference. A missing
subject join is tolerated: the session still counts towards totals and its
breakdown entry carries ``subject=None``.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

from study_tracker.utils.formatting import format_duration

if TYPE_CHECKING:
    from study_tracker.models.study_session import StudySession
    from study_tracker.models.subject import Subject
    from study_tracker.models.weekly_goal import WeeklyGoal

__all__ = [
    "SubjectBreakdown",
    "GoalProgress",
    "WeeklyStats",
    "DailyStats",
    "weekly_stats",
    "monthly_stats",
    "group_by_date",
    "goal_progress",
    "sum_minutes",
    "progress_percentage",
    "share_percentage",
    "calendar_intensity",
    "format_duration",
]

# Upper bounds (exclusive) for calendar heat levels 1..3; level 4 is the rest
INTENSITY_THRESHOLDS = (30, 60, 120)


@dataclass
class SubjectBreakdown:
    """Total minutes for one subject within a time window."""

    subject_id: int
    subject: Optional["Subject"]
    minutes: int = 0
    sessions: List["StudySession"] = field(default_factory=list)


@dataclass
class GoalProgress:
    """Minutes studied towards one subject's weekly target.

    ``goal`` is None for a subject without a stored goal; its target is 0.
    """

    subject_id: int
    goal: Optional["WeeklyGoal"]
    target_minutes: int
    current_minutes: int
    percentage: int


@dataclass
class WeeklyStats:
    """Summary of one ISO week."""

    total_minutes: int
    record_count: int
    breakdown: List[SubjectBreakdown]
    goals: List["WeeklyGoal"] = field(default_factory=list)

    def minutes_for(self, subject_id: int) -> int:
        """Minutes studied for ``subject_id`` this week (0 if absent)."""
        for entry in self.breakdown:
            if entry.subject_id == subject_id:
                return entry.minutes
        return 0


@dataclass
class DailyStats:
    """Total minutes and member sessions for one calendar date."""

    total_minutes: int = 0
    sessions: List["StudySession"] = field(default_factory=list)


def sum_minutes(sessions: Iterable["StudySession"]) -> int:
    """Sum ``duration_minutes`` over sessions."""
    return sum(s.duration_minutes for s in sessions)


def weekly_stats(
    sessions: Sequence["StudySession"],
    goals: Sequence["WeeklyGoal"] = (),
) -> WeeklyStats:
    """Group a week's sessions by subject.

    Args:
        sessions: Sessions of one profile within one ISO week.
        goals: Goals of the same profile and week, passed through unchanged.

    Returns:
        WeeklyStats whose breakdown is sorted by minutes, descending.
        Subjects with equal minutes keep the order in which they first
        appear in ``sessions``.
    """
    groups: Dict[int, SubjectBreakdown] = {}
    for session in sessions:
        entry = groups.get(session.subject_id)
        if entry is None:
            entry = SubjectBreakdown(
                subject_id=session.subject_id,
                subject=getattr(session, "subject", None),
            )
            groups[session.subject_id] = entry
        elif entry.subject is None:
            entry.subject = getattr(session, "subject", None)
        entry.minutes += session.duration_minutes
        entry.sessions.append(session)

    # sorted() is stable, and dicts keep first-seen order
    breakdown = sorted(groups.values(), key=lambda e: e.minutes, reverse=True)

    return WeeklyStats(
        total_minutes=sum_minutes(sessions),
        record_count=len(sessions),
        breakdown=breakdown,
        goals=list(goals),
    )


def monthly_stats(
    sessions: Iterable["StudySession"],
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> Dict[date, DailyStats]:
    """Group a month's sessions by calendar date.

    Args:
        sessions: Sessions of one profile.
        year: When given together with ``month``, sessions outside that
            month are ignored.
        month: Calendar month (1-12).

    Returns:
        Mapping of date to DailyStats in ascending date order. Dates
        without sessions are absent.
    """
    daily: Dict[date, DailyStats] = {}
    for session in sessions:
        day = session.study_date
        if year is not None and month is not None:
            if day.year != year or day.month != month:
                continue
        stats = daily.setdefault(day, DailyStats())
        stats.total_minutes += session.duration_minutes
        stats.sessions.append(session)
    return {day: daily[day] for day in sorted(daily)}


def group_by_date(sessions: Iterable["StudySession"]) -> Dict[date, DailyStats]:
    """Group sessions by date with the newest date first (history view)."""
    daily = monthly_stats(sessions)
    return {day: daily[day] for day in sorted(daily, reverse=True)}


def progress_percentage(current: int, target: int) -> int:
    """Percentage of ``target`` reached, clamped to 0..100.

    A zero or negative target means "no goal" and yields 0. Halves round
    up, so 1 of 8 minutes (12.5%) shows as 13.
    """
    if target <= 0:
        return 0
    ratio = 100 * min(current, target) / target
    return max(0, min(100, math.floor(ratio + 0.5)))


def share_percentage(minutes: int, total: int) -> int:
    """Share of ``total`` taken by ``minutes``, 0 when total is empty."""
    if total <= 0:
        return 0
    return max(0, min(100, math.floor(100 * minutes / total + 0.5)))


def goal_progress(
    stats: WeeklyStats, subjects: Optional[Iterable["Subject"]] = None
) -> List[GoalProgress]:
    """Join goals of the week with minutes studied for their subjects.

    Without ``subjects`` one row is returned per stored goal. With
    ``subjects`` one row is returned per subject in the given order, using
    a target of 0 where no goal is stored.
    """
    goals = {goal.subject_id: goal for goal in stats.goals}
    if subjects is None:
        rows = [(goal.subject_id, goal) for goal in stats.goals]
    else:
        rows = [(subject.id, goals.get(subject.id)) for subject in subjects]

    result = []
    for subject_id, goal in rows:
        target = goal.target_minutes if goal is not None else 0
        current = stats.minutes_for(subject_id)
        result.append(
            GoalProgress(
                subject_id=subject_id,
                goal=goal,
                target_minutes=target,
                current_minutes=current,
                percentage=progress_percentage(current, target),
            )
        )
    return result


def calendar_intensity(minutes: int) -> int:
    """Heat level 0-4 for a calendar cell.

    0 means nothing studied; 1-3 cover under 30, 60 and 120 minutes;
    4 is two hours or more.
    """
    if minutes <= 0:
        return 0
    for level, upper in enumerate(INTENSITY_THRESHOLDS, start=1):
        if minutes < upper:
            return level
    return len(INTENSITY_THRESHOLDS) + 1
