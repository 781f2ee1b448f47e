"""Statistics schemas: weekly breakdown, monthly calendar and today card."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from study_tracker.schemas.study_session import StudySessionResponse
from study_tracker.schemas.subject import SubjectResponse
from study_tracker.schemas.weekly_goal import GoalProgressResponse, WeeklyGoalResponse
from study_tracker.services.aggregation import (
    DailyStats,
    SubjectBreakdown,
    calendar_intensity,
    goal_progress,
    share_percentage,
)
from study_tracker.services.stats_service import (
    DailyReport,
    MonthlyReport,
    WeeklyReport,
)
from study_tracker.utils.dates import calendar_days
from study_tracker.utils.formatting import (
    WEEKDAY_SHORT_NAMES,
    format_date,
    format_duration,
    format_week_range,
)


class SubjectBreakdownResponse(BaseModel):
    """Minutes for one subject in a week.

    ``subject`` is None when the session's subject could not be resolved;
    its minutes are still counted.
    """

    subject_id: int
    subject: Optional[SubjectResponse] = None
    minutes: int
    minutes_label: str
    record_count: int
    percentage: int

    @classmethod
    def from_breakdown(
        cls, entry: SubjectBreakdown, total_minutes: int
    ) -> "SubjectBreakdownResponse":
        return cls(
            subject_id=entry.subject_id,
            subject=(
                SubjectResponse.model_validate(entry.subject)
                if entry.subject is not None
                else None
            ),
            minutes=entry.minutes,
            minutes_label=format_duration(entry.minutes),
            record_count=len(entry.sessions),
            percentage=share_percentage(entry.minutes, total_minutes),
        )


class WeeklyStatsResponse(BaseModel):
    """Weekly totals, per-subject breakdown and goal progress."""

    week_start: date
    week_end: date
    year: int
    week_number: int
    range_label: str
    total_minutes: int
    total_label: str
    record_count: int
    breakdown: List[SubjectBreakdownResponse]
    goals: List[GoalProgressResponse]

    @classmethod
    def from_report(cls, report: WeeklyReport) -> "WeeklyStatsResponse":
        stats = report.stats
        return cls(
            week_start=report.week_start,
            week_end=report.week_end,
            year=report.year,
            week_number=report.week_number,
            range_label=format_week_range(report.week_start, report.week_end),
            total_minutes=stats.total_minutes,
            total_label=format_duration(stats.total_minutes),
            record_count=stats.record_count,
            breakdown=[
                SubjectBreakdownResponse.from_breakdown(entry, stats.total_minutes)
                for entry in stats.breakdown
            ],
            goals=[
                GoalProgressResponse(
                    goal=WeeklyGoalResponse.model_validate(progress.goal),
                    current_minutes=progress.current_minutes,
                    current_label=format_duration(progress.current_minutes),
                    target_label=format_duration(progress.target_minutes),
                    percentage=progress.percentage,
                )
                for progress in goal_progress(stats)
            ],
        )


class DayStatsResponse(BaseModel):
    """Sessions and total for one date of a month."""

    study_date: date
    label: str
    total_minutes: int
    total_label: str
    intensity: int
    sessions: List[StudySessionResponse]

    @classmethod
    def from_daily(cls, day: date, stats: DailyStats) -> "DayStatsResponse":
        return cls(
            study_date=day,
            label=format_date(day),
            total_minutes=stats.total_minutes,
            total_label=format_duration(stats.total_minutes),
            intensity=calendar_intensity(stats.total_minutes),
            sessions=[StudySessionResponse.model_validate(s) for s in stats.sessions],
        )


class CalendarCell(BaseModel):
    """One cell of the Monday-start month grid."""

    day: date
    in_month: bool
    total_minutes: int
    intensity: int


class MonthlyStatsResponse(BaseModel):
    """Per-day stats for a month plus the calendar grid.

    ``days`` only lists dates that have sessions; every grid cell without
    an entry there has zero minutes.
    """

    year: int
    month: int
    start_date: date
    end_date: date
    total_minutes: int
    total_label: str
    days: List[DayStatsResponse]
    weekday_labels: List[str]
    calendar: List[CalendarCell]

    @classmethod
    def from_report(cls, report: MonthlyReport) -> "MonthlyStatsResponse":
        calendar = []
        for day in calendar_days(report.year, report.month):
            stats = report.daily.get(day)
            minutes = stats.total_minutes if stats is not None else 0
            calendar.append(
                CalendarCell(
                    day=day,
                    in_month=day.month == report.month,
                    total_minutes=minutes,
                    intensity=calendar_intensity(minutes),
                )
            )
        return cls(
            year=report.year,
            month=report.month,
            start_date=report.start_date,
            end_date=report.end_date,
            total_minutes=report.total_minutes,
            total_label=format_duration(report.total_minutes),
            days=[
                DayStatsResponse.from_daily(day, stats)
                for day, stats in report.daily.items()
            ],
            weekday_labels=list(WEEKDAY_SHORT_NAMES),
            calendar=calendar,
        )


class DailyStatsResponse(BaseModel):
    """The "today" card: sessions of a single day and their total."""

    study_date: date
    total_minutes: int
    total_label: str
    sessions: List[StudySessionResponse]

    @classmethod
    def from_report(cls, report: DailyReport) -> "DailyStatsResponse":
        return cls(
            study_date=report.day,
            total_minutes=report.total_minutes,
            total_label=format_duration(report.total_minutes),
            sessions=[StudySessionResponse.model_validate(s) for s in report.sessions],
        )
