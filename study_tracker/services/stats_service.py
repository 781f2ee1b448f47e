"""Statistics service combining session/goal queries with aggregation."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.models.study_session import StudySession
from study_tracker.services.aggregation import (
    DailyStats,
    WeeklyStats,
    monthly_stats,
    sum_minutes,
    weekly_stats,
)
from study_tracker.services.study_session_service import StudySessionService
from study_tracker.services.weekly_goal_service import WeeklyGoalService
from study_tracker.utils.dates import iso_week, month_bounds, week_bounds

logger = logging.getLogger(__name__)


@dataclass
class WeeklyReport:
    """Weekly stats plus the week they cover."""

    week_start: date
    week_end: date
    year: int
    week_number: int
    stats: WeeklyStats


@dataclass
class MonthlyReport:
    """Per-day stats for one calendar month."""

    year: int
    month: int
    start_date: date
    end_date: date
    daily: Dict[date, DailyStats]

    @property
    def total_minutes(self) -> int:
        return sum(day.total_minutes for day in self.daily.values())


@dataclass
class DailyReport:
    """Sessions and total for a single day."""

    day: date
    sessions: List[StudySession]
    total_minutes: int


class StatsService:
    """Fetches the rows a stats view needs and aggregates them.

    Not a BaseService subclass: it owns no table and delegates all
    queries to the session and goal services.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.sessions = StudySessionService(db)
        self.goals = WeeklyGoalService(db)

    async def weekly(self, profile_id: int, ref_date: date) -> WeeklyReport:
        """Stats for the ISO week (Monday to Sunday) containing ``ref_date``."""
        start, end = week_bounds(ref_date)
        year, week_number = iso_week(ref_date)

        sessions = await self.sessions.list_for_profile(profile_id, start, end)
        goals = await self.goals.list_for_week(profile_id, year, week_number)

        logger.debug(
            "Weekly stats loaded",
            extra={
                "profile_id": profile_id,
                "week": f"{year}-W{week_number:02d}",
                "sessions": len(sessions),
                "goals": len(goals),
            },
        )
        return WeeklyReport(
            week_start=start,
            week_end=end,
            year=year,
            week_number=week_number,
            stats=weekly_stats(sessions, goals),
        )

    async def monthly(self, profile_id: int, year: int, month: int) -> MonthlyReport:
        """Per-day stats for a calendar month, first to last day inclusive."""
        start, end = month_bounds(year, month)
        sessions = await self.sessions.list_for_profile(profile_id, start, end)
        return MonthlyReport(
            year=year,
            month=month,
            start_date=start,
            end_date=end,
            daily=monthly_stats(sessions, year, month),
        )

    async def daily(self, profile_id: int, day: date) -> DailyReport:
        """Sessions and total minutes for one day (the "today" card)."""
        sessions = await self.sessions.list_for_date(profile_id, day)
        return DailyReport(
            day=day, sessions=sessions, total_minutes=sum_minutes(sessions)
        )
