"""Statistics API endpoints."""

from contextlib import contextmanager
from datetime import date
from typing import Iterator, Optional

from fastapi import APIRouter, Depends, Query

from study_tracker.exceptions import InvalidFilterError
from study_tracker.schemas.stats import (
    DailyStatsResponse,
    MonthlyStatsResponse,
    WeeklyStatsResponse,
)
from study_tracker.services.stats_service import StatsService
from study_tracker.utils.dates import today, week_start
from study_tracker.utils.dependencies import dependencies

router = APIRouter(
    prefix="/stats",
    tags=["Stats"],
)


@contextmanager
def _calendar_range() -> Iterator[None]:
    """Report dates the calendar cannot represent as a bad filter."""
    try:
        yield
    except (ValueError, OverflowError) as e:
        raise InvalidFilterError(f"Date out of range: {e}") from e


@router.get("/weekly")
async def weekly_stats(
    profile_id: int,
    ref_date: Optional[date] = Query(
        default=None, description="Any date in the week, defaults to today"
    ),
    year: Optional[int] = Query(default=None, description="ISO year"),
    week_number: Optional[int] = Query(default=None, ge=1, le=53),
    service: StatsService = Depends(dependencies.stats),
) -> WeeklyStatsResponse:
    """Totals, subject breakdown and goal progress for one ISO week.

    The week is picked by ``year`` and ``week_number`` when both are given,
    otherwise by ``ref_date``.
    """
    with _calendar_range():
        if year is not None and week_number is not None:
            ref_date = week_start(year, week_number)
        report = await service.weekly(profile_id, ref_date or today())
    return WeeklyStatsResponse.from_report(report)


@router.get("/monthly")
async def monthly_stats(
    profile_id: int,
    year: Optional[int] = Query(default=None, ge=2000, le=9999),
    month: Optional[int] = Query(default=None, ge=1, le=12),
    service: StatsService = Depends(dependencies.stats),
) -> MonthlyStatsResponse:
    """Per-day totals and calendar grid for a month, this month by default."""
    current = today()
    with _calendar_range():
        report = await service.monthly(
            profile_id,
            year if year is not None else current.year,
            month if month is not None else current.month,
        )
    return MonthlyStatsResponse.from_report(report)


@router.get("/today")
async def daily_stats(
    profile_id: int,
    day: Optional[date] = Query(default=None, description="Defaults to today"),
    service: StatsService = Depends(dependencies.stats),
) -> DailyStatsResponse:
    """Sessions and total minutes for a single day."""
    report = await service.daily(profile_id, day or today())
    return DailyStatsResponse.from_report(report)
