"""Weekly goals API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from study_tracker.schemas.weekly_goal import WeeklyGoalResponse, WeeklyGoalUpsert
from study_tracker.services.weekly_goal_service import WeeklyGoalService
from study_tracker.utils.dates import iso_week, today
from study_tracker.utils.dependencies import dependencies

router = APIRouter(
    prefix="/goals",
    tags=["Weekly Goals"],
)


@router.get("")
async def list_goals(
    profile_id: int,
    year: Optional[int] = Query(default=None, description="ISO year"),
    week_number: Optional[int] = Query(default=None, ge=1, le=53),
    service: WeeklyGoalService = Depends(dependencies.goal),
) -> list[WeeklyGoalResponse]:
    """Goals of a profile for an ISO week, the current week by default."""
    if year is None or week_number is None:
        current_year, current_week = iso_week(today())
        year = year if year is not None else current_year
        week_number = week_number if week_number is not None else current_week
    goals = await service.list_for_week(profile_id, year, week_number)
    return [WeeklyGoalResponse.model_validate(g) for g in goals]


@router.put("")
async def upsert_goal(
    data: WeeklyGoalUpsert,
    service: WeeklyGoalService = Depends(dependencies.goal),
) -> WeeklyGoalResponse:
    """Create the goal or replace its target.

    Raises:
        RelatedRecordNotFoundError: If profile or subject does not exist.
    """
    goal = await service.upsert_goal(**data.model_dump())
    return WeeklyGoalResponse.model_validate(goal)
