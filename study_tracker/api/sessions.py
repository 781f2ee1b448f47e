"""Study sessions API endpoints."""

from datetime import date, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from study_tracker.schemas.study_session import (
    HistoryDayResponse,
    StudySessionCreate,
    StudySessionResponse,
    StudySessionUpdate,
)
from study_tracker.services.aggregation import group_by_date
from study_tracker.services.study_session_service import StudySessionService
from study_tracker.utils.dates import today
from study_tracker.utils.dependencies import dependencies
from study_tracker.utils.formatting import format_date_full, format_duration

router = APIRouter(
    prefix="/sessions",
    tags=["Study Sessions"],
)

# Default history window: the last week up to today
HISTORY_DAYS = 7


@router.get("")
async def list_sessions(
    profile_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    service: StudySessionService = Depends(dependencies.session),
) -> list[StudySessionResponse]:
    """List sessions of a profile within an optional inclusive date range."""
    sessions = await service.list_for_profile(profile_id, start_date, end_date)
    return [StudySessionResponse.model_validate(s) for s in sessions]


@router.get("/history")
async def session_history(
    profile_id: int,
    start_date: Optional[date] = Query(
        default=None, description="Defaults to a week before end_date"
    ),
    end_date: Optional[date] = Query(default=None, description="Defaults to today"),
    service: StudySessionService = Depends(dependencies.session),
) -> list[HistoryDayResponse]:
    """Sessions grouped by date, newest date first."""
    end = end_date or today()
    start = start_date or end - timedelta(days=HISTORY_DAYS)
    sessions = await service.list_for_profile(profile_id, start, end)
    return [
        HistoryDayResponse(
            study_date=day,
            label=format_date_full(day),
            total_minutes=stats.total_minutes,
            total_label=format_duration(stats.total_minutes),
            sessions=[StudySessionResponse.model_validate(s) for s in stats.sessions],
        )
        for day, stats in group_by_date(sessions).items()
    ]


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_session(
    data: StudySessionCreate,
    service: StudySessionService = Depends(dependencies.session),
) -> StudySessionResponse:
    """Record a study session.

    Raises:
        RelatedRecordNotFoundError: If profile or subject does not exist.
    """
    session = await service.create_session(**data.model_dump())
    return StudySessionResponse.model_validate(session)


@router.get("/{session_id}")
async def get_session(
    session_id: int,
    service: StudySessionService = Depends(dependencies.session),
) -> StudySessionResponse:
    """Get one session with its subject.

    Raises:
        RecordNotFoundError: If the session does not exist.
    """
    session = await service.get_with_subject_or_fail(session_id)
    return StudySessionResponse.model_validate(session)


@router.patch("/{session_id}")
async def update_session(
    session_id: int,
    data: StudySessionUpdate,
    service: StudySessionService = Depends(dependencies.session),
) -> StudySessionResponse:
    """Edit session fields that were sent."""
    session = await service.update_session(
        session_id, **data.model_dump(exclude_unset=True)
    )
    return StudySessionResponse.model_validate(session)


@router.delete("/{session_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: int,
    service: StudySessionService = Depends(dependencies.session),
) -> None:
    """Delete a session."""
    await service.delete(session_id)
