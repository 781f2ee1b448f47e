"""Study session service: listing, recording and editing study sessions."""

import logging
from datetime import date
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from study_tracker.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    RecordNotFoundError,
)
from study_tracker.models.profile import Profile
from study_tracker.models.study_session import StudySession
from study_tracker.models.subject import Subject
from study_tracker.services.base import BaseService
from study_tracker.services.textbook_service import TextbookService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("subject_id", "study_date", "duration_minutes")
OPTIONAL_TEXT_FIELDS = ("textbook", "study_range", "memo")


class StudySessionService(BaseService[StudySession]):
    """Service for managing StudySession entities.

    Sessions returned by the list/get helpers have ``subject`` loaded.
    Writes check that the referenced profile and subject exist and raise
    RelatedRecordNotFoundError otherwise.

    Usage:
        service = StudySessionService(db_session)

        session = await service.create_session(
            profile_id=1,
            subject_id=3,
            study_date=date(2024, 1, 1),
            duration_minutes=30,
            textbook="쎈 수학",
        )
        week = await service.list_for_profile(
            1, start_date=date(2024, 1, 1), end_date=date(2024, 1, 7)
        )
    """

    model = StudySession

    def _with_subject(self):
        return (
            select(StudySession)
            .options(selectinload(StudySession.subject))
            .execution_options(populate_existing=True)
        )

    async def get_with_subject(self, session_id: int) -> Optional[StudySession]:
        """Get a session by ID with its subject loaded."""
        stmt = self._with_subject().where(StudySession.id == session_id)
        with self._reading("get", id=session_id):
            return await self.db.scalar(stmt)

    async def get_with_subject_or_fail(self, session_id: int) -> StudySession:
        session = await self.get_with_subject(session_id)
        if session is None:
            raise RecordNotFoundError(self.model_name, session_id)
        return session

    async def list_for_profile(
        self,
        profile_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[StudySession]:
        """List sessions of a profile within an inclusive date range.

        Either bound may be omitted. Results are ordered newest date first,
        then most recently created first.
        """
        stmt = (
            self._with_subject()
            .where(StudySession.profile_id == profile_id)
            .order_by(
                StudySession.study_date.desc(),
                StudySession.created_at.desc(),
                StudySession.id.desc(),
            )
        )
        if start_date is not None:
            stmt = stmt.where(StudySession.study_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(StudySession.study_date <= end_date)
        with self._reading(
            "list",
            profile_id=profile_id,
            start_date=str(start_date),
            end_date=str(end_date),
        ):
            return list(await self.db.scalars(stmt))

    async def list_for_date(self, profile_id: int, day: date) -> List[StudySession]:
        """List sessions of a profile on a single date."""
        return await self.list_for_profile(profile_id, start_date=day, end_date=day)

    async def create_session(
        self,
        profile_id: int,
        subject_id: int,
        study_date: date,
        duration_minutes: int,
        textbook: Optional[str] = None,
        study_range: Optional[str] = None,
        memo: Optional[str] = None,
    ) -> StudySession:
        """Record a study session.

        A non-empty textbook name is also stored as an autocomplete
        suggestion for the subject. Failing to store the suggestion is
        logged and does not undo the session.

        Raises:
            RelatedRecordNotFoundError: If profile or subject does not exist.
            DatabaseConnectionError: If database operation fails.
        """
        await self.ensure_exists(Profile, "profile_id", profile_id)
        await self.ensure_exists(Subject, "subject_id", subject_id)

        created = await self.create(
            profile_id=profile_id,
            subject_id=subject_id,
            study_date=study_date,
            duration_minutes=duration_minutes,
            textbook=textbook or None,
            study_range=study_range or None,
            memo=memo or None,
        )
        logger.info(
            "Study session recorded",
            extra={
                "session_id": created.id,
                "profile_id": profile_id,
                "subject_id": subject_id,
                "minutes": duration_minutes,
            },
        )

        if textbook:
            try:
                await TextbookService(self.db).remember(subject_id, textbook)
            except (DatabaseConnectionError, DuplicateRecordError) as e:
                logger.warning(
                    "Could not store textbook suggestion",
                    extra={"subject_id": subject_id, "error": str(e)},
                )

        return await self.get_with_subject_or_fail(created.id)

    async def update_session(self, session_id: int, **fields: Any) -> StudySession:
        """Edit a session. Identity and owning profile never change.

        ``None`` for a required column (subject, date, duration) leaves it
        as it is. A blank textbook, range or memo is stored as NULL.

        Raises:
            RecordNotFoundError: If the session does not exist.
            RelatedRecordNotFoundError: If a new subject_id does not exist.
            DatabaseConnectionError: If database operation fails.
        """
        fields.pop("id", None)
        fields.pop("profile_id", None)
        for name in REQUIRED_FIELDS:
            if name in fields and fields[name] is None:
                del fields[name]
        for name in OPTIONAL_TEXT_FIELDS:
            if name in fields:
                fields[name] = fields[name] or None
        subject_id = fields.get("subject_id")
        if subject_id is not None:
            await self.ensure_exists(Subject, "subject_id", subject_id)

        await self.update(session_id, **fields)
        return await self.get_with_subject_or_fail(session_id)
