"""Weekly goal service: per-subject targets for an ISO week."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from study_tracker.models.profile import Profile
from study_tracker.models.subject import Subject
from study_tracker.models.weekly_goal import WeeklyGoal
from study_tracker.services.base import BaseService

logger = logging.getLogger(__name__)


class WeeklyGoalService(BaseService[WeeklyGoal]):
    """Service for WeeklyGoal entities.

    Goals are keyed by (profile, subject, year, week_number) and written
    with upsert_goal() rather than create()/update().
    """

    model = WeeklyGoal

    def _with_subject(self):
        return (
            select(WeeklyGoal)
            .options(selectinload(WeeklyGoal.subject))
            .execution_options(populate_existing=True)
        )

    async def list_for_week(
        self, profile_id: int, year: int, week_number: int
    ) -> List[WeeklyGoal]:
        """Return the goals of one profile for one ISO week, subjects loaded."""
        stmt = (
            self._with_subject()
            .where(
                WeeklyGoal.profile_id == profile_id,
                WeeklyGoal.year == year,
                WeeklyGoal.week_number == week_number,
            )
            .order_by(WeeklyGoal.id)
        )
        with self._reading("list", profile_id=profile_id, week=week_number):
            return list(await self.db.scalars(stmt))

    async def upsert_goal(
        self,
        profile_id: int,
        subject_id: int,
        year: int,
        week_number: int,
        target_minutes: int,
    ) -> WeeklyGoal:
        """Create the goal or replace the target of the existing one.

        Raises:
            RelatedRecordNotFoundError: If profile or subject does not exist.
            DatabaseConnectionError: If database operation fails.
        """
        await self.ensure_exists(Profile, "profile_id", profile_id)
        await self.ensure_exists(Subject, "subject_id", subject_id)

        existing = await self.find(
            profile_id=profile_id,
            subject_id=subject_id,
            year=year,
            week_number=week_number,
        )
        if existing:
            goal = await self.update(existing[0].id, target_minutes=target_minutes)
        else:
            goal = await self.create(
                profile_id=profile_id,
                subject_id=subject_id,
                year=year,
                week_number=week_number,
                target_minutes=target_minutes,
            )
        logger.info(
            "Weekly goal saved",
            extra={
                "goal_id": goal.id,
                "profile_id": profile_id,
                "subject_id": subject_id,
                "week": f"{year}-W{week_number:02d}",
                "target_minutes": target_minutes,
            },
        )
        with self._reading("get", id=goal.id):
            return await self.db.scalar(
                self._with_subject().where(WeeklyGoal.id == goal.id)
            )
