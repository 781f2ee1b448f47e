"""Subject service exposing the read-only subject taxonomy."""

from typing import List

from sqlalchemy import select

from study_tracker.models.subject import Subject
from study_tracker.services.base import BaseService


class SubjectService(BaseService[Subject]):
    """Service for reading Subject entities.

    Subjects are seeded by migration; the API never creates or deletes
    them, so only the read side of BaseService is used.
    """

    model = Subject

    async def list_ordered(self) -> List[Subject]:
        """Return all subjects ordered by ``sort_order``, then id."""
        with self._reading("list"):
            result = await self.db.scalars(
                select(Subject).order_by(Subject.sort_order, Subject.id)
            )
            return list(result)
