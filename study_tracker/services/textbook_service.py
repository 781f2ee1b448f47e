"""Textbook suggestion service backing the textbook autocomplete."""

import logging
from typing import List, Optional

from sqlalchemy import select

from study_tracker.models.textbook import TextbookSuggestion
from study_tracker.services.base import BaseService

logger = logging.getLogger(__name__)


class TextbookService(BaseService[TextbookSuggestion]):
    """Service for TextbookSuggestion entities."""

    model = TextbookSuggestion

    DEFAULT_LIMIT = 50

    async def list_suggestions(
        self, subject_id: Optional[int] = None, limit: int = DEFAULT_LIMIT
    ) -> List[TextbookSuggestion]:
        """Return suggestions, newest first, optionally for one subject."""
        stmt = (
            select(TextbookSuggestion)
            .order_by(
                TextbookSuggestion.created_at.desc(), TextbookSuggestion.id.desc()
            )
            .limit(limit)
        )
        if subject_id is not None:
            stmt = stmt.where(TextbookSuggestion.subject_id == subject_id)
        with self._reading("list", subject_id=subject_id):
            return list(await self.db.scalars(stmt))

    async def remember(
        self, subject_id: int, name: str
    ) -> Optional[TextbookSuggestion]:
        """Store ``name`` for ``subject_id`` unless it is already known.

        Returns:
            The new suggestion, or None when it already existed or the
            name is blank.
        """
        name = name.strip()
        if not name:
            return None
        existing = await self.find(subject_id=subject_id, name=name)
        if existing:
            return None
        suggestion = await self.create(subject_id=subject_id, name=name)
        logger.info(
            "Stored textbook suggestion",
            extra={"subject_id": subject_id, "textbook": name},
        )
        return suggestion
