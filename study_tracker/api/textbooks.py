"""Textbook autocomplete endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from study_tracker.schemas.textbook import TextbookResponse
from study_tracker.services.textbook_service import TextbookService
from study_tracker.utils.dependencies import dependencies

router = APIRouter(
    prefix="/textbooks",
    tags=["Textbooks"],
)


@router.get("")
async def list_textbooks(
    subject_id: Optional[int] = Query(default=None, description="Filter by subject"),
    limit: int = Query(default=TextbookService.DEFAULT_LIMIT, ge=1, le=200),
    service: TextbookService = Depends(dependencies.textbook),
) -> list[TextbookResponse]:
    """Textbook names previously used, newest first."""
    textbooks = await service.list_suggestions(subject_id=subject_id, limit=limit)
    return [TextbookResponse.model_validate(t) for t in textbooks]
