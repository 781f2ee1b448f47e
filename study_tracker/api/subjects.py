"""Subjects API endpoints."""

from fastapi import APIRouter, Depends

from study_tracker.schemas.subject import SubjectResponse
from study_tracker.services.subject_service import SubjectService
from study_tracker.utils.dependencies import dependencies

router = APIRouter(
    prefix="/subjects",
    tags=["Subjects"],
)


@router.get("")
async def list_subjects(
    service: SubjectService = Depends(dependencies.subject),
) -> list[SubjectResponse]:
    """List subjects in display order."""
    subjects = await service.list_ordered()
    return [SubjectResponse.model_validate(s) for s in subjects]
