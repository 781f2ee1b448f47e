"""Subject schemas for API response models."""

from pydantic import BaseModel

from study_tracker.models.subject import SubjectCategory


class SubjectResponse(BaseModel):
    """Response schema for subject."""

    id: int
    name: str
    category: SubjectCategory
    color: str
    sort_order: int

    model_config = {"from_attributes": True}
