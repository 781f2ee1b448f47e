"""Study session schemas for API request/response models."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from study_tracker.schemas.subject import SubjectResponse
from study_tracker.utils.formatting import format_duration


class StudySessionCreate(BaseModel):
    """Schema for recording a study session.

    Attributes:
        profile_id: Profile the session belongs to.
        subject_id: Studied subject.
        study_date: Date of study.
        duration_minutes: Minutes studied, must be positive.
        textbook: Optional textbook name, also remembered for autocomplete.
        study_range: Optional pages or chapters.
        memo: Optional note.
    """

    profile_id: int
    subject_id: int
    study_date: date
    duration_minutes: int = Field(..., gt=0, le=24 * 60)
    textbook: Optional[str] = Field(default=None, max_length=255)
    study_range: Optional[str] = Field(default=None, max_length=255)
    memo: Optional[str] = Field(default=None, max_length=2000)


class StudySessionUpdate(BaseModel):
    """Schema for editing a study session. Unset fields stay unchanged."""

    subject_id: Optional[int] = None
    study_date: Optional[date] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0, le=24 * 60)
    textbook: Optional[str] = Field(default=None, max_length=255)
    study_range: Optional[str] = Field(default=None, max_length=255)
    memo: Optional[str] = Field(default=None, max_length=2000)


class StudySessionResponse(BaseModel):
    """Response schema for study session with its subject."""

    id: int
    profile_id: int
    subject_id: int
    study_date: date
    textbook: Optional[str] = None
    study_range: Optional[str] = None
    duration_minutes: int
    memo: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    subject: Optional[SubjectResponse] = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def duration_label(self) -> str:
        return format_duration(self.duration_minutes)


class HistoryDayResponse(BaseModel):
    """Sessions of one date in the history view."""

    study_date: date
    label: str
    total_minutes: int
    total_label: str
    sessions: List[StudySessionResponse]
