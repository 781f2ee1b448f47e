"""Weekly goal schemas for API request/response models."""

from typing import Optional

from pydantic import BaseModel, Field

from study_tracker.schemas.subject import SubjectResponse


class WeeklyGoalUpsert(BaseModel):
    """Schema for creating or replacing a weekly goal.

    Attributes:
        profile_id: Profile the goal belongs to.
        subject_id: Subject the goal is for.
        year: ISO week-numbering year.
        week_number: ISO week number (1-53).
        target_minutes: Target minutes; 0 clears the goal.
    """

    profile_id: int
    subject_id: int
    year: int = Field(..., ge=2000, le=9999)
    week_number: int = Field(..., ge=1, le=53)
    target_minutes: int = Field(..., ge=0, le=7 * 24 * 60)


class WeeklyGoalResponse(BaseModel):
    """Response schema for weekly goal."""

    id: int
    profile_id: int
    subject_id: int
    year: int
    week_number: int
    target_minutes: int
    subject: Optional[SubjectResponse] = None

    model_config = {"from_attributes": True}


class GoalProgressResponse(BaseModel):
    """Weekly goal with minutes studied so far."""

    goal: WeeklyGoalResponse
    current_minutes: int
    current_label: str
    target_label: str
    percentage: int
