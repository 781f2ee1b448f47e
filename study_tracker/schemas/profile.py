"""Profile schemas for API request/response models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProfileCreate(BaseModel):
    """Schema for creating a profile."""

    name: str = Field(..., min_length=1, max_length=100)


class ProfileResponse(BaseModel):
    """Response schema for profile."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class ProfileSelect(BaseModel):
    """Schema for switching the selected profile."""

    profile_id: int


class SelectedProfileResponse(BaseModel):
    """Currently selected profile together with all choices.

    Attributes:
        selected: Selected profile, None when no profile exists yet.
        profiles: All profiles ordered by name.
    """

    selected: Optional[ProfileResponse] = None
    profiles: List[ProfileResponse]
