"""Textbook suggestion schemas."""

from pydantic import BaseModel


class TextbookResponse(BaseModel):
    """Response schema for textbook suggestion."""

    id: int
    subject_id: int
    name: str

    model_config = {"from_attributes": True}
