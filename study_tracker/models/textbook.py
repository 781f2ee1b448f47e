"""TextbookSuggestion model used for textbook name autocomplete."""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from study_tracker.models.base import BaseModel


class TextbookSuggestion(BaseModel):
    """Deduplicated textbook name previously typed for a subject."""

    __tablename__ = "textbook_suggestions"

    subject_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("subject_id", "name", name="uq_textbook_subject_name"),
    )

    def __repr__(self) -> str:
        return (
            f"TextbookSuggestion(id={self.id}, subject_id={self.subject_id}, "
            f"name={self.name!r})"
        )
