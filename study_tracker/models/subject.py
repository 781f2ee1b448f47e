"""Subject model representing the fixed study subject taxonomy."""

import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from study_tracker.models.base import BaseModel


class SubjectCategory(str, enum.Enum):
    """Subject grouping used by the record form."""

    ENGLISH = "english"
    MATH = "math"
    OTHER = "other"


class Subject(BaseModel):
    """Study subject with display color and manual ordering.

    Subjects are seeded by migration and never created or deleted
    through the API.

    Attributes:
        name: Subject name (e.g. "수학", "영어 독해")
        category: Subject grouping
        color: CSS color used by charts and badges (e.g. "#3b82f6")
        sort_order: Position in subject lists, ascending
    """

    __tablename__ = "subjects"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[SubjectCategory] = mapped_column(
        Enum(
            SubjectCategory,
            native_enum=False,
            length=20,
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
        default=SubjectCategory.OTHER,
    )
    color: Mapped[str] = mapped_column(String(20), nullable=False)
    sort_order: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, index=True
    )

    def __repr__(self) -> str:
        """String representation of the subject."""
        return (
            f"Subject(id={self.id}, name={self.name!r}, "
            f"category={self.category.value}, sort_order={self.sort_order})"
        )
