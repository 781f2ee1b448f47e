"""Profile model representing the person whose study is tracked."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from study_tracker.models.base import BaseModel


class Profile(BaseModel):
    """A label under which study sessions are recorded.

    Attributes:
        name: Display name of the student (unique)
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "profiles"

    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    def __repr__(self) -> str:
        """String representation of the profile."""
        return f"Profile(id={self.id}, name={self.name!r})"
