"""StudySession model representing one logged study interval."""

from datetime import date
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from study_tracker.models.subject import Subject

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from study_tracker.models.base import BaseModel


class StudySession(BaseModel):
    """One logged instance of studying a subject for a duration on a date.

    Attributes:
        profile_id: Foreign key to profiles table
        subject_id: Foreign key to subjects table
        study_date: Calendar date the study happened on
        textbook: Textbook name (nullable)
        study_range: Pages or chapters covered (nullable)
        duration_minutes: Positive number of minutes studied
        memo: Free-form note (nullable)
        subject: Resolved subject; only populated when explicitly loaded

    Example:
        session = await StudySessionService(db).create_session(
            profile_id=1,
            subject_id=2,
            study_date=date(2024, 1, 1),
            duration_minutes=30,
        )
    """

    __tablename__ = "study_sessions"

    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id"), nullable=False, index=True
    )
    study_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    textbook: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    study_range: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    memo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    subject: Mapped[Optional["Subject"]] = relationship(
        "Subject", lazy="noload", foreign_keys=[subject_id]
    )

    __table_args__ = (
        CheckConstraint(
            "duration_minutes > 0", name="ck_study_sessions_duration_positive"
        ),
    )

    def __repr__(self) -> str:
        """String representation of the study session."""
        return (
            f"StudySession(id={self.id}, profile_id={self.profile_id}, "
            f"subject_id={self.subject_id}, study_date={self.study_date}, "
            f"duration_minutes={self.duration_minutes})"
        )
