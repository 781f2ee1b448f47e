"""WeeklyGoal model representing a per-subject target for one ISO week."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from study_tracker.models.subject import Subject

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from study_tracker.models.base import BaseModel


class WeeklyGoal(BaseModel):
    """Target study minutes for one subject in one ISO week.

    Each (profile, subject, year, week_number) combination is unique;
    goals are upserted rather than inserted.

    Attributes:
        profile_id: Foreign key to profiles table
        subject_id: Foreign key to subjects table
        year: ISO week-numbering year
        week_number: ISO week number (1-53)
        target_minutes: Target duration; 0 means "no goal"
    """

    __tablename__ = "weekly_goals"

    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id"), nullable=False
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    week_number: Mapped[int] = mapped_column(Integer, nullable=False)
    target_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    subject: Mapped[Optional["Subject"]] = relationship(
        "Subject", lazy="noload", foreign_keys=[subject_id]
    )

    __table_args__ = (
        UniqueConstraint(
            "profile_id",
            "subject_id",
            "year",
            "week_number",
            name="uq_weekly_goal_profile_subject_week",
        ),
    )

    def __repr__(self) -> str:
        """String representation of the weekly goal."""
        return (
            f"WeeklyGoal(id={self.id}, profile_id={self.profile_id}, "
            f"subject_id={self.subject_id}, week={self.year}-W{self.week_number:02d}, "
            f"target_minutes={self.target_minutes})"
        )
