"""Data models package."""

from study_tracker.models.base import BaseModel
from study_tracker.models.profile import Profile
from study_tracker.models.study_session import StudySession
from study_tracker.models.subject import Subject, SubjectCategory
from study_tracker.models.textbook import TextbookSuggestion
from study_tracker.models.weekly_goal import WeeklyGoal

__all__ = [
    "BaseModel",
    "Profile",
    "Subject",
    "SubjectCategory",
    "StudySession",
    "WeeklyGoal",
    "TextbookSuggestion",
]
