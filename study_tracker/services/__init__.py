"""Business logic services package."""

from study_tracker.services.base import BaseService
from study_tracker.services.profile_service import ProfileService
from study_tracker.services.stats_service import StatsService
from study_tracker.services.study_session_service import StudySessionService
from study_tracker.services.subject_service import SubjectService
from study_tracker.services.textbook_service import TextbookService
from study_tracker.services.weekly_goal_service import WeeklyGoalService

__all__ = [
    "BaseService",
    "ProfileService",
    "SubjectService",
    "StudySessionService",
    "WeeklyGoalService",
    "TextbookService",
    "StatsService",
]
