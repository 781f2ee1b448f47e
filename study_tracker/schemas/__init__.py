"""Pydantic schemas for API request/response models."""

from study_tracker.schemas.profile import (
    ProfileCreate,
    ProfileResponse,
    ProfileSelect,
    SelectedProfileResponse,
)
from study_tracker.schemas.stats import (
    DailyStatsResponse,
    MonthlyStatsResponse,
    WeeklyStatsResponse,
)
from study_tracker.schemas.study_session import (
    HistoryDayResponse,
    StudySessionCreate,
    StudySessionResponse,
    StudySessionUpdate,
)
from study_tracker.schemas.subject import SubjectResponse
from study_tracker.schemas.textbook import TextbookResponse
from study_tracker.schemas.weekly_goal import (
    GoalProgressResponse,
    WeeklyGoalResponse,
    WeeklyGoalUpsert,
)

__all__ = [
    "ProfileCreate",
    "ProfileResponse",
    "ProfileSelect",
    "SelectedProfileResponse",
    "SubjectResponse",
    "StudySessionCreate",
    "StudySessionUpdate",
    "StudySessionResponse",
    "HistoryDayResponse",
    "WeeklyGoalUpsert",
    "WeeklyGoalResponse",
    "GoalProgressResponse",
    "TextbookResponse",
    "WeeklyStatsResponse",
    "MonthlyStatsResponse",
    "DailyStatsResponse",
]
