"""FastAPI dependencies that hand a request-scoped service to each route.

Every service takes the request's AsyncSession, so one descriptor builds
all of the provider functions:

    @router.get("")
    async def list_profiles(
        service: ProfileService = Depends(dependencies.profile),
    ): ...
"""

from typing import Any, Callable, Generic, Optional, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.services.profile_service import ProfileService
from study_tracker.services.stats_service import StatsService
from study_tracker.services.study_session_service import StudySessionService
from study_tracker.services.subject_service import SubjectService
from study_tracker.services.textbook_service import TextbookService
from study_tracker.services.weekly_goal_service import WeeklyGoalService
from study_tracker.utils.db import get_db_session

S = TypeVar("S")


class ServiceDependency(Generic[S]):
    """Descriptor returning one provider function per service class.

    The provider is built once and reused, so tests can target it in
    ``app.dependency_overrides``.
    """

    def __init__(self, service_class: Callable[[AsyncSession], S]) -> None:
        self.service_class = service_class
        self.attr_name = ""
        self._provider: Optional[Callable[..., S]] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.attr_name = name

    def __get__(self, instance: Any, owner: type) -> Callable[..., S]:
        if self._provider is None:
            service_class = self.service_class

            def provider(db: AsyncSession = Depends(get_db_session)) -> S:
                return service_class(db)

            provider.__name__ = f"get_{self.attr_name}_service"
            self._provider = provider
        return self._provider


class ServiceDependencies:
    """Providers for every service, looked up by attribute."""

    profile = ServiceDependency(ProfileService)
    subject = ServiceDependency(SubjectService)
    session = ServiceDependency(StudySessionService)
    goal = ServiceDependency(WeeklyGoalService)
    textbook = ServiceDependency(TextbookService)
    stats = ServiceDependency(StatsService)


dependencies = ServiceDependencies()
