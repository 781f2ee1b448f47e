"""Profile service providing access to tracked students."""

from typing import List

from sqlalchemy import select

from study_tracker.models.profile import Profile
from study_tracker.services.base import BaseService


class ProfileService(BaseService[Profile]):
    """Service for managing Profile entities.

    Adds to BaseService:
    - list_ordered(): all profiles sorted by name, as shown in the switcher
    """

    model = Profile

    async def list_ordered(self) -> List[Profile]:
        with self._reading("list"):
            result = await self.db.scalars(
                select(Profile).order_by(Profile.name, Profile.id)
            )
            return list(result)
