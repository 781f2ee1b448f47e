"""Selected-profile state carried in a browser cookie.

The last selected profile survives reloads through a single cookie.
``select`` is the only writer; ``resolve`` is the only reader and maps
the stored id onto the current profile list.
"""

import logging
from typing import Optional, Sequence

from fastapi import Request, Response

from study_tracker.config import get_settings
from study_tracker.models.profile import Profile

logger = logging.getLogger(__name__)

COOKIE_NAME = "study-tracker-selected-profile"


class ProfileSelection:
    """Reads and writes the selected profile cookie."""

    cookie_name: str = COOKIE_NAME

    @classmethod
    def stored_id(cls, request: Request) -> Optional[int]:
        """Profile id stored in the request cookie, if it parses."""
        raw = request.cookies.get(cls.cookie_name)
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            logger.debug("Ignoring malformed profile cookie", extra={"value": raw})
            return None

    @staticmethod
    def resolve(
        profiles: Sequence[Profile], stored_id: Optional[int]
    ) -> Optional[Profile]:
        """Pick the selected profile.

        The stored profile wins when it still exists; otherwise the first
        profile is used. Returns None only when there are no profiles.
        """
        if not profiles:
            return None
        if stored_id is not None:
            for profile in profiles:
                if profile.id == stored_id:
                    return profile
        return profiles[0]

    @classmethod
    def select(cls, response: Response, profile: Profile) -> None:
        """Persist ``profile`` as the selection on the client."""
        response.set_cookie(
            key=cls.cookie_name,
            value=str(profile.id),
            max_age=get_settings().PROFILE_COOKIE_MAX_AGE,
            httponly=True,
            samesite="lax",
        )
        logger.info("Profile selected", extra={"profile_id": profile.id})
