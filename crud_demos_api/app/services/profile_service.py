"""
Service for user profiles.

Profiles are looked up by the id of the user they belong to rather than
by their own id.  When several profiles point at the same user, the
earliest one wins.  The referenced user is not required to exist.
"""

import logging
from typing import Optional

from crud_demos_api.app.core.messages import not_found_message
from crud_demos_api.app.core.repository import InMemoryRepository, NotFoundError, utcnow
from crud_demos_api.app.schemas.profile import ProfileCreate, ProfileRead

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for creating profiles and fetching them by user id."""

    def __init__(self, repository: Optional[InMemoryRepository[ProfileRead]] = None) -> None:
        self.repository = repository if repository is not None else InMemoryRepository(ProfileRead, "profile")

    async def create_profile(self, data: ProfileCreate) -> ProfileRead:
        profile = self.repository.create(**data.model_dump(), created_at=utcnow())
        logger.info("Created profile %s for user %s", profile.id, profile.user_id)
        return profile

    async def get_profile_by_user(self, user_id: int) -> ProfileRead:
        """Return the profile of ``user_id``.

        Raises
        ------
        NotFoundError
            If no profile references the user.  The message names the
            user id, not a profile id.
        """
        profile = self.repository.find(lambda p: p.user_id == user_id)
        if profile is None:
            raise NotFoundError(
                "profile",
                user_id,
                not_found_message("profile", user_id, self.repository.locale),
            )
        return profile
