"""
Business logic for users.

The ``UserService`` stores users in memory and provides create, list
and lookup.  Emails are not checked for uniqueness.
"""

import logging
from typing import List, Optional

from crud_demos_api.app.core.repository import InMemoryRepository, utcnow
from crud_demos_api.app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: Optional[InMemoryRepository[UserRead]] = None) -> None:
        self.repository = repository if repository is not None else InMemoryRepository(UserRead, "user")

    async def create_user(self, data: UserCreate) -> UserRead:
        logger.info("Registering user %s", data.email)
        return self.repository.create(**data.model_dump(), created_at=utcnow())

    async def list_users(self) -> List[UserRead]:
        return self.repository.list()

    async def get_user(self, user_id: int) -> UserRead:
        return self.repository.get(user_id)
