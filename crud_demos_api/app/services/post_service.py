"""
Business logic for blog posts.

``PostService`` keeps posts in an ``InMemoryRepository`` and exposes the
five CRUD operations used by ``/posts``.  Every miss raises
``NotFoundError``; no operation returns an error object in place of a
post.
"""

import logging
from typing import List, Optional

from crud_demos_api.app.core.repository import InMemoryRepository, utcnow
from crud_demos_api.app.schemas.base import changes_from
from crud_demos_api.app.schemas.post import PostCreate, PostRead, PostUpdate

logger = logging.getLogger(__name__)


class PostService:
    """Service for creating, listing, updating and deleting posts."""

    def __init__(self, repository: Optional[InMemoryRepository[PostRead]] = None) -> None:
        self.repository = repository if repository is not None else InMemoryRepository(PostRead, "post")

    async def create_post(self, data: PostCreate) -> PostRead:
        post = self.repository.create(**data.model_dump(), created_at=utcnow())
        logger.info("Created post %s", post.id)
        return post

    async def list_posts(self) -> List[PostRead]:
        return self.repository.list()

    async def get_post(self, post_id: int) -> PostRead:
        """Return a post by id.

        Raises
        ------
        NotFoundError
            If no post has the given id.
        """
        return self.repository.get(post_id)

    async def update_post(self, post_id: int, data: PostUpdate) -> PostRead:
        """Apply the provided fields of ``data`` and stamp ``updated_at``."""
        post = self.repository.update(post_id, changes_from(data))
        logger.info("Updated post %s", post_id)
        return post

    async def delete_post(self, post_id: int) -> PostRead:
        """Delete a post and return it.

        Comments of the post are left in place.
        """
        post = self.repository.delete(post_id)
        logger.info("Deleted post %s", post_id)
        return post
