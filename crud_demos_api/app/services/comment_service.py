"""
Service for comments attached to blog posts.

Comments are stored in a single repository; every operation is scoped
by the parent ``post_id`` taken from the request path.  A comment is
only found when both its ``post_id`` and its ``id`` match, so a lookup
under one post never returns a comment of another.

The existence of the parent post is not checked.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from crud_demos_api.app.core.repository import InMemoryRepository, utcnow
from crud_demos_api.app.schemas.comment import CommentCreate, CommentRead

logger = logging.getLogger(__name__)


class CommentService:
    """Service for creating, listing and deleting comments of a post."""

    def __init__(self, repository: Optional[InMemoryRepository[CommentRead]] = None) -> None:
        self.repository = repository if repository is not None else InMemoryRepository(CommentRead, "comment")

    @staticmethod
    def _of_post(post_id: int):
        return lambda comment: comment.post_id == post_id

    async def create_comment(self, post_id: int, data: CommentCreate) -> CommentRead:
        comment = self.repository.create(
            post_id=post_id,
            **data.model_dump(),
            created_at=utcnow(),
        )
        logger.info("Created comment %s on post %s", comment.id, post_id)
        return comment

    async def list_comments(self, post_id: int) -> List[CommentRead]:
        """Return the comments of ``post_id`` in creation order."""
        return self.repository.list(self._of_post(post_id))

    async def get_comment(self, post_id: int, comment_id: int) -> CommentRead:
        return self.repository.get(comment_id, where=self._of_post(post_id))

    async def delete_comment(self, post_id: int, comment_id: int) -> None:
        self.repository.delete(comment_id, where=self._of_post(post_id))
        logger.info("Deleted comment %s on post %s", comment_id, post_id)
