"""
Top-level router for version 1 of the API.

This router aggregates the resource routers (posts, comments, files,
memos, tasks, users, profiles) under their path prefixes.  When a new
resource is added, update this file to include its router.
"""

from fastapi import APIRouter

from .endpoints import (
    posts,
    comments,
    files,
    memos,
    tasks,
    users,
    profiles,
)

router = APIRouter()

router.include_router(posts.router, prefix="/posts", tags=["posts"])
# Comments are nested under their post.  The ``post_id`` path parameter
# is declared by every handler in the comments module.
router.include_router(comments.router, prefix="/posts/{post_id}/comments", tags=["comments"])
router.include_router(files.router, prefix="/files", tags=["files"])
router.include_router(memos.router, prefix="/memos", tags=["memos"])
router.include_router(tasks.router, prefix="/todo/tasks", tags=["tasks"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])


@router.get("/health", tags=["health"])
async def health() -> dict:
    """Liveness probe."""
    return {"status": "ok"}
