"""
Post endpoints for API v1.

These routes provide CRUD operations for blog posts.  Path ids are
coerced to ``int`` by FastAPI; a non-numeric id is rejected with 422
before reaching the service.  Unknown ids produce 404 with a localized
message.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from crud_demos_api.app.core.repository import NotFoundError
from crud_demos_api.app.schemas.post import PostCreate, PostRead, PostUpdate
from crud_demos_api.app.services.post_service import PostService
from crud_demos_api.app.services.registry import get_post_service


router = APIRouter()


@router.get("", response_model=List[PostRead])
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostRead]:
    """Return all posts in creation order."""
    return await service.list_posts()


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: int, service: PostService = Depends(get_post_service)) -> PostRead:
    """Retrieve a single post by its ID.  Raises 404 if it does not exist."""
    try:
        return await service.get_post(post_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_post(post: PostCreate, service: PostService = Depends(get_post_service)) -> PostRead:
    return await service.create_post(post)


@router.put("/{post_id}", response_model=PostRead)
async def update_post(
    post_id: int,
    updates: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    """Update an existing post.

    Partial updates are supported; any unspecified fields remain
    unchanged.  ``updatedAt`` is refreshed on every successful call.
    """
    try:
        return await service.update_post(post_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{post_id}", response_model=PostRead)
async def delete_post(post_id: int, service: PostService = Depends(get_post_service)) -> PostRead:
    """Delete a post and return the removed record.

    Comments belonging to the post are not removed.
    """
    try:
        return await service.delete_post(post_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
