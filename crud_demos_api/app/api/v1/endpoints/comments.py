"""
Comment endpoints for API v1.

Comments live under their parent post: ``/posts/{post_id}/comments``.
The post itself is not looked up, so comments can be created for a
post id that does not exist.  A comment is only visible under the post
it was created for.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from crud_demos_api.app.core.repository import NotFoundError
from crud_demos_api.app.schemas.comment import CommentCreate, CommentRead
from crud_demos_api.app.services.comment_service import CommentService
from crud_demos_api.app.services.registry import get_comment_service


router = APIRouter()


@router.post("", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: int,
    comment: CommentCreate,
    service: CommentService = Depends(get_comment_service),
) -> CommentRead:
    return await service.create_comment(post_id, comment)


@router.get("", response_model=List[CommentRead])
async def list_comments(
    post_id: int,
    service: CommentService = Depends(get_comment_service),
) -> List[CommentRead]:
    """Return the comments of a post in creation order."""
    return await service.list_comments(post_id)


@router.get("/{comment_id}", response_model=CommentRead)
async def get_comment(
    post_id: int,
    comment_id: int,
    service: CommentService = Depends(get_comment_service),
) -> CommentRead:
    try:
        return await service.get_comment(post_id, comment_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    post_id: int,
    comment_id: int,
    service: CommentService = Depends(get_comment_service),
) -> None:
    try:
        await service.delete_comment(post_id, comment_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
