"""
User endpoints for API v1.

Minimal create/list/lookup routes.  There is no authentication and no
update or delete.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from crud_demos_api.app.core.repository import NotFoundError
from crud_demos_api.app.schemas.user import UserCreate, UserRead
from crud_demos_api.app.services.registry import get_user_service
from crud_demos_api.app.services.user_service import UserService


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    return await service.create_user(user_in)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    return await service.list_users()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    """Retrieve a user by ID.  Raises 404 if the user does not exist."""
    try:
        return await service.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
