"""
Profile endpoints for API v1.

Profiles are created with ``POST /profiles`` and fetched by the id of
the user they belong to, ``GET /profiles/user/{user_id}``.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from crud_demos_api.app.core.repository import NotFoundError
from crud_demos_api.app.schemas.profile import ProfileCreate, ProfileRead
from crud_demos_api.app.services.profile_service import ProfileService
from crud_demos_api.app.services.registry import get_profile_service


router = APIRouter()


@router.post("", response_model=ProfileRead, status_code=status.HTTP_201_CREATED)
async def create_profile(
    profile: ProfileCreate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileRead:
    return await service.create_profile(profile)


@router.get("/user/{user_id}", response_model=ProfileRead)
async def get_profile_by_user(
    user_id: int,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileRead:
    """Return the profile of a user.  Raises 404 if the user has none."""
    try:
        return await service.get_profile_by_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
