"""
Memo endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from crud_demos_api.app.core.repository import NotFoundError
from crud_demos_api.app.schemas.memo import MemoCreate, MemoRead, MemoUpdate
from crud_demos_api.app.services.memo_service import MemoService
from crud_demos_api.app.services.registry import get_memo_service

router = APIRouter()


@router.get("", response_model=List[MemoRead])
async def list_memos(service: MemoService = Depends(get_memo_service)) -> List[MemoRead]:
    return await service.list_memos()


@router.get("/{memo_id}", response_model=MemoRead)
async def get_memo(memo_id: int, service: MemoService = Depends(get_memo_service)) -> MemoRead:
    try:
        return await service.get_memo(memo_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("", response_model=MemoRead, status_code=status.HTTP_201_CREATED)
async def create_memo(memo: MemoCreate, service: MemoService = Depends(get_memo_service)) -> MemoRead:
    return await service.create_memo(memo)


@router.put("/{memo_id}", response_model=MemoRead)
async def update_memo(
    memo_id: int,
    updates: MemoUpdate,
    service: MemoService = Depends(get_memo_service),
) -> MemoRead:
    try:
        return await service.update_memo(memo_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{memo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_memo(memo_id: int, service: MemoService = Depends(get_memo_service)) -> None:
    try:
        await service.delete_memo(memo_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
