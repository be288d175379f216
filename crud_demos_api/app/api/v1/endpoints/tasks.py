"""
API endpoints for to-do tasks.

Mounted under ``/todo/tasks``.  Tasks can be listed, created, marked
as completed and deleted; there is no general update route.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from crud_demos_api.app.core.repository import NotFoundError
from crud_demos_api.app.schemas.task import TaskCreate, TaskRead
from crud_demos_api.app.services.registry import get_task_service
from crud_demos_api.app.services.task_service import TaskService


router = APIRouter()


@router.get("", response_model=List[TaskRead], summary="List all tasks")
async def list_tasks(service: TaskService = Depends(get_task_service)) -> List[TaskRead]:
    return await service.list_tasks()


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an open task",
)
async def create_task(task: TaskCreate, service: TaskService = Depends(get_task_service)) -> TaskRead:
    return await service.create_task(task)


@router.patch(
    "/{task_id}/complete",
    response_model=TaskRead,
    summary="Mark a task as completed",
)
async def complete_task(task_id: int, service: TaskService = Depends(get_task_service)) -> TaskRead:
    """Mark the specified task as completed and return it.

    Parameters
    ----------
    task_id : int
        Identifier of the task to complete.

    Returns
    -------
    TaskRead
        The task with ``isCompleted`` set to ``true``.
    """
    try:
        return await service.complete_task(task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a task")
async def delete_task(task_id: int, service: TaskService = Depends(get_task_service)) -> None:
    try:
        await service.delete_task(task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
