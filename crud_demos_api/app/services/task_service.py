"""
Service for to-do tasks.

Tasks are created open and move to completed through
``complete_task``.  Completing an already completed task is a no-op
apart from refreshing ``updated_at``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from crud_demos_api.app.core.repository import InMemoryRepository, utcnow
from crud_demos_api.app.schemas.task import TaskCreate, TaskRead

logger = logging.getLogger(__name__)


class TaskService:
    """Service for creating, listing, completing and deleting tasks."""

    def __init__(self, repository: Optional[InMemoryRepository[TaskRead]] = None) -> None:
        self.repository = repository if repository is not None else InMemoryRepository(TaskRead, "task")

    async def list_tasks(self) -> List[TaskRead]:
        return self.repository.list()

    async def create_task(self, data: TaskCreate) -> TaskRead:
        task = self.repository.create(
            **data.model_dump(),
            is_completed=False,
            created_at=utcnow(),
        )
        logger.info("Created task %s", task.id)
        return task

    async def complete_task(self, task_id: int) -> TaskRead:
        """Mark a task as completed.

        Parameters
        ----------
        task_id : int
            Identifier of the task to mark as completed.

        Raises
        ------
        NotFoundError
            If the task does not exist.
        """
        task = self.repository.update(task_id, {"is_completed": True})
        logger.info("Completed task %s", task_id)
        return task

    async def delete_task(self, task_id: int) -> None:
        self.repository.delete(task_id)
        logger.info("Deleted task %s", task_id)
