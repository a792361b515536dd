"""Task Service — translates API DTOs into repository calls.

Invariants:
    - get/update/delete of a missing id raise ResourceNotFoundError("Task", id)
    - author is always the identity passed in, never read from the DTO
    - No authorization here: routes check ownership before calling update/delete
"""

import logging
from typing import Sequence

from task_manager.core.errors import ErrorContext, ResourceNotFoundError
from task_manager.core.repository_protocols import TaskLike, TaskRepository
from task_manager.core.task_filter import TaskFilter
from task_manager.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


def _not_found(task_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "Task", task_id, context=ErrorContext(task_id=task_id),
    )


class TaskService:
    """Thin orchestration layer over a TaskRepository."""

    def __init__(self, repository: TaskRepository):
        self._repository = repository

    async def create_task(self, body: TaskCreate, author: str) -> TaskLike:
        task = await self._repository.create(body.to_fields(), author)
        logger.info(
            f"Task {task.id} created",
            extra={"task_id": task.id, "author": author},
        )
        return task

    async def list_tasks(self, task_filter: TaskFilter) -> Sequence[TaskLike]:
        return await self._repository.list(task_filter)

    async def get_task(self, task_id: int) -> TaskLike:
        task = await self._repository.get(task_id)
        if task is None:
            raise _not_found(task_id)
        return task

    async def update_task(self, task_id: int, body: TaskUpdate) -> TaskLike:
        task = await self._repository.update(task_id, body.to_fields())
        if task is None:
            raise _not_found(task_id)
        logger.info(f"Task {task_id} updated", extra={"task_id": task_id})
        return task

    async def delete_task(self, task_id: int) -> None:
        if not await self._repository.delete(task_id):
            raise _not_found(task_id)
        logger.info(f"Task {task_id} deleted", extra={"task_id": task_id})
