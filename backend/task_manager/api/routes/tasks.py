"""Tasks — CRUD endpoints for the Task entity.

Invariants:
    - Routes only wire dependencies and delegate to TaskService
    - POST requires an authenticated caller, who becomes the task's author
    - PUT and DELETE go through require_task_author (404 before 403)
    - Path ids outside 1..MAX_TASK_ID are rejected with 400
    - Repeated filter parameters are all applied (conjunction)
    - GET endpoints are public

Design Decisions:
    - Filter parsed from raw query params into core.task_filter.TaskFilter:
      field__op syntax cannot be declared as fixed Query() parameters
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.core.authorization import check_author
from task_manager.core.domain_types import MAX_TASK_ID, Identity
from task_manager.core.repository_protocols import TaskLike
from task_manager.core.task_filter import TaskFilter, parse_task_filter
from task_manager.infrastructure.auth import get_current_identity
from task_manager.infrastructure.database import get_db
from task_manager.infrastructure.task_repository import SqlTaskRepository
from task_manager.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from task_manager.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])

# Out-of-range ids fail validation (400) instead of overflowing the INTEGER column
TaskIdPath = Annotated[int, Path(ge=1, le=MAX_TASK_ID)]


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(SqlTaskRepository(db))


def get_task_filter(request: Request) -> TaskFilter:
    return parse_task_filter(request.query_params.multi_items())


async def require_task_author(
    task_id: TaskIdPath,
    identity: Identity = Depends(get_current_identity),
    service: TaskService = Depends(get_task_service),
) -> TaskLike:
    """Load the task (404 if absent) and ensure the caller authored it (403)."""
    task = await service.get_task(task_id)
    check_author(identity, task)
    return task


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate,
    identity: Identity = Depends(get_current_identity),
    service: TaskService = Depends(get_task_service),
):
    """Create a new task authored by the caller."""
    return await service.create_task(body, author=identity)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    task_filter: TaskFilter = Depends(get_task_filter),
    service: TaskService = Depends(get_task_service),
):
    """List tasks matching every filter condition (all tasks when none given)."""
    return await service.list_tasks(task_filter)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: TaskIdPath, service: TaskService = Depends(get_task_service),
):
    """Get task by id."""
    return await service.get_task(task_id)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: TaskIdPath,
    body: TaskUpdate,
    _: TaskLike = Depends(require_task_author),
    service: TaskService = Depends(get_task_service),
):
    """Replace a task's mutable fields. Author only."""
    return await service.update_task(task_id, body)


@router.delete("/{task_id}", status_code=status.HTTP_200_OK)
async def delete_task(
    task_id: TaskIdPath,
    _: TaskLike = Depends(require_task_author),
    service: TaskService = Depends(get_task_service),
):
    """Delete a task. Author only."""
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_200_OK)
