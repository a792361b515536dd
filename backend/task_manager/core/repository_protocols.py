"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from task_manager.core.task_filter import TaskFilter


class TaskLike(Protocol):
    """Structural contract for Task objects passed between layers.

    Avoids coupling the service and authorization rule to the ORM model.
    """
    id: int
    title: str
    description: str | None
    status: str
    author: str
    executor: str | None
    created_at: datetime


class TaskRepository(Protocol):
    """Contract for task persistence — implemented by shell."""
    async def create(self, fields: dict, author: str) -> TaskLike: ...
    async def get(self, task_id: int) -> TaskLike | None: ...
    async def list(self, task_filter: "TaskFilter") -> Sequence[TaskLike]: ...
    async def update(self, task_id: int, fields: dict) -> TaskLike | None: ...
    async def delete(self, task_id: int) -> bool: ...
