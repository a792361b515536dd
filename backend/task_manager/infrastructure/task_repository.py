"""Task Repository — SQLAlchemy implementation of core.repository_protocols.TaskRepository.

Invariants:
    - One AsyncSession per repository instance (request-scoped)
    - Every write commits before returning; reads never commit
    - list() issues a single SELECT: one WHERE clause per filter condition, ordered by id
    - Missing rows are reported as None / False, never raised (service decides)
"""

import logging
import operator
from typing import Callable, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from task_manager.core.domain_types import FilterOperator
from task_manager.core.task_filter import FilterCondition, TaskFilter
from task_manager.models.task import Task

logger = logging.getLogger(__name__)

_COLUMNS = {
    "id": Task.id,
    "title": Task.title,
    "status": Task.status,
    "author": Task.author,
    "executor": Task.executor,
    "created_at": Task.created_at,
}

_OPERATORS: dict[FilterOperator, Callable] = {
    FilterOperator.EQ: operator.eq,
    FilterOperator.GT: operator.gt,
    FilterOperator.GTE: operator.ge,
    FilterOperator.LT: operator.lt,
    FilterOperator.LTE: operator.le,
}


def build_clause(condition: FilterCondition) -> ColumnElement[bool]:
    """Translate one filter condition into a SQLAlchemy boolean expression."""
    column = _COLUMNS[condition.field]
    value = getattr(condition.value, "value", condition.value)  # enums -> str
    return _OPERATORS[condition.operator](column, value)


class SqlTaskRepository:
    """Task persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, fields: dict, author: str) -> Task:
        task = Task(**fields, author=author)
        self._db.add(task)
        await self._db.commit()
        await self._db.refresh(task)
        return task

    async def get(self, task_id: int) -> Task | None:
        return await self._db.get(Task, task_id)

    async def list(self, task_filter: TaskFilter) -> Sequence[Task]:
        query = select(Task).order_by(Task.id)
        for condition in task_filter.conditions:
            query = query.where(build_clause(condition))
        result = await self._db.execute(query)
        return result.scalars().all()

    async def update(self, task_id: int, fields: dict) -> Task | None:
        task = await self.get(task_id)
        if task is None:
            return None
        for name, value in fields.items():
            setattr(task, name, value)
        await self._db.commit()
        await self._db.refresh(task)
        return task

    async def delete(self, task_id: int) -> bool:
        task = await self.get(task_id)
        if task is None:
            return False
        await self._db.delete(task)
        await self._db.commit()
        return True
