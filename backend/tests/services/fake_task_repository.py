"""In-memory TaskRepository for service tests."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from task_manager.core.domain_types import FilterOperator
from task_manager.core.task_filter import TaskFilter

_COMPARE = {
    FilterOperator.EQ: lambda a, b: a == b,
    FilterOperator.GT: lambda a, b: a > b,
    FilterOperator.GTE: lambda a, b: a >= b,
    FilterOperator.LT: lambda a, b: a < b,
    FilterOperator.LTE: lambda a, b: a <= b,
}


@dataclass
class FakeTask:
    id: int
    title: str
    author: str
    description: str | None = None
    status: str = "new"
    executor: str | None = None
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class FakeTaskRepository:
    def __init__(self):
        self.tasks: dict[int, FakeTask] = {}
        self._next_id = 1

    async def create(self, fields: dict, author: str) -> FakeTask:
        task = FakeTask(id=self._next_id, author=author, **fields)
        self.tasks[task.id] = task
        self._next_id += 1
        return replace(task)

    async def get(self, task_id: int) -> FakeTask | None:
        task = self.tasks.get(task_id)
        return replace(task) if task else None

    async def list(self, task_filter: TaskFilter) -> list[FakeTask]:
        def matches(task: FakeTask) -> bool:
            return all(
                _COMPARE[c.operator](
                    getattr(task, c.field), getattr(c.value, "value", c.value),
                )
                for c in task_filter.conditions
            )
        return [replace(t) for t in self.tasks.values() if matches(t)]

    async def update(self, task_id: int, fields: dict) -> FakeTask | None:
        if task_id not in self.tasks:
            return None
        self.tasks[task_id] = replace(self.tasks[task_id], **fields)
        return replace(self.tasks[task_id])

    async def delete(self, task_id: int) -> bool:
        return self.tasks.pop(task_id, None) is not None
