"""Task Authorization — ownership rule for mutating operations.

Invariants:
    - Only the author of a task may update or delete it
    - Comparison is an exact match of identity strings (no case folding)
    - check_author raises ForbiddenError; is_author never raises
"""

from task_manager.core.errors import ErrorContext, ForbiddenError
from task_manager.core.repository_protocols import TaskLike


def is_author(identity: str, task: TaskLike) -> bool:
    """True when the caller identity equals the task's author identity."""
    return task.author == identity


def check_author(identity: str, task: TaskLike) -> None:
    """Raise ForbiddenError unless identity authored the task."""
    if not is_author(identity, task):
        raise ForbiddenError(
            "Task", task.id,
            context=ErrorContext(task_id=task.id, identity=identity),
        )
