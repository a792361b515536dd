"""Task Schemas — Pydantic models with field-level validation for the tasks API.

Invariants:
    - TaskCreate.title: 1-255 chars after stripping, never whitespace-only
    - status defaults to TaskStatus.NEW
    - author is never accepted from the client (assigned from the caller identity)
    - TaskResponse reads ORM objects directly (from_attributes)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from task_manager.core.domain_types import TaskStatus


class TaskCreate(BaseModel):
    """Task DTO accepted on create and (full replacement) update."""
    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    status: TaskStatus = TaskStatus.NEW
    executor: str | None = Field(None, min_length=1, max_length=255)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    def to_fields(self) -> dict:
        """Column values for the store (enum flattened to its string value)."""
        data = self.model_dump()
        data["status"] = self.status.value
        return data


class TaskUpdate(TaskCreate):
    """PUT body — same shape as TaskCreate, replaces every mutable field."""


class TaskResponse(BaseModel):
    """Task response — public-facing task data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    author: str
    executor: str | None = None
    created_at: datetime
