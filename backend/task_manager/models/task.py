"""Task ORM — persists the Task entity managed by the REST API.

Invariants:
    - id is an autoincrement integer primary key (store-assigned)
    - author is non-nullable: every task has exactly one author identity
    - created_at is set once on insert and never updated
    - status stores TaskStatus values as plain strings

Design Decisions:
    - author/executor stored as identity strings: users live in the identity provider
    - Indexes on author and status: the common list filters
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from task_manager.core.domain_types import TaskStatus
from task_manager.db.base import Base


class Task(Base):
    """Task record — one row per task, owned by its author."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskStatus.NEW.value, index=True,
    )
    author: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    executor: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
