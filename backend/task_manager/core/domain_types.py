"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps the store-assigned integer key (1..MAX_TASK_ID, the INTEGER column range)
    - Identity is the caller's email as issued by the identity provider
    - All valid task states encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", int)
Identity = NewType("Identity", str)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task workflow states — maps to DB `status` column."""
    NEW = "new"
    IN_PROGRESS = "in_progress"
    TESTING = "testing"
    DONE = "done"


class FilterOperator(str, Enum):
    """Comparison operators accepted in list filters (`field__op=value`)."""
    EQ = "eq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


# ─── Bounds ──────────────────────────────────────────────────────

MAX_TASK_ID = 2**31 - 1    # tasks.id is a signed 32-bit INTEGER
MIN_FILTER_ID = -(2**31)
