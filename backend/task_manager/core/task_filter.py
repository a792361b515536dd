"""Task Filter — explicit filter specification parsed from list query parameters.

Invariants:
    - A filter is a conjunction of FilterCondition (field, operator, value)
    - Parameter syntax is `field` (equality) or `field__op` (comparison)
    - A repeated parameter yields one condition per occurrence
    - Range operators only apply to ordered fields (id, created_at)
    - Values are coerced to the field's domain type before reaching the store
    - id values stay within the INTEGER column range; datetimes are normalized to UTC
    - Unknown field / operator or bad value raises FilterValidationError

Design Decisions:
    - Pure parsing here; translation to SQL lives in the repository
    - Field registry as an explicit dict (no reflection over ORM columns)
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping

from task_manager.core.domain_types import (
    MAX_TASK_ID, MIN_FILTER_ID, FilterOperator, TaskStatus,
)
from task_manager.core.errors import FilterValidationError

RANGE_OPERATORS = frozenset({
    FilterOperator.GT, FilterOperator.GTE, FilterOperator.LT, FilterOperator.LTE,
})


@dataclass(frozen=True)
class FilterField:
    """How one filterable field is coerced and which operators it accepts."""
    coerce: Callable[[str], Any]
    ordered: bool = False


def _parse_id(raw: str) -> int:
    value = int(raw)
    if not MIN_FILTER_ID <= value <= MAX_TASK_ID:
        raise ValueError(f"id {value} out of range")
    return value


def _parse_datetime(raw: str) -> datetime:
    """ISO-8601 → aware UTC datetime. Naive input is read as UTC."""
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


FILTER_FIELDS: dict[str, FilterField] = {
    "id": FilterField(_parse_id, ordered=True),
    "title": FilterField(str),
    "status": FilterField(TaskStatus),
    "author": FilterField(str),
    "executor": FilterField(str),
    "created_at": FilterField(_parse_datetime, ordered=True),
}


@dataclass(frozen=True)
class FilterCondition:
    field: str
    operator: FilterOperator
    value: Any


@dataclass(frozen=True)
class TaskFilter:
    conditions: tuple[FilterCondition, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.conditions


def parse_filter_parameter(name: str, raw: str) -> FilterCondition:
    """Parse one `field[__op]=value` pair into a typed condition."""
    field_name, _, op_name = name.partition("__")
    spec = FILTER_FIELDS.get(field_name)
    if spec is None:
        raise FilterValidationError(f"Unknown filter field '{field_name}'", name)

    try:
        operator = FilterOperator(op_name) if op_name else FilterOperator.EQ
    except ValueError:
        raise FilterValidationError(f"Unknown filter operator '{op_name}'", name)
    if operator in RANGE_OPERATORS and not spec.ordered:
        raise FilterValidationError(
            f"Operator '{op_name}' is not supported for field '{field_name}'", name,
        )

    try:
        value = spec.coerce(raw)
    except ValueError:
        raise FilterValidationError(
            f"Invalid value '{raw}' for filter '{name}'", name,
        )
    return FilterCondition(field_name, operator, value)


def parse_task_filter(
    params: Mapping[str, str] | Iterable[tuple[str, str]],
) -> TaskFilter:
    """Build a TaskFilter from query parameters. No parameters matches all tasks.

    Pass `(name, value)` pairs (e.g. QueryParams.multi_items()) to keep
    repeated parameters; a Mapping contributes one condition per key.
    """
    pairs = params.items() if isinstance(params, Mapping) else params
    return TaskFilter(tuple(
        parse_filter_parameter(name, raw) for name, raw in pairs
    ))
