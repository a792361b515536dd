"""SqlTaskRepository — persistence and filter translation against SQLite.

Invariants:
    - create assigns sequential ids and the given author
    - missing rows return None / False
    - list applies every condition (AND) and orders by id
    - created_at ranges compare instants, whatever offset the filter used
"""

from datetime import datetime, timezone

from task_manager.core.domain_types import FilterOperator
from task_manager.core.task_filter import FilterCondition, parse_task_filter
from task_manager.infrastructure.task_repository import SqlTaskRepository, build_clause
from task_manager.models.task import Task


async def _seed(repo: SqlTaskRepository):
    await repo.create({"title": "A", "status": "new"}, author="a@x.com")
    await repo.create({"title": "B", "status": "done"}, author="a@x.com")
    await repo.create({"title": "C", "status": "done"}, author="b@x.com")


async def _seed_dated(repo: SqlTaskRepository):
    for title, month in (("Jan", 1), ("Feb", 2), ("Mar", 3)):
        await repo.create(
            {"title": title, "created_at": datetime(2026, month, 1, tzinfo=timezone.utc)},
            author="a@x.com",
        )


async def test_create_assigns_id_author_and_timestamp(test_db):
    """create returns the stored row with id, author, default status and timestamp."""
    repo = SqlTaskRepository(test_db)
    task = await repo.create({"title": "A"}, author="a@x.com")
    assert task.id == 1
    assert task.author == "a@x.com"
    assert task.status == "new"
    assert task.created_at is not None


async def test_get_missing_returns_none(test_db):
    """get of an absent id returns None."""
    assert await SqlTaskRepository(test_db).get(404) is None


async def test_update_and_delete_missing(test_db):
    """update/delete of an absent id report the miss without raising."""
    repo = SqlTaskRepository(test_db)
    assert await repo.update(404, {"title": "X"}) is None
    assert await repo.delete(404) is False


async def test_update_persists_fields(test_db, test_session_factory):
    """Updated fields are committed and visible to another session."""
    repo = SqlTaskRepository(test_db)
    task = await repo.create({"title": "A"}, author="a@x.com")
    await repo.update(task.id, {"title": "B", "executor": "b@x.com"})

    async with test_session_factory() as other:
        stored = await other.get(Task, task.id)
    assert stored.title == "B"
    assert stored.executor == "b@x.com"
    assert stored.author == "a@x.com"


async def test_delete_removes_row(test_db):
    """delete removes the row and reports success."""
    repo = SqlTaskRepository(test_db)
    task = await repo.create({"title": "A"}, author="a@x.com")
    assert await repo.delete(task.id) is True
    assert await repo.get(task.id) is None


async def test_list_empty_filter_returns_all_ordered(test_db):
    """No conditions returns every task ordered by id."""
    repo = SqlTaskRepository(test_db)
    await _seed(repo)
    tasks = await repo.list(parse_task_filter({}))
    assert [t.title for t in tasks] == ["A", "B", "C"]


async def test_list_conditions_are_conjunctive(test_db):
    """All conditions must hold for a row to be returned."""
    repo = SqlTaskRepository(test_db)
    await _seed(repo)
    tasks = await repo.list(parse_task_filter({"author": "a@x.com", "status": "done"}))
    assert [t.title for t in tasks] == ["B"]


async def test_list_repeated_equality_on_same_field_matches_nothing(test_db):
    """Two different equality values for one field cannot both hold."""
    repo = SqlTaskRepository(test_db)
    await _seed(repo)
    tasks = await repo.list(parse_task_filter([("status", "new"), ("status", "done")]))
    assert list(tasks) == []


async def test_list_id_range(test_db):
    """id__gt selects the later rows."""
    repo = SqlTaskRepository(test_db)
    await _seed(repo)
    tasks = await repo.list(parse_task_filter({"id__gt": "1"}))
    assert [t.id for t in tasks] == [2, 3]


async def test_list_created_at_range(test_db):
    """created_at__gte / __lt bound the creation timestamp."""
    repo = SqlTaskRepository(test_db)
    await _seed_dated(repo)
    tasks = await repo.list(parse_task_filter({
        "created_at__gte": "2026-02-01T00:00:00",
        "created_at__lt": "2026-03-01T00:00:00",
    }))
    assert [t.title for t in tasks] == ["Feb"]


async def test_list_created_at_with_offset_compares_instants(test_db):
    """A +02:00 bound is converted to UTC before comparison."""
    repo = SqlTaskRepository(test_db)
    await _seed_dated(repo)
    tasks = await repo.list(parse_task_filter({"created_at__gte": "2026-02-01T02:00:00+02:00"}))
    assert [t.title for t in tasks] == ["Feb", "Mar"]

    tasks = await repo.list(parse_task_filter({"created_at__lte": "2026-01-31T23:00:00-01:00"}))
    assert [t.title for t in tasks] == ["Jan", "Feb"]


async def test_list_no_match_returns_empty(test_db):
    """A filter nothing satisfies returns an empty list."""
    repo = SqlTaskRepository(test_db)
    await _seed(repo)
    assert list(await repo.list(parse_task_filter({"title": "Z"}))) == []


def test_build_clause_renders_operator():
    """build_clause maps FilterOperator to the SQL comparison."""
    clause = build_clause(FilterCondition("id", FilterOperator.GTE, 3))
    assert str(clause) == "tasks.id >= :id_1"
