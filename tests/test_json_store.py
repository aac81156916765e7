"""
Tests for the JSON file task store
"""

import json
import pytest
from tasktracker.models.query import TaskFilter
from tasktracker.services.task_manager import TaskManager
from tasktracker.services.task_query_service import TaskQueryService
from tasktracker.store.json_store import JsonFileTaskStore
from tasktracker.utils.error_handler import StoreError
from conftest import ALICE, make_fields


@pytest.mark.asyncio
async def test_tasks_survive_new_store_instance(json_store):
    manager = TaskManager(json_store)
    task = await manager.create_task(ALICE, make_fields(dueDate="2030-01-01T08:00:00Z", tags=["a"]))

    reopened = JsonFileTaskStore(store_file=str(json_store.store_file))
    stored = await reopened.get_by_id(task.id)

    assert stored == task


@pytest.mark.asyncio
async def test_file_uses_alias_keys_and_iso_dates(json_store):
    manager = TaskManager(json_store)
    task = await manager.create_task(ALICE, make_fields(dueDate="2030-01-01T08:00:00Z"))

    with open(json_store.store_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    document = data[task.id]
    assert document["owner"] == ALICE
    assert document["dueDate"].startswith("2030-01-01T08:00:00")
    assert "createdAt" in document
    assert document["completedAt"] is None


@pytest.mark.asyncio
async def test_queries_against_json_store(json_store):
    manager = TaskManager(json_store)
    query_service = TaskQueryService(json_store)
    for title in ("one", "two", "three"):
        await manager.create_task(ALICE, make_fields(title=title, description="plain"))

    page = await query_service.search_tasks(ALICE, {"search": "t", "sortBy": "title", "sortOrder": "asc"})

    assert [t.title for t in page.tasks] == ["three", "two"]
    assert await json_store.count(TaskFilter(owner=ALICE)) == 3


@pytest.mark.asyncio
async def test_update_and_delete_persist(json_store):
    manager = TaskManager(json_store)
    task = await manager.create_task(ALICE, make_fields())

    await manager.update_task(ALICE, task.id, {"status": "completed"})
    reopened = JsonFileTaskStore(store_file=str(json_store.store_file))
    stored = await reopened.get_by_id(task.id)
    assert stored.completed_at is not None

    await manager.delete_task(ALICE, task.id)
    assert await reopened.get_by_id(task.id) is None


@pytest.mark.asyncio
async def test_missing_file_is_empty_store(tmp_path):
    store = JsonFileTaskStore(store_file=str(tmp_path / "nested" / "tasks.json"))

    assert await store.count(TaskFilter(owner=ALICE)) == 0


@pytest.mark.asyncio
async def test_corrupt_file_raises_store_error(tmp_path):
    store_file = tmp_path / "tasks.json"
    store_file.write_text("{not json", encoding="utf-8")
    store = JsonFileTaskStore(store_file=str(store_file))

    with pytest.raises(StoreError):
        await store.count(TaskFilter(owner=ALICE))


@pytest.mark.asyncio
async def test_invalid_document_raises_store_error(tmp_path):
    store_file = tmp_path / "tasks.json"
    store_file.write_text(json.dumps({"abc": {"title": "no owner"}}), encoding="utf-8")
    store = JsonFileTaskStore(store_file=str(store_file))

    with pytest.raises(StoreError):
        await store.get_by_id("abc")


@pytest.mark.asyncio
async def test_failed_save_keeps_previous_file(json_store, monkeypatch):
    manager = TaskManager(json_store)
    task = await manager.create_task(ALICE, make_fields(title="kept"))
    before = json_store.store_file.read_text(encoding="utf-8")

    def disk_full(obj, f, **kwargs):
        f.write('{"partial": ')
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(json, "dump", disk_full)
    with pytest.raises(StoreError):
        await manager.create_task(ALICE, make_fields(title="lost"))
    monkeypatch.undo()

    assert json_store.store_file.read_text(encoding="utf-8") == before
    assert [p.name for p in json_store.store_file.parent.iterdir()] == [json_store.store_file.name]
    stored = await json_store.find(TaskFilter(owner=ALICE))
    assert [t.id for t in stored] == [task.id]
