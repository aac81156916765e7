"""
HTTP interface tests
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from tasktracker.store.memory_store import InMemoryTaskStore
from tasktracker.utils.error_handler import StoreError
from tasktracker.web.main import create_app, TaskTracker
from conftest import ALICE, BOB, MISSING_TASK_ID, make_fields

pytestmark = pytest.mark.integration


@pytest.fixture
def tracker():
    return TaskTracker(InMemoryTaskStore())


@pytest.fixture
def client(tracker):
    return TestClient(create_app(tracker))


def _headers(user_id):
    return {"X-User-Id": user_id}


def _create(client, user_id=ALICE, **overrides):
    response = client.post("/api/tasks", json=make_fields(**overrides), headers=_headers(user_id))
    assert response.status_code == 201
    return response.json()["task"]


def test_health_check(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] is True


def test_missing_user_is_rejected(client):
    response = client.get("/api/tasks")

    assert response.status_code == 401
    assert response.json() == {"status": False, "msg": "Authentication required"}


def test_create_and_get_task(client):
    task = _create(client, title="Buy milk", tags=["  ", "home"])

    assert task["title"] == "Buy milk"
    assert task["tags"] == ["home"]
    assert task["owner"] == ALICE
    assert task["completedAt"] is None

    response = client.get(f"/api/tasks/{task['id']}", headers=_headers(ALICE))
    assert response.status_code == 200
    assert response.json()["task"]["id"] == task["id"]


def test_create_validation_error_lists_all_fields(client):
    response = client.post(
        "/api/tasks",
        json={"title": "", "status": "nope"},
        headers=_headers(ALICE),
    )

    assert response.status_code == 400
    body = response.json()
    assert body["status"] is False
    assert body["msg"] == "Validation failed"
    assert [e["field"] for e in body["errors"]] == ["title", "description", "status"]


def test_create_rejects_non_object_body(client):
    response = client.post("/api/tasks", json=["title"], headers=_headers(ALICE))

    assert response.status_code == 400


def test_list_tasks_with_pagination(client):
    for i in range(12):
        _create(client, title=f"Task {i}")
    _create(client, user_id=BOB, title="Bob task")

    response = client.get("/api/tasks?page=2&limit=5", headers=_headers(ALICE))

    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["tasks"]) == 5
    assert data["pagination"] == {
        "currentPage": 2,
        "totalPages": 3,
        "totalItems": 12,
        "hasNextPage": True,
        "hasPrevPage": True,
        "limit": 5,
    }
    assert all(task["owner"] == ALICE for task in data["tasks"])


def test_list_tasks_search(client):
    _create(client, title="Buy milk", description="2% milk")
    _create(client, title="Call mom")

    response = client.get("/api/tasks", params={"search": "milk"}, headers=_headers(ALICE))

    titles = [t["title"] for t in response.json()["data"]["tasks"]]
    assert titles == ["Buy milk"]


def test_update_and_delete_errors(client):
    task = _create(client)

    response = client.put(f"/api/tasks/{task['id']}", json={"title": "x"}, headers=_headers(BOB))
    assert response.status_code == 403

    response = client.put(f"/api/tasks/{MISSING_TASK_ID}", json={"title": "x"}, headers=_headers(ALICE))
    assert response.status_code == 404

    response = client.put("/api/tasks/not-an-id", json={"title": "x"}, headers=_headers(ALICE))
    assert response.status_code == 400
    assert response.json()["msg"] == "Invalid task ID format"

    response = client.delete(f"/api/tasks/{task['id']}", headers=_headers(BOB))
    assert response.status_code == 403

    response = client.get(f"/api/tasks/{task['id']}", headers=_headers(BOB))
    assert response.status_code == 404


def test_update_status_and_delete(client):
    task = _create(client)

    response = client.put(
        f"/api/tasks/{task['id']}",
        json={"status": "completed"},
        headers=_headers(ALICE),
    )
    assert response.status_code == 200
    assert response.json()["task"]["completedAt"] is not None

    response = client.delete(f"/api/tasks/{task['id']}", headers=_headers(ALICE))
    assert response.status_code == 200
    assert response.json() == {"status": True, "msg": "Task deleted successfully"}

    response = client.delete(f"/api/tasks/{task['id']}", headers=_headers(ALICE))
    assert response.status_code == 404


def test_stats(client):
    _create(client, priority="high")
    _create(client, category="work")

    response = client.get("/api/tasks/stats", headers=_headers(ALICE))

    assert response.status_code == 200
    stats = response.json()["stats"]
    assert stats["total"] == 2
    assert stats["byPriority"] == {"high": 1, "medium": 1}
    assert stats["byCategory"] == {"other": 1, "work": 1}


def test_store_error_is_reported_generically():
    store = AsyncMock()
    store.find.side_effect = StoreError("connection refused")
    client = TestClient(create_app(TaskTracker(store)))

    response = client.get("/api/tasks", headers=_headers(ALICE))

    assert response.status_code == 500
    assert response.json() == {"status": False, "msg": "Internal Server Error"}
