"""
Pytest configuration and fixtures
"""

import pytest
from tasktracker.store.memory_store import InMemoryTaskStore
from tasktracker.store.json_store import JsonFileTaskStore
from tasktracker.services.task_manager import TaskManager
from tasktracker.services.task_query_service import TaskQueryService
from tasktracker.services.analytics_service import AnalyticsService

ALICE = "user_alice"
BOB = "user_bob"

# Well-formed id that no store ever holds
MISSING_TASK_ID = "0123456789abcdef01234567"


def make_fields(**overrides):
    """Valid create payload with optional overrides"""
    fields = {
        "title": "Test Task",
        "description": "Test description",
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def store():
    """Empty in-memory task store"""
    return InMemoryTaskStore()


@pytest.fixture
def json_store(tmp_path):
    """JSON task store with temporary file"""
    store_file = tmp_path / "test_tasks.json"
    return JsonFileTaskStore(store_file=str(store_file))


@pytest.fixture
def task_manager(store):
    """Task manager over the in-memory store"""
    return TaskManager(store)


@pytest.fixture
def query_service(store):
    """Task query service over the in-memory store"""
    return TaskQueryService(store)


@pytest.fixture
def analytics_service(store):
    """Analytics service over the in-memory store"""
    return AnalyticsService(store)
