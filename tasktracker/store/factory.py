"""
Task store selection from settings
"""

from tasktracker.config.settings import settings
from tasktracker.store.base_store import TaskStore
from tasktracker.store.memory_store import InMemoryTaskStore
from tasktracker.store.json_store import JsonFileTaskStore
from tasktracker.utils.logger import logger


def create_store() -> TaskStore:
    """Build the task store configured by STORE_BACKEND"""
    settings.validate()

    if settings.STORE_BACKEND == "json":
        logger.info(f"Using JSON task store at {settings.STORE_FILE_PATH}")
        return JsonFileTaskStore(settings.STORE_FILE_PATH)

    logger.info("Using in-memory task store")
    return InMemoryTaskStore()
