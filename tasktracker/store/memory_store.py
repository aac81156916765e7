"""
In-memory task store
"""

from typing import Dict, Any
from tasktracker.store.base_store import TaskStore


class InMemoryTaskStore(TaskStore):
    """Task store keeping documents in a process-local dict"""

    def __init__(self):
        super().__init__()
        self._documents: Dict[str, Dict[str, Any]] = {}

    def _load_documents(self) -> Dict[str, Dict[str, Any]]:
        return self._documents

    def _save_documents(self, documents: Dict[str, Dict[str, Any]]) -> None:
        self._documents = documents
