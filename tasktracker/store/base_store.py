"""
Base task store with common functionality
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Optional, Dict, List, Any, Iterable
from tasktracker.models.task import Task
from tasktracker.models.query import TaskFilter
from tasktracker.utils.logger import logger


class TaskStore(ABC):
    """
    Base class for task stores

    Subclasses provide document access (`_load_documents` / `_save_documents`);
    filtering, sorting and grouping are shared. Every public operation touches
    the documents without yielding to the event loop, so each call is atomic
    with respect to other coroutines.
    """

    def __init__(self):
        self.logger = logger

    @abstractmethod
    def _load_documents(self) -> Dict[str, Dict[str, Any]]:
        """Return all documents keyed by task id, in insertion order"""

    @abstractmethod
    def _save_documents(self, documents: Dict[str, Dict[str, Any]]) -> None:
        """Persist all documents"""

    async def insert(self, task: Task) -> Task:
        """Insert one task"""
        documents = self._load_documents()
        documents[task.id] = task.to_document()
        self._save_documents(documents)
        self.logger.debug(f"Inserted task {task.id}")
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """Fetch one task by id regardless of owner"""
        document = self._load_documents().get(task_id)
        return Task.model_validate(document) if document else None

    async def find_one(self, task_filter: TaskFilter) -> Optional[Task]:
        """Fetch the first task matching the filter"""
        for document in self._matching(task_filter):
            return Task.model_validate(document)
        return None

    async def update(self, task_id: str, fields: Dict[str, Any]) -> Optional[Task]:
        """
        Apply a partial update to one task

        Args:
            task_id: Task ID
            fields: Alias-keyed fields to overwrite

        Returns:
            Updated task, or None if no task has this id
        """
        documents = self._load_documents()
        document = documents.get(task_id)
        if document is None:
            return None

        updated = Task.model_validate({**document, **fields})
        documents[task_id] = updated.to_document()
        self._save_documents(documents)
        self.logger.debug(f"Updated task {task_id}: {sorted(fields)}")
        return updated

    async def delete(self, task_id: str) -> bool:
        """Remove one task; returns False if it did not exist"""
        documents = self._load_documents()
        if task_id not in documents:
            return False
        del documents[task_id]
        self._save_documents(documents)
        self.logger.debug(f"Deleted task {task_id}")
        return True

    async def find(
        self,
        task_filter: TaskFilter,
        sort_by: str = "createdAt",
        descending: bool = True,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Task]:
        """
        List tasks matching the filter

        Tasks missing the sort key order before any value when ascending
        and after every value when descending; ties keep insertion order.
        """
        matching = list(self._matching(task_filter))
        present = [d for d in matching if d.get(sort_by) is not None]
        missing = [d for d in matching if d.get(sort_by) is None]

        present.sort(key=lambda d: _sort_value(d[sort_by]), reverse=descending)
        ordered = present + missing if descending else missing + present

        end = skip + limit if limit is not None else None
        return [Task.model_validate(d) for d in ordered[skip:end]]

    async def count(self, task_filter: TaskFilter) -> int:
        """Count tasks matching the filter"""
        return sum(1 for _ in self._matching(task_filter))

    async def count_by(self, task_filter: TaskFilter, field: str) -> Dict[str, int]:
        """Count matching tasks grouped by the value of one field"""
        counter = Counter(d.get(field) for d in self._matching(task_filter))
        return dict(counter)

    def _matching(self, task_filter: TaskFilter) -> Iterable[Dict[str, Any]]:
        return (d for d in self._load_documents().values() if task_filter.matches(d))


def _sort_value(value: Any) -> Any:
    # lists (tags) compare element-wise
    if isinstance(value, list):
        return tuple(value)
    return value
