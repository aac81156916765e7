"""
Query models: store filters, normalized list queries and result pages
"""

from typing import Optional, List, Tuple
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from tasktracker.config.constants import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from tasktracker.models.task import Task


class TaskFilter(BaseModel):
    """
    Predicate set understood by every task store

    All present predicates are AND-combined. `search` is a case-insensitive
    substring match OR-combined across title, description and tags.
    """

    owner: str
    task_id: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    category: Optional[str] = None
    status_not_in: Tuple[str, ...] = ()
    search: Optional[str] = None
    due_before: Optional[datetime] = None
    due_from: Optional[datetime] = None
    due_to: Optional[datetime] = None

    def matches(self, document: dict) -> bool:
        """Check whether a store document satisfies every predicate"""
        if document.get("owner") != self.owner:
            return False

        if self.task_id is not None and document.get("id") != self.task_id:
            return False

        for field in ("status", "priority", "category"):
            expected = getattr(self, field)
            if expected is not None and document.get(field) != expected:
                return False

        if self.status_not_in and document.get("status") in self.status_not_in:
            return False

        if self.search:
            needle = self.search.lower()
            haystack = [document.get("title") or "", document.get("description") or ""]
            haystack.extend(document.get("tags") or [])
            if not any(needle in str(value).lower() for value in haystack):
                return False

        if self.due_before or self.due_from or self.due_to:
            due_date = document.get("dueDate")
            if due_date is None:
                return False
            if self.due_before and not due_date < self.due_before:
                return False
            if self.due_from and not due_date >= self.due_from:
                return False
            if self.due_to and not due_date <= self.due_to:
                return False

        return True


class TaskQuery(BaseModel):
    """Normalized, bounded list query produced by the query builder"""

    filter: TaskFilter
    sort_by: str = "createdAt"
    sort_descending: bool = True
    page: int = Field(DEFAULT_PAGE, ge=1)
    limit: int = Field(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)

    @property
    def skip(self) -> int:
        """Number of matching tasks before the requested page"""
        return (self.page - 1) * self.limit


class PaginationInfo(BaseModel):
    """Pagination metadata for a task page"""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_items: int = Field(alias="totalItems")
    has_next_page: bool = Field(alias="hasNextPage")
    has_prev_page: bool = Field(alias="hasPrevPage")
    limit: int


class TaskPage(BaseModel):
    """One page of tasks plus pagination metadata"""

    tasks: List[Task] = Field(default_factory=list)
    pagination: PaginationInfo

    def to_json(self) -> dict:
        return {
            "tasks": [task.to_json() for task in self.tasks],
            "pagination": self.pagination.model_dump(by_alias=True),
        }
