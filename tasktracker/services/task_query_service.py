"""
Task query service: paginated listing and single-task lookup
"""

import math
from typing import Any, Mapping, Optional
from tasktracker.models.task import Task
from tasktracker.models.query import TaskFilter, TaskQuery, TaskPage, PaginationInfo
from tasktracker.services.query_builder import build_task_query
from tasktracker.store.base_store import TaskStore
from tasktracker.utils.error_handler import NotFoundError
from tasktracker.utils.logger import logger
from tasktracker.utils.validators import validate_task_id


class TaskQueryService:
    """Read-only access to one user's tasks"""

    def __init__(self, store: TaskStore):
        """
        Initialize task query service

        Args:
            store: Task store
        """
        self.store = store
        self.logger = logger

    async def list_tasks(self, owner_id: str, query: TaskQuery) -> TaskPage:
        """
        Execute a normalized query and return one page of tasks

        The page and the total count come from two independent store
        reads over the same filter.

        Args:
            owner_id: Requesting user
            query: Normalized query from the query builder

        Returns:
            TaskPage with tasks and pagination metadata
        """
        if query.filter.owner != owner_id:
            query = query.model_copy(
                update={"filter": query.filter.model_copy(update={"owner": owner_id})}
            )

        tasks = await self.store.find(
            query.filter,
            sort_by=query.sort_by,
            descending=query.sort_descending,
            skip=query.skip,
            limit=query.limit,
        )
        total = await self.store.count(query.filter)

        total_pages = math.ceil(total / query.limit)
        pagination = PaginationInfo(
            current_page=query.page,
            total_pages=total_pages,
            total_items=total,
            has_next_page=query.page < total_pages,
            has_prev_page=query.page > 1,
            limit=query.limit,
        )

        self.logger.debug(
            f"[TaskQuery] owner={owner_id} page={query.page}/{total_pages} "
            f"returned {len(tasks)} of {total} tasks"
        )
        return TaskPage(tasks=tasks, pagination=pagination)

    async def search_tasks(
        self,
        owner_id: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> TaskPage:
        """Build a query from raw list parameters and execute it"""
        return await self.list_tasks(owner_id, build_task_query(owner_id, params))

    async def get_task(self, owner_id: str, task_id: str) -> Task:
        """
        Get one task owned by the caller

        Tasks owned by other users are reported exactly like missing ones.

        Raises:
            InvalidIdError: If task_id is malformed
            NotFoundError: If the caller owns no task with this id
        """
        validate_task_id(task_id)

        task = await self.store.find_one(TaskFilter(owner=owner_id, task_id=task_id))
        if task is None:
            raise NotFoundError(task_id)
        return task
