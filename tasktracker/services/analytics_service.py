"""
Analytics service
"""

import asyncio
from tasktracker.config.constants import TASK_CLOSED_STATUSES
from tasktracker.models.query import TaskFilter
from tasktracker.models.response import TaskStats
from tasktracker.store.base_store import TaskStore
from tasktracker.utils.date_utils import get_current_datetime, start_of_day, end_of_day
from tasktracker.utils.logger import logger


class AnalyticsService:
    """Service for per-user task statistics"""

    def __init__(self, store: TaskStore):
        """
        Initialize analytics service

        Args:
            store: Task store
        """
        self.store = store
        self.logger = logger

    async def get_task_stats(self, owner_id: str) -> TaskStats:
        """
        Compute task statistics for one user

        Each figure comes from its own store read. The reads are not
        isolated from concurrent writes, so the grouped counts may not sum
        to `total` if a task changes while they run.

        Args:
            owner_id: Requesting user

        Returns:
            TaskStats with totals, grouped counts, overdue and due-today counts
        """
        now = get_current_datetime()
        owned = TaskFilter(owner=owner_id)
        overdue_filter = TaskFilter(
            owner=owner_id,
            due_before=now,
            status_not_in=TASK_CLOSED_STATUSES,
        )
        due_today_filter = TaskFilter(
            owner=owner_id,
            due_from=start_of_day(now),
            due_to=end_of_day(now),
            status_not_in=TASK_CLOSED_STATUSES,
        )

        by_status, by_priority, by_category, overdue, due_today, total = await asyncio.gather(
            self.store.count_by(owned, "status"),
            self.store.count_by(owned, "priority"),
            self.store.count_by(owned, "category"),
            self.store.count(overdue_filter),
            self.store.count(due_today_filter),
            self.store.count(owned),
        )

        stats = TaskStats(
            total=total,
            overdue=overdue,
            due_today=due_today,
            by_status=by_status,
            by_priority=by_priority,
            by_category=by_category,
        )
        self.logger.debug(f"[AnalyticsService] Stats for user {owner_id}: {stats.model_dump(by_alias=True)}")
        return stats
