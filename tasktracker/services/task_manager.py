"""
Task management service
"""

import uuid
from typing import Any, Dict, List, Mapping
from tasktracker.config.constants import (
    TASK_DEFAULT_STATUS,
    TASK_DEFAULT_PRIORITY,
    TASK_DEFAULT_CATEGORY,
)
from tasktracker.models.task import Task, TaskStatus
from tasktracker.store.base_store import TaskStore
from tasktracker.utils.date_utils import get_current_datetime, parse_datetime
from tasktracker.utils.error_handler import NotFoundError, ForbiddenError
from tasktracker.utils.logger import logger
from tasktracker.utils.validators import ensure_valid_task_fields, validate_task_id


def clean_tags(tags: Any) -> List[str]:
    """
    Trim tags and drop blank entries

    Duplicates are kept. Anything that is not a list yields no tags.

    Examples:
    - ["  ", "work", "work"] → ["work", "work"]
    - [" home "] → ["home"]
    """
    if not isinstance(tags, (list, tuple)):
        return []
    return [tag.strip() for tag in tags if isinstance(tag, str) and tag.strip()]


def new_task_id() -> str:
    """Random 24-character hex identifier"""
    return uuid.uuid4().hex[:24]


class TaskManager:
    """Service for creating, updating and deleting tasks"""

    def __init__(self, store: TaskStore):
        """
        Initialize task manager

        Args:
            store: Task store
        """
        self.store = store
        self.logger = logger

    async def create_task(self, owner_id: str, fields: Mapping[str, Any]) -> Task:
        """
        Create a task owned by the caller

        Status, priority and category fall back to their defaults. A task
        created with status "completed" gets no completedAt; only a status
        change through update_task stamps it.

        Args:
            owner_id: Requesting user (becomes the owner)
            fields: Raw submitted fields (alias keys)

        Returns:
            Created task

        Raises:
            ValidationError: If any field is invalid (all errors reported)
        """
        ensure_valid_task_fields(fields)

        now = get_current_datetime()
        task = Task(
            id=new_task_id(),
            owner=owner_id,
            title=fields["title"].strip(),
            description=fields["description"].strip(),
            status=fields.get("status") or TASK_DEFAULT_STATUS,
            priority=fields.get("priority") or TASK_DEFAULT_PRIORITY,
            category=fields.get("category") or TASK_DEFAULT_CATEGORY,
            due_date=parse_datetime(fields.get("dueDate")),
            tags=clean_tags(fields.get("tags")),
            created_at=now,
            updated_at=now,
        )

        created = await self.store.insert(task)
        self.logger.info(f"✓ Task '{created.title}' created for user {owner_id} (id: {created.id})")
        return created

    async def update_task(self, owner_id: str, task_id: str, fields: Mapping[str, Any]) -> Task:
        """
        Apply a partial update to a task owned by the caller

        Only keys present in `fields` are changed. An explicit empty dueDate
        clears it. Moving into "completed" stamps completedAt, moving out
        of it clears completedAt.

        Raises:
            InvalidIdError: If task_id is malformed
            ValidationError: If a present field is invalid
            NotFoundError: If no task has this id
            ForbiddenError: If the task belongs to another user
        """
        validate_task_id(task_id)
        ensure_valid_task_fields(fields, partial=True)

        task = await self._get_owned_task(owner_id, task_id, action="update")

        update_data = self._prepare_update(task, fields)
        updated = await self.store.update(task_id, update_data)
        if updated is None:
            # removed between the ownership check and the write
            raise NotFoundError(task_id)

        self.logger.info(f"✓ Task {task_id} updated by user {owner_id}: {sorted(update_data)}")
        return updated

    async def delete_task(self, owner_id: str, task_id: str) -> None:
        """
        Permanently delete a task owned by the caller

        Raises:
            InvalidIdError: If task_id is malformed
            NotFoundError: If no task has this id
            ForbiddenError: If the task belongs to another user
        """
        validate_task_id(task_id)

        await self._get_owned_task(owner_id, task_id, action="delete")

        if not await self.store.delete(task_id):
            raise NotFoundError(task_id)

        self.logger.info(f"✓ Task {task_id} deleted by user {owner_id}")

    async def _get_owned_task(self, owner_id: str, task_id: str, action: str) -> Task:
        """Existence check first, then ownership check"""
        task = await self.store.get_by_id(task_id)
        if task is None:
            raise NotFoundError(task_id)

        if task.owner != owner_id:
            self.logger.warning(
                f"[TaskManager] User {owner_id} attempted to {action} task {task_id} "
                f"owned by {task.owner}"
            )
            raise ForbiddenError(f"Access denied. You can only {action} your own tasks")

        return task

    def _prepare_update(self, task: Task, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Build the alias-keyed store update for the present fields"""
        update_data: Dict[str, Any] = {}

        if "title" in fields:
            update_data["title"] = fields["title"].strip()
        if "description" in fields:
            update_data["description"] = fields["description"].strip()
        for field in ("status", "priority", "category"):
            if fields.get(field) is not None:
                update_data[field] = fields[field]
        if "dueDate" in fields:
            update_data["dueDate"] = parse_datetime(fields["dueDate"])
        if "tags" in fields:
            update_data["tags"] = clean_tags(fields["tags"])

        new_status = update_data.get("status")
        if new_status is not None:
            was_completed = task.status == TaskStatus.COMPLETED.value
            if new_status == TaskStatus.COMPLETED.value and not was_completed:
                update_data["completedAt"] = get_current_datetime()
            elif new_status != TaskStatus.COMPLETED.value and was_completed:
                update_data["completedAt"] = None

        update_data["updatedAt"] = get_current_datetime()
        return update_data
