"""
Task model
"""

from enum import Enum
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class TaskStatus(str, Enum):
    """Task lifecycle status"""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(str, Enum):
    """Task priority"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskCategory(str, Enum):
    """Task category"""
    WORK = "work"
    PERSONAL = "personal"
    SHOPPING = "shopping"
    HEALTH = "health"
    EDUCATION = "education"
    OTHER = "other"


class Task(BaseModel):
    """Task model"""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, validate_default=True)

    id: str
    owner: str
    title: str
    description: str
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    category: TaskCategory = TaskCategory.OTHER
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    completed_at: Optional[datetime] = Field(None, alias="completedAt")

    def to_document(self) -> dict:
        """Task as a store document (alias keys, native datetimes)"""
        return self.model_dump(by_alias=True)

    def to_json(self) -> dict:
        """Task as a JSON-ready dict (alias keys, ISO 8601 datetimes)"""
        return self.model_dump(by_alias=True, mode="json")
