"""
Response models for service callers
"""

from typing import Optional, List, Dict
from pydantic import BaseModel, Field, ConfigDict


class FieldError(BaseModel):
    """One invalid field of a submission"""
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error response model"""
    message: str
    error_code: Optional[str] = None
    status_code: int = 500
    errors: List[FieldError] = Field(default_factory=list)

    def to_json(self) -> dict:
        body = {"status": False, "msg": self.message}
        if self.errors:
            body["errors"] = [error.model_dump() for error in self.errors]
        return body


class TaskStats(BaseModel):
    """Per-user task statistics"""

    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    overdue: int = 0
    due_today: int = Field(0, alias="dueToday")
    by_status: Dict[str, int] = Field(default_factory=dict, alias="byStatus")
    by_priority: Dict[str, int] = Field(default_factory=dict, alias="byPriority")
    by_category: Dict[str, int] = Field(default_factory=dict, alias="byCategory")
