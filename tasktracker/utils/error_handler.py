"""
Error handling utilities
"""

from typing import Optional, List
from tasktracker.models.response import ErrorResponse, FieldError
from tasktracker.utils.logger import logger


class TaskTrackerError(Exception):
    """Base exception for task tracker errors"""

    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(TaskTrackerError):
    """Malformed or missing input; carries every field error of the submission"""

    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        field: Optional[str] = None,
        message: Optional[str] = None,
        errors: Optional[List[FieldError]] = None,
    ):
        if errors is None:
            errors = [FieldError(field=field or "", message=message or "Invalid value")]
        self.errors = errors
        self.field = errors[0].field if errors else field
        summary = message if message and len(errors) == 1 else "Validation failed"
        super().__init__(summary)


class InvalidIdError(TaskTrackerError):
    """Malformed task identifier"""

    error_code = "invalid_id"
    status_code = 400

    def __init__(self, task_id: object = None):
        self.task_id = task_id
        super().__init__("Invalid task ID format")


class NotFoundError(TaskTrackerError):
    """No such task for this caller"""

    error_code = "not_found"
    status_code = 404

    def __init__(self, task_id: Optional[str] = None):
        self.task_id = task_id
        super().__init__("Task not found")


class ForbiddenError(TaskTrackerError):
    """Task exists but belongs to another user"""

    error_code = "forbidden"
    status_code = 403

    def __init__(self, message: str = "Access denied. You can only modify your own tasks"):
        super().__init__(message)


class StoreError(TaskTrackerError):
    """Underlying task store is unavailable or failed"""

    error_code = "store_error"
    status_code = 500


def handle_error(error: Exception) -> ErrorResponse:
    """
    Handle error and return caller-facing response

    Domain errors keep their details; store failures and unexpected
    exceptions collapse into a generic message.

    Args:
        error: Exception to handle

    Returns:
        ErrorResponse describing the failure
    """
    if isinstance(error, ValidationError):
        return ErrorResponse(
            message="Validation failed",
            error_code=error.error_code,
            status_code=error.status_code,
            errors=error.errors,
        )

    if isinstance(error, TaskTrackerError) and not isinstance(error, StoreError):
        return ErrorResponse(
            message=error.message,
            error_code=error.error_code,
            status_code=error.status_code,
        )

    logger.error(f"Error occurred: {error}", exc_info=True)

    # Generic error message
    return ErrorResponse(
        message="Internal Server Error",
        error_code=StoreError.error_code if isinstance(error, StoreError) else "internal_error",
        status_code=500,
    )


def format_error_message(error: Exception) -> str:
    """
    Format error message for caller

    Args:
        error: Exception to format

    Returns:
        Caller-facing error message
    """
    error_response = handle_error(error)
    return error_response.message
