"""
Field validators for task submissions

Every validator takes one raw value and either returns None or raises
ValidationError naming the field.
"""

import re
from datetime import date
from typing import Any, Callable, Dict, List, Mapping
from tasktracker.config.constants import (
    TASK_STATUSES,
    TASK_PRIORITIES,
    TASK_CATEGORIES,
    TITLE_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    TASK_ID_PATTERN,
)
from tasktracker.models.response import FieldError
from tasktracker.utils.date_utils import parse_datetime
from tasktracker.utils.error_handler import ValidationError, InvalidIdError

_TASK_ID_RE = re.compile(TASK_ID_PATTERN)


def _validate_text(field: str, value: Any, max_length: int, label: str) -> None:
    message = f"{label} must be between 1 and {max_length} characters"
    if value is None:
        raise ValidationError(field, f"{label} is required")
    if not isinstance(value, str):
        raise ValidationError(field, message)
    trimmed = value.strip()
    if not trimmed or len(trimmed) > max_length:
        raise ValidationError(field, message)


def validate_title(value: Any) -> None:
    _validate_text("title", value, TITLE_MAX_LENGTH, "Title")


def validate_description(value: Any) -> None:
    _validate_text("description", value, DESCRIPTION_MAX_LENGTH, "Description")


def _validate_choice(field: str, value: Any, choices: tuple) -> None:
    if value is None:
        return
    if value not in choices:
        raise ValidationError(field, f"Invalid {field} value")


def validate_status(value: Any) -> None:
    _validate_choice("status", value, TASK_STATUSES)


def validate_priority(value: Any) -> None:
    _validate_choice("priority", value, TASK_PRIORITIES)


def validate_category(value: Any) -> None:
    _validate_choice("category", value, TASK_CATEGORIES)


def validate_due_date(value: Any) -> None:
    """Due date is optional; when present it must be a calendar timestamp"""
    if value is None or value == "":
        return
    if isinstance(value, date):
        return
    try:
        parse_datetime(value)
    except (TypeError, ValueError):
        raise ValidationError("dueDate", "Invalid date format")


def validate_tags(value: Any) -> None:
    if value is None:
        return
    if not isinstance(value, (list, tuple)):
        raise ValidationError("tags", "Tags must be an array")
    if any(not isinstance(tag, str) for tag in value):
        raise ValidationError("tags", "Each tag must be a string")


def validate_task_id(task_id: Any) -> None:
    """Reject identifiers that cannot name a stored task"""
    if not isinstance(task_id, str) or not _TASK_ID_RE.match(task_id):
        raise InvalidIdError(task_id)


# Order here is the order errors are reported in
FIELD_VALIDATORS: Dict[str, Callable[[Any], None]] = {
    "title": validate_title,
    "description": validate_description,
    "status": validate_status,
    "priority": validate_priority,
    "category": validate_category,
    "dueDate": validate_due_date,
    "tags": validate_tags,
}


def validate_task_fields(fields: Mapping[str, Any], partial: bool = False) -> List[FieldError]:
    """
    Collect every field error of one submission

    Args:
        fields: Raw submitted fields (alias keys)
        partial: Only check keys present in `fields` (update semantics)

    Returns:
        Ordered list of field errors, empty when the submission is valid
    """
    errors: List[FieldError] = []
    for field, validator in FIELD_VALIDATORS.items():
        if partial and field not in fields:
            continue
        try:
            validator(fields.get(field))
        except ValidationError as e:
            errors.extend(e.errors)
    return errors


def ensure_valid_task_fields(fields: Mapping[str, Any], partial: bool = False) -> None:
    """Raise one ValidationError carrying all field errors, if any"""
    errors = validate_task_fields(fields, partial=partial)
    if errors:
        raise ValidationError(errors=errors)
