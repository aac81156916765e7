"""
Query builder: loosely-typed list parameters to a normalized task query
"""

import math
import re
from typing import Any, Mapping, Optional, Tuple
from tasktracker.config.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    SEARCH_STRIP_CHARS,
)
from tasktracker.models.query import TaskFilter, TaskQuery

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def sanitize_search_query(query: Any) -> str:
    """
    Sanitize free-text search input

    Strips `<` and `>` and surrounding whitespace.

    Examples:
    - "  milk " → "milk"
    - "<script>milk" → "scriptmilk"

    Args:
        query: Raw search value

    Returns:
        Sanitized search text (possibly empty)
    """
    if not query:
        return ""
    text = str(query).strip()
    for char in SEARCH_STRIP_CHARS:
        text = text.replace(char, "")
    return text


def _parse_int(value: Any) -> Optional[int]:
    """Leading integer of a value ("3abc" → 3, "2.9" → 2), or None"""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else None


def validate_pagination(page: Any, limit: Any) -> Tuple[int, int]:
    """
    Coerce and clamp pagination parameters

    Args:
        page: Raw 1-based page number
        limit: Raw page size

    Returns:
        (page, limit) with page >= 1 and 1 <= limit <= MAX_PAGE_LIMIT
    """
    page_num = _parse_int(page)
    limit_num = _parse_int(limit)

    if page_num is None:
        page_num = DEFAULT_PAGE
    if limit_num is None:
        limit_num = DEFAULT_PAGE_LIMIT

    return max(1, page_num), min(MAX_PAGE_LIMIT, max(1, limit_num))


def _param(params: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if name in params:
            return params[name]
    return None


def _exact(value: Any) -> Optional[str]:
    # empty values mean "no filter"
    if value is None or value == "":
        return None
    return str(value)


def build_task_query(owner_id: str, params: Optional[Mapping[str, Any]] = None) -> TaskQuery:
    """
    Translate list parameters into a normalized task query

    The owner filter is always applied. Invalid pagination values are
    clamped or defaulted; this function never raises.

    Args:
        owner_id: Requesting user
        params: Raw parameters (status, priority, category, search, page,
            limit, sortBy, sortOrder)

    Returns:
        TaskQuery ready for execution
    """
    params = params or {}

    search = sanitize_search_query(params.get("search"))
    task_filter = TaskFilter(
        owner=owner_id,
        status=_exact(params.get("status")),
        priority=_exact(params.get("priority")),
        category=_exact(params.get("category")),
        search=search or None,
    )

    page, limit = validate_pagination(
        params.get("page", DEFAULT_PAGE),
        params.get("limit", DEFAULT_PAGE_LIMIT),
    )

    sort_by = _param(params, "sortBy", "sort_by") or DEFAULT_SORT_BY
    sort_order = _param(params, "sortOrder", "sort_order")
    if sort_order is None:
        sort_order = DEFAULT_SORT_ORDER

    return TaskQuery(
        filter=task_filter,
        sort_by=str(sort_by),
        sort_descending=sort_order == "desc",
        page=page,
        limit=limit,
    )
