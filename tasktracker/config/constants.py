"""
Application constants
"""

# Task field values
TASK_STATUSES = ("pending", "in-progress", "completed", "cancelled")
TASK_PRIORITIES = ("low", "medium", "high", "urgent")
TASK_CATEGORIES = ("work", "personal", "shopping", "health", "education", "other")

# Statuses that never count as overdue or due today
TASK_CLOSED_STATUSES = ("completed", "cancelled")

# Task defaults
TASK_DEFAULT_STATUS = "pending"
TASK_DEFAULT_PRIORITY = "medium"
TASK_DEFAULT_CATEGORY = "other"

# Field limits
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

# Task identifiers: 12 bytes rendered as hex
TASK_ID_PATTERN = r"^[0-9a-fA-F]{24}$"

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100

# Sorting
DEFAULT_SORT_BY = "createdAt"
DEFAULT_SORT_ORDER = "desc"

# Search
SEARCH_STRIP_CHARS = "<>"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
