"""
Application exceptions
"""

from typing import Any, Optional


class VowSyncError(Exception):
    """Base error for the view-model and status services"""

    error_code = "vowsync_error"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidDateFormat(VowSyncError, ValueError):
    """Raised when a date value cannot be parsed"""

    error_code = "invalid_date_format"

    def __init__(self, value: Any, field: Optional[str] = None):
        label = f" for '{field}'" if field else ""
        super().__init__(f"Invalid date format{label}: {value!r}", details={"value": str(value), "field": field})
        self.value = value
        self.field = field
