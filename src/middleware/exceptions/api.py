"""API-related exceptions."""

from typing import Any, Dict, Optional

from . import TableAdminError


class APIError(TableAdminError):
    """Base class for API-related errors."""

    pass


class BadRequestError(APIError):
    """400 Bad Request errors."""

    def __init__(
        self,
        message: str = "Invalid request",
        code: str = "BAD_REQUEST",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=400)


class MissingKeyConditionError(BadRequestError):
    """A query was requested without any condition on the index key."""

    def __init__(
        self,
        index_name: Optional[str] = None,
        message: str = "Query requires a condition on the partition key",
        code: str = "MISSING_KEY_CONDITION",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"index_name": index_name or "table", **(details or {})},
        )


class NotFoundError(APIError):
    """404 Not Found errors."""

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=404)
