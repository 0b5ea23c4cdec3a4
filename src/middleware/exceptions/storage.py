"""Storage-related exceptions."""

from typing import Any, Dict, Optional

from . import TableAdminError


class StorageError(TableAdminError):
    """Base class for storage-related errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(
            message=message,
            code=code,
            details=details,
            status_code=status_code,
        )


class StorageGeneralError(StorageError):
    """General error for storage operations."""

    def __init__(
        self,
        message: str = "Storage operation failed",
        code: str = "STORAGE_GENERAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class TableNotFoundError(StorageError):
    """Error when the requested table or index does not exist."""

    def __init__(
        self,
        table_name: str,
        message: str = "Table not found",
        code: str = "TABLE_NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"table_name": table_name, **(details or {})},
            status_code=404,
        )


class ItemNotFoundError(StorageError):
    """Error when an item is not found in a table."""

    def __init__(
        self,
        table_name: str,
        key: Dict[str, Any],
        message: str = "Item not found",
        code: str = "ITEM_NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={
                "table_name": table_name,
                "key": {name: str(value) for name, value in key.items()},
                **(details or {}),
            },
            status_code=404,
        )


class StorageAccessError(StorageError):
    """Error when there are issues accessing storage (credentials, permissions)."""

    def __init__(
        self,
        message: str = "Storage access error",
        code: str = "STORAGE_ACCESS_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details, status_code=403)


class StorageValidationError(StorageError):
    """Error when the store rejects a request as invalid."""

    def __init__(
        self,
        message: str = "Storage validation error",
        code: str = "STORAGE_VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details, status_code=400)


class StorageThrottledError(StorageError):
    """Raised when the store throttles or is temporarily unavailable."""

    def __init__(
        self,
        message: str = "Storage is throttling requests",
        code: str = "STORAGE_THROTTLED",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code, details, status_code=503)
