"""Exception handling for the table admin service."""

from typing import Any, Dict, Optional


class TableAdminError(Exception):
    """Base exception for all table admin service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.status_code = status_code


from .api import BadRequestError, MissingKeyConditionError, NotFoundError
from .keys import (
    KeyCodecError,
    KeyFormatError,
    KeyTypeError,
    MissingKeyAttributeError,
)
from .storage import (
    ItemNotFoundError,
    StorageAccessError,
    StorageError,
    StorageGeneralError,
    StorageThrottledError,
    StorageValidationError,
    TableNotFoundError,
)

__all__ = [
    # Base
    "TableAdminError",
    # API Errors
    "BadRequestError",
    "NotFoundError",
    "MissingKeyConditionError",
    # Key Errors
    "KeyCodecError",
    "KeyFormatError",
    "KeyTypeError",
    "MissingKeyAttributeError",
    # Storage Errors
    "StorageError",
    "ItemNotFoundError",
    "StorageAccessError",
    "StorageGeneralError",
    "StorageThrottledError",
    "StorageValidationError",
    "TableNotFoundError",
]
