from enum import Enum
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator
from pydantic import BaseModel, ValidationError

from .api import APIErrorResponse
from .exceptions import (
    BadRequestError,
    ItemNotFoundError,
    KeyFormatError,
    KeyTypeError,
    MissingKeyAttributeError,
    MissingKeyConditionError,
    NotFoundError,
    StorageAccessError,
    StorageError,
    StorageThrottledError,
    StorageValidationError,
    TableAdminError,
    TableNotFoundError,
)

logger = Logger()


class ErrorCode(Enum):
    # Validation errors
    VALIDATION_INVALID_INPUT = "VALIDATION_INVALID_INPUT"

    # API errors
    BAD_REQUEST = "BAD_REQUEST"
    MISSING_KEY_CONDITION = "MISSING_KEY_CONDITION"
    NOT_FOUND = "NOT_FOUND"

    # Key errors
    MISSING_KEY_ATTRIBUTE = "MISSING_KEY_ATTRIBUTE"
    KEY_FORMAT_ERROR = "KEY_FORMAT_ERROR"
    KEY_TYPE_ERROR = "KEY_TYPE_ERROR"

    # Storage errors
    STORAGE_ERROR = "STORAGE_ERROR"
    STORAGE_ACCESS_ERROR = "STORAGE_ACCESS_ERROR"
    STORAGE_VALIDATION_ERROR = "STORAGE_VALIDATION_ERROR"
    STORAGE_THROTTLED = "STORAGE_THROTTLED"
    TABLE_NOT_FOUND = "TABLE_NOT_FOUND"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"

    # System errors
    SYSTEM_INTERNAL_ERROR = "SYSTEM_INTERNAL_ERROR"

    @property
    def default_message(self) -> str:
        messages: Dict["ErrorCode", str] = {
            ErrorCode.VALIDATION_INVALID_INPUT: "Invalid input",
            ErrorCode.BAD_REQUEST: "Bad request",
            ErrorCode.MISSING_KEY_CONDITION: "Query requires a key condition",
            ErrorCode.NOT_FOUND: "Resource not found",
            ErrorCode.MISSING_KEY_ATTRIBUTE: "Item is missing a key attribute",
            ErrorCode.KEY_FORMAT_ERROR: "Malformed key",
            ErrorCode.KEY_TYPE_ERROR: "Key component has the wrong type",
            ErrorCode.STORAGE_ERROR: "Storage operation failed",
            ErrorCode.STORAGE_ACCESS_ERROR: "Storage access denied",
            ErrorCode.STORAGE_VALIDATION_ERROR: "Storage rejected the request",
            ErrorCode.STORAGE_THROTTLED: "Storage is throttling requests",
            ErrorCode.TABLE_NOT_FOUND: "Table not found",
            ErrorCode.ITEM_NOT_FOUND: "Item not found",
            ErrorCode.SYSTEM_INTERNAL_ERROR: "An unexpected error occurred",
        }
        return messages[self]

    @classmethod
    def from_exception(cls, e: Exception) -> "ErrorCode":
        """Map exceptions to error codes, most specific class first."""
        mappings: List[Tuple[type, "ErrorCode"]] = [
            (ValidationError, ErrorCode.VALIDATION_INVALID_INPUT),
            (MissingKeyConditionError, ErrorCode.MISSING_KEY_CONDITION),
            (BadRequestError, ErrorCode.BAD_REQUEST),
            (NotFoundError, ErrorCode.NOT_FOUND),
            (MissingKeyAttributeError, ErrorCode.MISSING_KEY_ATTRIBUTE),
            (KeyFormatError, ErrorCode.KEY_FORMAT_ERROR),
            (KeyTypeError, ErrorCode.KEY_TYPE_ERROR),
            (TableNotFoundError, ErrorCode.TABLE_NOT_FOUND),
            (ItemNotFoundError, ErrorCode.ITEM_NOT_FOUND),
            (StorageAccessError, ErrorCode.STORAGE_ACCESS_ERROR),
            (StorageValidationError, ErrorCode.STORAGE_VALIDATION_ERROR),
            (StorageThrottledError, ErrorCode.STORAGE_THROTTLED),
            (StorageError, ErrorCode.STORAGE_ERROR),
        ]
        for exception_type, code in mappings:
            if isinstance(e, exception_type):
                return code
        return ErrorCode.SYSTEM_INTERNAL_ERROR


class ErrorResponse(BaseModel):
    message: str
    code: ErrorCode
    details: Optional[Dict[str, Any]] = None

    @classmethod
    def from_code(
        cls, code: ErrorCode, details: Optional[Dict[str, Any]] = None
    ) -> "ErrorResponse":
        return cls(message=code.default_message, code=code, details=details)

    @classmethod
    def from_exception(cls, e: Exception) -> "ErrorResponse":
        """Create an ErrorResponse from an exception."""
        code = ErrorCode.from_exception(e)
        message = str(e) if str(e) else code.default_message
        details = getattr(e, "details", None)

        return cls(message=message, code=code, details=details)


def create_error_response(
    status_code: HTTPStatus,
    error_response: ErrorResponse,
) -> Dict[str, Any]:
    """Helper to create standardized error responses with error codes."""
    api_error = APIErrorResponse(
        message=error_response.message,
        code=error_response.code.value,
        details=error_response.details,
    )

    return {
        "statusCode": status_code,
        "body": api_error.model_dump_json(),
        "headers": {"Content-Type": "application/json"},
    }


@lambda_handler_decorator
def error_handler_middleware(handler, event, context):
    """Middleware to handle exceptions and format error responses with error codes."""
    try:
        return handler(event, context)

    # --- TableAdminError exceptions (our custom exceptions) ---
    except TableAdminError as e:
        log_level = "warning" if e.status_code < 500 else "error"
        getattr(logger, log_level)(
            f"{e.__class__.__name__}: {str(e)}",
            extra={"code": e.code, "details": e.details},
        )

        error_response = ErrorResponse.from_exception(e)
        return create_error_response(HTTPStatus(e.status_code), error_response)

    # --- Input Validation Errors ---
    except ValidationError as e:
        logger.warning(f"Input validation failed: {e}", exc_info=True)
        error_response = ErrorResponse.from_code(
            ErrorCode.VALIDATION_INVALID_INPUT,
            details={"errors": str(e)},
        )
        return create_error_response(HTTPStatus.BAD_REQUEST, error_response)

    # --- Generic Fallback Error ---
    except Exception as e:
        logger.exception(f"Unhandled error: {e.__class__.__name__}: {str(e)}")
        error_response = ErrorResponse.from_code(
            ErrorCode.SYSTEM_INTERNAL_ERROR, details={"error": str(e)}
        )
        return create_error_response(HTTPStatus.INTERNAL_SERVER_ERROR, error_response)
