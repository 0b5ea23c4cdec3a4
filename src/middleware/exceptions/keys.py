"""Primary key encoding and decoding exceptions."""

from typing import Any, Dict, Optional

from . import TableAdminError


class KeyCodecError(TableAdminError):
    """Base class for key extraction and parsing errors."""

    pass


class MissingKeyAttributeError(KeyCodecError):
    """An item lacks an attribute declared in the key schema."""

    def __init__(
        self,
        attribute_name: str,
        message: Optional[str] = None,
        code: str = "MISSING_KEY_ATTRIBUTE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message or f"Item is missing key attribute '{attribute_name}'",
            code=code,
            details={"attribute_name": attribute_name, **(details or {})},
            status_code=422,
        )
        self.attribute_name = attribute_name


class KeyFormatError(KeyCodecError):
    """An encoded key has the wrong number of components."""

    def __init__(
        self,
        message: str = "Malformed key",
        code: str = "KEY_FORMAT_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=400)


class KeyTypeError(KeyCodecError):
    """A key component cannot be coerced to its declared attribute type."""

    def __init__(
        self,
        message: str = "Key component has the wrong type",
        code: str = "KEY_TYPE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=400)
