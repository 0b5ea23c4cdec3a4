"""Key codec, expression building and pagination for scans and queries."""

from .expressions import ExpressionFragments, build_expressions
from .keys import (
    cursor_key_schema,
    encode_key,
    extract_key,
    extract_keys_for_items,
    parse_key,
)
from .page_assembler import get_page
from .paginator import DEFAULT_MAX_CALLS, paginate

__all__ = [
    "DEFAULT_MAX_CALLS",
    "ExpressionFragments",
    "build_expressions",
    "cursor_key_schema",
    "encode_key",
    "extract_key",
    "extract_keys_for_items",
    "get_page",
    "paginate",
    "parse_key",
]
