"""Domain models for the table admin service."""

from .enums import AttributeType, ComparisonOperator, KeyType, OperationType
from .filters import FilterCondition, FilterSpec, FilterValue
from .page import CompositeKey, Item, Page, PaginationResult, ScanPage
from .schema import (
    AttributeDefinition,
    IndexDescriptor,
    KeySchemaElement,
    TableDescription,
    order_key_schema,
)

__all__ = [
    "AttributeDefinition",
    "AttributeType",
    "ComparisonOperator",
    "CompositeKey",
    "FilterCondition",
    "FilterSpec",
    "FilterValue",
    "IndexDescriptor",
    "Item",
    "KeySchemaElement",
    "KeyType",
    "OperationType",
    "Page",
    "PaginationResult",
    "ScanPage",
    "TableDescription",
    "order_key_schema",
]
