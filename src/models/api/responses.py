"""Response models for API endpoints."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..domain import AttributeType, ComparisonOperator, TableDescription


class VersionResponse(BaseModel):
    """Response containing the API version.

    Attributes:
        version: The version string
    """

    version: str


class TableListResponse(BaseModel):
    """Response for GET /tables."""

    tables: List[str]


class KeyAttribute(BaseModel):
    """A key attribute with its role and declared type."""

    attribute_name: str
    key_type: str
    attribute_type: str


class IndexSummary(BaseModel):
    """A secondary index and its key attributes."""

    index_name: str
    key_schema: List[KeyAttribute]
    projection_type: str


class TableResponse(BaseModel):
    """Response for GET /tables/{table}.

    Carries what a client needs to build a scan/query form: key attributes,
    queryable indexes and the operator and attribute type choices.
    """

    table_name: str
    key_schema: List[KeyAttribute]
    indexes: List[IndexSummary] = Field(default_factory=list)
    item_count: Optional[int] = None
    table_size_bytes: Optional[int] = None
    table_status: Optional[str] = None
    operators: Dict[str, str] = Field(
        default_factory=lambda: {op.value: op.label for op in ComparisonOperator}
    )
    attribute_types: Dict[str, str] = Field(
        default_factory=lambda: {
            AttributeType.STRING.value: AttributeType.STRING.label,
            AttributeType.NUMBER.value: AttributeType.NUMBER.label,
        }
    )

    @classmethod
    def from_domain(cls, table: TableDescription) -> "TableResponse":
        def key_attributes(key_schema) -> List[KeyAttribute]:
            return [
                KeyAttribute(
                    attribute_name=element.attribute_name,
                    key_type=element.key_type.value,
                    attribute_type=table.attribute_type(element.attribute_name).value,
                )
                for element in key_schema
            ]

        return cls(
            table_name=table.table_name,
            key_schema=key_attributes(table.key_schema),
            indexes=[
                IndexSummary(
                    index_name=index.index_name,
                    key_schema=key_attributes(index.key_schema),
                    projection_type=index.projection_type,
                )
                for index in table.secondary_indexes
            ],
            item_count=table.item_count,
            table_size_bytes=table.table_size_bytes,
            table_status=table.table_status,
        )


class TableKeysResponse(BaseModel):
    """Response for GET /tables/{table}/get without a key: the key form fields."""

    table_name: str
    hash_key: KeyAttribute
    range_key: Optional[KeyAttribute] = None


class ItemsPageResponse(BaseModel):
    """Response for GET /tables/{table}/items.

    Attributes:
        table_name: Table browsed
        page_num: 1-based page number
        items: Items of this page, numbers as int/float
        item_keys: Encoded primary key of each item, in the same order
        unique_keys: Primary key attributes, then every other attribute seen
        start_key: Cursor this page started after
        prev_key: Cursor of the previous page, as supplied by the caller
        next_key: Cursor of the next page, None on the last page
        truncated: The page was cut short by the call limit; more items may follow
    """

    table_name: str
    page_num: int
    items: List[Dict[str, Any]]
    item_keys: List[str]
    unique_keys: List[str]
    start_key: Optional[str] = None
    prev_key: Optional[str] = None
    next_key: Optional[str] = None
    truncated: bool = False


class TableMetaResponse(BaseModel):
    """Response for GET /tables/{table}/meta."""

    table: TableResponse
    items: List[Dict[str, Any]]
    count: int
    has_more: bool


class ItemKeyResponse(BaseModel):
    """Response for PUT /tables/{table}/add-item."""

    key: Dict[str, Any]
    encoded_key: str
