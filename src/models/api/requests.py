"""Request models for API endpoints."""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain import FilterCondition, OperationType

TABLE_SELECTION = "table"


class ItemsRequest(BaseModel):
    """Query parameters for GET /tables/{table}/items.

    Handles the read operation, filtering and pagination.
    """

    model_config = ConfigDict(populate_by_name=True)

    operation_type: OperationType = Field(
        OperationType.SCAN,
        alias="operationType",
        description="scan or query",
    )
    queryable_selection: str = Field(
        TABLE_SELECTION,
        alias="queryableSelection",
        min_length=1,
        description="'table' or the name of the secondary index to query",
    )
    filters: Dict[str, FilterCondition] = Field(
        default_factory=dict,
        description="Conditions by attribute name, JSON encoded in the query string",
    )
    start_key: Optional[str] = Field(
        None, alias="startKey", description="Cursor of the page to show"
    )
    prev_key: Optional[str] = Field(
        None, alias="prevKey", description="Cursor of the previous page"
    )
    page_num: int = Field(1, alias="pageNum", ge=1, description="1-based page number")

    @field_validator("filters", mode="before")
    @classmethod
    def decode_filters(cls, value: Any) -> Any:
        if value is None or value == "":
            return {}
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(f"filters is not valid JSON: {e.msg}")
        if not isinstance(value, dict):
            raise ValueError("filters must be a JSON object")
        return value

    @property
    def index_name(self) -> Optional[str]:
        """Secondary index selected for the read, None for the table itself."""
        if self.queryable_selection == TABLE_SELECTION:
            return None
        return self.queryable_selection


class KeyLookupRequest(BaseModel):
    """Query parameters for GET /tables/{table}/get."""

    hash: Optional[str] = Field(None, description="Partition key value")
    range: Optional[str] = Field(None, description="Sort key value")
