"""Service that pages through a table with scans and queries."""

from typing import Any, Dict, List, Optional

from aws_lambda_powertools.logging import Logger

from ..config.app import AppConfig
from ..middleware.exceptions import MissingKeyConditionError, NotFoundError
from ..models.api import ItemsPageResponse, ItemsRequest, TableMetaResponse, TableResponse
from ..models.domain import (
    CompositeKey,
    IndexDescriptor,
    OperationType,
    ScanPage,
    TableDescription,
)
from ..query_engine import (
    build_expressions,
    cursor_key_schema,
    encode_key,
    extract_key,
    extract_keys_for_items,
    get_page,
    parse_key,
)
from ..repositories.table import TableStore
from ..utils.serialization import normalize_dynamodb_types


class ItemBrowserService:
    """Builds scan/query calls from a request and assembles one page of results."""

    def __init__(self, repository: TableStore, config: AppConfig, logger: Logger):
        """Initialize the item browser.

        Args:
            repository: Store to read from
            config: Application configuration (page size, call limit)
            logger: Logger instance
        """
        self.repository = repository
        self.config = config
        self.logger = logger

    @staticmethod
    def resolve_index(
        table: TableDescription, index_name: Optional[str]
    ) -> Optional[IndexDescriptor]:
        """Secondary index a read targets, None for the table itself.

        Raises:
            NotFoundError: If the table has no index with that name
        """
        if index_name is None:
            return None
        index = table.find_index(index_name)
        if index is None:
            raise NotFoundError(
                f"Index {index_name} not found on table {table.table_name}",
                code="INDEX_NOT_FOUND",
                details={"table_name": table.table_name, "index_name": index_name},
            )
        return index

    @staticmethod
    def unique_keys(table: TableDescription, items: List[Dict[str, Any]]) -> List[str]:
        """Column order for a page: primary key attributes first."""
        primary = table.key_attribute_names
        return [
            *primary,
            *(name for name in extract_keys_for_items(items) if name not in primary),
        ]

    def browse(self, table_name: str, request: ItemsRequest) -> ItemsPageResponse:
        """Return one page of a scan or query.

        Args:
            table_name: Table to read
            request: Operation, index, filters and cursor

        Returns:
            ItemsPageResponse for the page

        Raises:
            NotFoundError: If the selected index does not exist
            MissingKeyConditionError: If a query has no condition on the index key
            KeyFormatError, KeyTypeError: If the cursor is malformed
            StorageError: If a store call fails
        """
        table = self.repository.describe_table(table_name)
        read_index = self.resolve_index(table, request.index_name)

        active_index = None
        if request.operation_type == OperationType.QUERY:
            active_index = read_index or table.as_index()

        fragments = build_expressions(request.filters, active_index)
        if active_index is not None and not fragments.key_condition_expression:
            raise MissingKeyConditionError(request.index_name)

        cursor_schema = cursor_key_schema(table, read_index)
        start_key = (
            parse_key(request.start_key, table, read_index)
            if request.start_key
            else None
        )

        params: Dict[str, Any] = {"TableName": table_name, **fragments.to_params()}
        if read_index is not None:
            params["IndexName"] = read_index.index_name

        def issue_call(exclusive_start_key: Optional[CompositeKey]) -> ScanPage:
            call_params = dict(params)
            if exclusive_start_key:
                call_params["ExclusiveStartKey"] = exclusive_start_key
            return self.repository.scan_or_query(call_params, request.operation_type)

        self.logger.info(
            "Browsing table",
            extra={
                "table": table_name,
                "operation": request.operation_type.value,
                "index": request.index_name,
                "page_num": request.page_num,
            },
        )

        page = get_page(
            issue_call,
            cursor_schema,
            self.config.page_size,
            start_key,
            self.config.max_page_calls,
        )

        next_key = None
        if page.next_key:
            next_key = encode_key(extract_key(page.next_key, cursor_schema))

        return ItemsPageResponse(
            table_name=table_name,
            page_num=request.page_num,
            items=normalize_dynamodb_types(page.items),
            item_keys=[
                encode_key(extract_key(item, table.key_schema)) for item in page.items
            ],
            unique_keys=self.unique_keys(table, page.items),
            start_key=request.start_key,
            prev_key=request.prev_key,
            next_key=next_key,
            truncated=page.truncated,
        )

    def table_meta(self, table_name: str) -> TableMetaResponse:
        """Describe a table and show the items of a single scan call."""
        table = self.repository.describe_table(table_name)
        first = self.repository.scan_or_query(
            {"TableName": table_name}, OperationType.SCAN
        )
        return TableMetaResponse(
            table=TableResponse.from_domain(table),
            items=normalize_dynamodb_types(first.items),
            count=len(first.items),
            has_more=first.last_evaluated_key is not None,
        )
