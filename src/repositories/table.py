"""Repository interface for table data access operations."""

from typing import Any, Dict, List, Optional, Protocol

from ..models.domain import CompositeKey, Item, OperationType, ScanPage, TableDescription


class TableStore(Protocol):
    """Interface for the store operations the admin service needs."""

    def describe_table(self, table_name: str) -> TableDescription:
        """Describe a table's key schema, attribute types and indexes.

        Args:
            table_name: Name of the table.
        Returns:
            The TableDescription.
        Raises:
            TableNotFoundError: If the table does not exist.
            StorageError: If the call fails.
        """
        ...

    def list_tables(self) -> List[str]:
        """List table names.

        Raises:
            StorageError: If the call fails.
        """
        ...

    def scan_or_query(
        self, params: Dict[str, Any], operation_type: OperationType
    ) -> ScanPage:
        """Run a single scan or query call.

        Args:
            params: Call parameters: TableName, optional IndexName, expression
                fragments and an optional ExclusiveStartKey.
            operation_type: Whether to scan or query.
        Returns:
            The items of this call and the continuation token, if any.
        Raises:
            StorageError: If the call fails.
        """
        ...

    def get_item(self, table_name: str, key: CompositeKey) -> Optional[Item]:
        """Get an item by key, None if absent.

        Raises:
            StorageError: If the call fails.
        """
        ...

    def put_item(self, table_name: str, item: Item) -> None:
        """Store an item, replacing any item with the same key.

        Raises:
            StorageError: If the call fails.
        """
        ...

    def delete_item(self, table_name: str, key: CompositeKey) -> None:
        """Delete an item by key.

        Raises:
            StorageError: If the call fails.
        """
        ...
