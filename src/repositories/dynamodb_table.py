"""DynamoDB implementation of the table repository.

Translates between raw boto3 responses and the domain models used by the
query engine and the handlers.
"""

from typing import Any, Dict, List, Optional

from ..clients.dynamodb import DynamoDBClient
from ..middleware.exceptions import StorageValidationError
from ..models.domain import (
    AttributeDefinition,
    CompositeKey,
    IndexDescriptor,
    Item,
    KeySchemaElement,
    OperationType,
    ScanPage,
    TableDescription,
    order_key_schema,
)


class DynamoDBTableRepository:
    """DynamoDB implementation of table repository operations."""

    def __init__(self, dynamodb_client: DynamoDBClient) -> None:
        """Initialize the repository with a DynamoDB client.

        Args:
            dynamodb_client: Client for DynamoDB operations
        """
        self.dynamodb_client = dynamodb_client

    @staticmethod
    def _deserialize_key_schema(raw: List[Dict[str, Any]]) -> List[KeySchemaElement]:
        return order_key_schema(
            [
                KeySchemaElement(
                    attribute_name=element["AttributeName"],
                    key_type=element["KeyType"],
                )
                for element in raw
            ]
        )

    def _deserialize_index(self, raw: Dict[str, Any]) -> IndexDescriptor:
        return IndexDescriptor(
            index_name=raw["IndexName"],
            key_schema=self._deserialize_key_schema(raw["KeySchema"]),
            projection_type=raw.get("Projection", {}).get("ProjectionType", "ALL"),
        )

    def _deserialize_table(self, raw: Dict[str, Any]) -> TableDescription:
        """Convert a DescribeTable "Table" payload to a TableDescription.

        Args:
            raw: The "Table" part of the DescribeTable response

        Returns:
            TableDescription domain object
        """
        return TableDescription(
            table_name=raw["TableName"],
            key_schema=self._deserialize_key_schema(raw["KeySchema"]),
            attribute_definitions=[
                AttributeDefinition(
                    attribute_name=definition["AttributeName"],
                    attribute_type=definition["AttributeType"],
                )
                for definition in raw.get("AttributeDefinitions", [])
            ],
            global_secondary_indexes=[
                self._deserialize_index(index)
                for index in raw.get("GlobalSecondaryIndexes", [])
            ],
            local_secondary_indexes=[
                self._deserialize_index(index)
                for index in raw.get("LocalSecondaryIndexes", [])
            ],
            item_count=raw.get("ItemCount"),
            table_size_bytes=raw.get("TableSizeBytes"),
            table_status=raw.get("TableStatus"),
        )

    def describe_table(self, table_name: str) -> TableDescription:
        raw = self.dynamodb_client.describe_table(table_name)
        return self._deserialize_table(raw)

    def list_tables(self) -> List[str]:
        return self.dynamodb_client.list_tables()

    def scan_or_query(
        self, params: Dict[str, Any], operation_type: OperationType
    ) -> ScanPage:
        """Run one scan or query call.

        Args:
            params: TableName plus any boto3 scan/query parameters
            operation_type: Whether to scan or query

        Returns:
            ScanPage with the items and LastEvaluatedKey of this call
        """
        call_params = dict(params)
        table_name = call_params.pop("TableName", None)
        if not table_name:
            raise StorageValidationError("TableName is required")

        if operation_type == OperationType.QUERY:
            response = self.dynamodb_client.query(table_name, **call_params)
        else:
            response = self.dynamodb_client.scan(table_name, **call_params)

        return ScanPage(
            items=response.get("Items", []),
            last_evaluated_key=response.get("LastEvaluatedKey"),
        )

    def get_item(self, table_name: str, key: CompositeKey) -> Optional[Item]:
        return self.dynamodb_client.get_item(table_name, key)

    def put_item(self, table_name: str, item: Item) -> None:
        self.dynamodb_client.put_item(table_name, item)

    def delete_item(self, table_name: str, key: CompositeKey) -> None:
        self.dynamodb_client.delete_item(table_name, key)
