"""Client wrapper for DynamoDB operations."""

from typing import Any, Dict, List, Optional

import boto3
from aws_lambda_powertools.logging import Logger
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config.app import AppConfig
from ..middleware.exceptions import (
    StorageAccessError,
    StorageError,
    StorageGeneralError,
    StorageThrottledError,
    StorageValidationError,
    TableNotFoundError,
)

logger = Logger()

_THROTTLING_CODES = {
    "ProvisionedThroughputExceededException",
    "RequestLimitExceeded",
    "ThrottlingException",
    "InternalServerError",
    "ServiceUnavailable",
}
_ACCESS_CODES = {
    "AccessDeniedException",
    "UnrecognizedClientException",
    "ExpiredTokenException",
    "InvalidSignatureException",
}


def map_client_error(
    error: ClientError, operation: str, table_name: Optional[str] = None
) -> StorageError:
    """Map a botocore ClientError to a storage exception.

    Args:
        error: The error raised by boto3
        operation: Name of the failed operation (e.g. "Scan")
        table_name: Table the operation ran against

    Returns:
        The storage exception to raise in its place
    """
    error_code = error.response.get("Error", {}).get("Code", "")
    error_message = error.response.get("Error", {}).get("Message", str(error))
    details = {
        "operation": operation,
        "table_name": table_name,
        "error_code": error_code,
    }
    message = f"{operation} failed: {error_message}"

    if error_code == "ResourceNotFoundException":
        return TableNotFoundError(
            table_name or "unknown", message=message, details=details
        )
    if error_code == "ValidationException":
        return StorageValidationError(message, details=details)
    if error_code in _THROTTLING_CODES:
        return StorageThrottledError(message, details=details)
    if error_code in _ACCESS_CODES:
        return StorageAccessError(message, details=details)

    logger.warning(
        "Unmapped DynamoDB error code", extra={"error_code": error_code, **details}
    )
    return StorageGeneralError(message, details=details)


class DynamoDBClient:
    """Client wrapper for DynamoDB operations on any table."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize DynamoDB client.

        Args:
            config: Application configuration
        """
        self.config = config
        self.dynamodb = boto3.resource(
            "dynamodb",
            region_name=config.aws_region,
            endpoint_url=config.dynamodb_endpoint_url,
            config=Config(retries={"max_attempts": config.max_retries}),
        )

    def _call(self, operation: str, table_name: Optional[str], func, **kwargs) -> Any:
        try:
            return func(**kwargs)
        except ClientError as e:
            raise map_client_error(e, operation, table_name) from e
        except BotoCoreError as e:
            raise StorageGeneralError(
                f"{operation} failed",
                details={"operation": operation, "table_name": table_name, "error": str(e)},
            ) from e

    def describe_table(self, table_name: str) -> Dict[str, Any]:
        """Describe a table.

        Args:
            table_name: Name of the table

        Returns:
            The "Table" part of the DescribeTable response

        Raises:
            TableNotFoundError: If the table does not exist
            StorageError: If the call fails
        """
        response = self._call(
            "DescribeTable",
            table_name,
            self.dynamodb.meta.client.describe_table,
            TableName=table_name,
        )
        return response["Table"]

    def list_tables(self) -> List[str]:
        """List the names of all tables in the account and region.

        Raises:
            StorageError: If the call fails
        """
        paginator = self.dynamodb.meta.client.get_paginator("list_tables")
        names: List[str] = []
        try:
            for page in paginator.paginate():
                names.extend(page.get("TableNames", []))
        except ClientError as e:
            raise map_client_error(e, "ListTables") from e
        return names

    def scan(self, table_name: str, **params: Any) -> Dict[str, Any]:
        """Run one Scan call; pagination is left to the caller.

        Raises:
            StorageError: If the call fails
        """
        logger.debug("Scanning table", extra={"table": table_name, "params": params})
        return self._call("Scan", table_name, self.dynamodb.Table(table_name).scan, **params)

    def query(self, table_name: str, **params: Any) -> Dict[str, Any]:
        """Run one Query call; pagination is left to the caller.

        Raises:
            StorageError: If the call fails
        """
        logger.debug("Querying table", extra={"table": table_name, "params": params})
        return self._call(
            "Query", table_name, self.dynamodb.Table(table_name).query, **params
        )

    def get_item(self, table_name: str, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Get an item by its primary key.

        Returns:
            The item, or None if there is no item with that key

        Raises:
            StorageError: If the call fails
        """
        response = self._call(
            "GetItem", table_name, self.dynamodb.Table(table_name).get_item, Key=key
        )
        return response.get("Item")

    def put_item(self, table_name: str, item: Dict[str, Any]) -> None:
        """Put an item, replacing any existing item with the same key.

        Raises:
            StorageError: If the call fails
        """
        logger.debug("Putting item in DynamoDB", extra={"table": table_name})
        self._call(
            "PutItem", table_name, self.dynamodb.Table(table_name).put_item, Item=item
        )

    def delete_item(self, table_name: str, key: Dict[str, Any]) -> None:
        """Delete an item by its primary key.

        Raises:
            StorageError: If the call fails
        """
        logger.debug("Deleting item from DynamoDB", extra={"table": table_name, "key": key})
        self._call(
            "DeleteItem", table_name, self.dynamodb.Table(table_name).delete_item, Key=key
        )
