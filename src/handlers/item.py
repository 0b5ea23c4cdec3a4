"""Handlers for single item requests.

GET, PUT and DELETE /tables/{table}/items/{key}, and
GET and PUT /tables/{table}/add-item.
"""

from typing import Any, Dict

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, Response
from aws_lambda_powertools.logging import Logger

from ..clients.dynamodb import DynamoDBClient
from ..middleware.exceptions import BadRequestError, ItemNotFoundError
from ..models.api import ItemKeyResponse
from ..query_engine import encode_key, extract_key, parse_key
from ..repositories.dynamodb_table import DynamoDBTableRepository
from ..services.request_parser import RequestParsingService
from ..utils.serialization import normalize_dynamodb_types


def handle_get_item(
    dynamodb_client: DynamoDBClient, logger: Logger, table_name: str, key: str
) -> Dict[str, Any]:
    """Handle GET /tables/{table}/items/{key} requests.

    Raises:
        KeyFormatError, KeyTypeError: If the key is malformed
        ItemNotFoundError: If there is no item with that key
    """
    repository = DynamoDBTableRepository(dynamodb_client)
    table = repository.describe_table(table_name)
    item_key = parse_key(key, table)

    item = repository.get_item(table_name, item_key)
    if item is None:
        raise ItemNotFoundError(table_name, item_key)

    logger.debug("Item retrieved", extra={"table": table_name, "key": key})
    return normalize_dynamodb_types(item)


def handle_new_item_template(
    dynamodb_client: DynamoDBClient, table_name: str
) -> Dict[str, Any]:
    """Handle GET /tables/{table}/add-item: an item with blank key attributes."""
    repository = DynamoDBTableRepository(dynamodb_client)
    return repository.describe_table(table_name).empty_item()


def handle_create_item(
    app: APIGatewayHttpResolver,
    dynamodb_client: DynamoDBClient,
    logger: Logger,
    table_name: str,
) -> ItemKeyResponse:
    """Handle PUT /tables/{table}/add-item requests.

    Stores the item from the body and returns its key.

    Raises:
        BadRequestError: If the body is not a JSON object
        MissingKeyAttributeError: If the item lacks a key attribute
        ItemNotFoundError: If the item cannot be read back
    """
    parser_service = RequestParsingService(app, logger)
    repository = DynamoDBTableRepository(dynamodb_client)

    item = parser_service.parse_item_body()
    table = repository.describe_table(table_name)
    item_key = extract_key(item, table.key_schema)

    repository.put_item(table_name, item)
    if repository.get_item(table_name, item_key) is None:
        raise ItemNotFoundError(table_name, item_key)

    encoded = encode_key(item_key)
    logger.info("Item created", extra={"table": table_name, "key": encoded})
    return ItemKeyResponse(key=normalize_dynamodb_types(item_key), encoded_key=encoded)


def handle_replace_item(
    app: APIGatewayHttpResolver,
    dynamodb_client: DynamoDBClient,
    logger: Logger,
    table_name: str,
    key: str,
) -> Dict[str, Any]:
    """Handle PUT /tables/{table}/items/{key} requests.

    Replaces the whole item and returns it as stored.

    Raises:
        BadRequestError: If the body is invalid or its key differs from the URL key
        KeyFormatError, KeyTypeError: If the URL key is malformed
        ItemNotFoundError: If the item cannot be read back
    """
    parser_service = RequestParsingService(app, logger)
    repository = DynamoDBTableRepository(dynamodb_client)

    item = parser_service.parse_item_body()
    table = repository.describe_table(table_name)
    item_key = parse_key(key, table)

    if extract_key(item, table.key_schema) != item_key:
        raise BadRequestError(
            "Item key does not match the key in the URL",
            details={"key": key},
        )

    repository.put_item(table_name, item)
    stored = repository.get_item(table_name, item_key)
    if stored is None:
        raise ItemNotFoundError(table_name, item_key)

    logger.info("Item replaced", extra={"table": table_name, "key": key})
    return normalize_dynamodb_types(stored)


def handle_delete_item(
    dynamodb_client: DynamoDBClient, logger: Logger, table_name: str, key: str
) -> Response:
    """Handle DELETE /tables/{table}/items/{key} requests.

    Raises:
        KeyFormatError, KeyTypeError: If the key is malformed
    """
    repository = DynamoDBTableRepository(dynamodb_client)
    table = repository.describe_table(table_name)
    item_key = parse_key(key, table)

    repository.delete_item(table_name, item_key)
    logger.info("Item deleted", extra={"table": table_name, "key": key})
    return Response(status_code=204, body="")
