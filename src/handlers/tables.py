"""Handlers for table level requests.

GET /tables, GET /tables/{table} and GET /tables/{table}/get.
"""

from typing import Union
from urllib.parse import quote

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, Response
from aws_lambda_powertools.logging import Logger

from ..clients.dynamodb import DynamoDBClient
from ..middleware.exceptions import BadRequestError
from ..models.api import KeyAttribute, TableKeysResponse, TableListResponse, TableResponse
from ..query_engine import encode_key
from ..repositories.dynamodb_table import DynamoDBTableRepository
from ..services.request_parser import RequestParsingService


def handle_list_tables(dynamodb_client: DynamoDBClient, logger: Logger) -> TableListResponse:
    """Handle GET /tables requests."""
    repository = DynamoDBTableRepository(dynamodb_client)
    tables = repository.list_tables()
    logger.info("Listed tables", extra={"count": len(tables)})
    return TableListResponse(tables=tables)


def handle_describe_table(
    dynamodb_client: DynamoDBClient, logger: Logger, table_name: str
) -> TableResponse:
    """Handle GET /tables/{table} requests.

    Returns the table description together with the operators and attribute
    types a client can pick when building filters.

    Raises:
        TableNotFoundError: If the table does not exist
        StorageGeneralError: If storage operations fail
    """
    repository = DynamoDBTableRepository(dynamodb_client)
    table = repository.describe_table(table_name)
    logger.debug("Table described", extra={"table": table_name})
    return TableResponse.from_domain(table)


def handle_key_lookup(
    app: APIGatewayHttpResolver,
    dynamodb_client: DynamoDBClient,
    logger: Logger,
    table_name: str,
) -> Union[Response, TableKeysResponse]:
    """Handle GET /tables/{table}/get requests.

    With a `hash` (and, for composite keys, `range`) query parameter, redirects
    to the item's URL. Without one, returns the key attributes to ask for.

    Raises:
        BadRequestError: If the range value is missing or not expected
        TableNotFoundError: If the table does not exist
    """
    parser_service = RequestParsingService(app, logger)
    repository = DynamoDBTableRepository(dynamodb_client)

    lookup = parser_service.parse_key_lookup()
    table = repository.describe_table(table_name)

    def key_attribute(element) -> KeyAttribute:
        return KeyAttribute(
            attribute_name=element.attribute_name,
            key_type=element.key_type.value,
            attribute_type=table.attribute_type(element.attribute_name).value,
        )

    if not lookup.hash:
        return TableKeysResponse(
            table_name=table_name,
            hash_key=key_attribute(table.hash_key),
            range_key=key_attribute(table.range_key) if table.range_key else None,
        )

    key = {table.hash_key.attribute_name: lookup.hash}
    if table.range_key is not None:
        if not lookup.range:
            raise BadRequestError(
                f"Table {table_name} needs a range key value",
                details={"range_key": table.range_key.attribute_name},
            )
        key[table.range_key.attribute_name] = lookup.range
    elif lookup.range:
        raise BadRequestError(f"Table {table_name} has no range key")

    location = f"/tables/{quote(table_name, safe='')}/items/{encode_key(key)}"
    logger.info("Redirecting key lookup", extra={"location": location})
    return Response(status_code=302, headers={"Location": location}, body="")
