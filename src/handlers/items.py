"""Handlers for browsing the items of a table.

GET /tables/{table}/items pages through a scan or query,
GET /tables/{table}/meta shows the table description with a first scan.
"""

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.logging import Logger

from ..clients.dynamodb import DynamoDBClient
from ..config.app import AppConfig
from ..models.api import ItemsPageResponse, TableMetaResponse
from ..repositories.dynamodb_table import DynamoDBTableRepository
from ..services.item_browser import ItemBrowserService
from ..services.request_parser import RequestParsingService


def handle_get_items(
    app: APIGatewayHttpResolver,
    app_config: AppConfig,
    dynamodb_client: DynamoDBClient,
    logger: Logger,
    table_name: str,
) -> ItemsPageResponse:
    """Handle GET /tables/{table}/items requests.

    Args:
        app: The API Gateway resolver instance
        app_config: Application configuration
        dynamodb_client: DynamoDB client
        logger: Logger instance
        table_name: Table to browse

    Returns:
        ItemsPageResponse with one page of items and the cursor of the next one

    Raises:
        ValidationError: If query parameters are invalid
        MissingKeyConditionError: If a query has no key condition
        KeyFormatError, KeyTypeError: If the start key is malformed
        StorageError: If storage operations fail
    """
    parser_service = RequestParsingService(app, logger)
    browser = ItemBrowserService(
        DynamoDBTableRepository(dynamodb_client), app_config, logger
    )

    request = parser_service.parse_items_request()
    page = browser.browse(table_name, request)

    logger.info(
        "Page assembled",
        extra={
            "table": table_name,
            "items": len(page.items),
            "has_next": page.next_key is not None,
            "truncated": page.truncated,
        },
    )
    return page


def handle_get_table_meta(
    app_config: AppConfig,
    dynamodb_client: DynamoDBClient,
    logger: Logger,
    table_name: str,
) -> TableMetaResponse:
    """Handle GET /tables/{table}/meta requests."""
    browser = ItemBrowserService(
        DynamoDBTableRepository(dynamodb_client), app_config, logger
    )
    return browser.table_meta(table_name)
