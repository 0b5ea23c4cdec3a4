from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, CORSConfig
from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.clients.dynamodb import DynamoDBClient
from src.config.app import AppConfig
from src.handlers import (
    handle_create_item,
    handle_delete_item,
    handle_describe_table,
    handle_get_item,
    handle_get_items,
    handle_get_table_meta,
    handle_key_lookup,
    handle_list_tables,
    handle_new_item_template,
    handle_replace_item,
)
from src.middleware.error_handler import error_handler_middleware
from src.middleware.logging import logging_middleware
from src.models.api import VersionResponse

# --- Constants and Setup ---
logger = Logger()

# --- Load Configuration and Initialize Services ---
try:
    app_config = AppConfig.from_env()
    logger.info(
        "Configuration loaded successfully.",
        extra={
            "app_env": app_config.app_env,
            "version": app_config.version,
            "commit_hash": app_config.commit_hash,
            "dynamodb_endpoint_url": app_config.dynamodb_endpoint_url,
        },
    )
except Exception as e:
    logger.exception("CRITICAL: Failed to load configuration or initialize services.")
    # This error prevents the Lambda from functioning, raise to indicate failure
    raise RuntimeError(f"Initialization error: {e}") from e

cors_config = CORSConfig(
    allow_origin=app_config.cors_allow_origin,
    allow_headers=["Content-Type"],
)

app = APIGatewayHttpResolver(cors=cors_config)

# One client per process, built from the immutable configuration
dynamodb_client = DynamoDBClient(app_config)


# --- API Route Handlers ---
@app.get("/version")
def get_version() -> VersionResponse:
    """Returns the application version."""
    display_version = f"{app_config.version}-B:{app_config.commit_hash[:7]}-{app_config.app_env[0].upper()}"
    logger.info(f"Version requested: {display_version}")
    return VersionResponse(version=display_version)


@app.get("/tables")
def list_tables():
    return handle_list_tables(dynamodb_client=dynamodb_client, logger=logger)


@app.get("/tables/<table_name>")
def describe_table(table_name: str):
    return handle_describe_table(
        dynamodb_client=dynamodb_client, logger=logger, table_name=table_name
    )


@app.get("/tables/<table_name>/get")
def key_lookup(table_name: str):
    """Redirect to an item from its hash/range values, or describe the key form."""
    return handle_key_lookup(
        app=app, dynamodb_client=dynamodb_client, logger=logger, table_name=table_name
    )


@app.get("/tables/<table_name>/items")
def get_items(table_name: str):
    """Handle GET /tables/{table}/items.

    One page of a scan or query; see ItemsRequest for the query parameters.
    """
    return handle_get_items(
        app=app,
        app_config=app_config,
        dynamodb_client=dynamodb_client,
        logger=logger,
        table_name=table_name,
    )


@app.get("/tables/<table_name>/meta")
def get_table_meta(table_name: str):
    return handle_get_table_meta(
        app_config=app_config,
        dynamodb_client=dynamodb_client,
        logger=logger,
        table_name=table_name,
    )


@app.get("/tables/<table_name>/add-item")
def new_item_template(table_name: str):
    return handle_new_item_template(
        dynamodb_client=dynamodb_client, table_name=table_name
    )


@app.put("/tables/<table_name>/add-item")
def create_item(table_name: str):
    return handle_create_item(
        app=app, dynamodb_client=dynamodb_client, logger=logger, table_name=table_name
    )


@app.get("/tables/<table_name>/items/<key>")
def get_item(table_name: str, key: str):
    return handle_get_item(
        dynamodb_client=dynamodb_client, logger=logger, table_name=table_name, key=key
    )


@app.put("/tables/<table_name>/items/<key>")
def replace_item(table_name: str, key: str):
    return handle_replace_item(
        app=app,
        dynamodb_client=dynamodb_client,
        logger=logger,
        table_name=table_name,
        key=key,
    )


@app.delete("/tables/<table_name>/items/<key>")
def delete_item(table_name: str, key: str):
    return handle_delete_item(
        dynamodb_client=dynamodb_client, logger=logger, table_name=table_name, key=key
    )


# --- Main Lambda Entry Point ---
@error_handler_middleware
@logging_middleware
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """Main Lambda handler function.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response
    """
    return app.resolve(event, context)
