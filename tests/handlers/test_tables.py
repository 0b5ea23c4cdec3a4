"""Unit tests for the table handlers."""

import unittest
from unittest.mock import MagicMock, patch

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver

from src.clients.dynamodb import DynamoDBClient
from src.handlers.tables import (
    handle_describe_table,
    handle_key_lookup,
    handle_list_tables,
)
from src.middleware.exceptions import BadRequestError, TableNotFoundError
from src.models.api import TableKeysResponse
from src.models.domain import (
    AttributeDefinition,
    AttributeType,
    IndexDescriptor,
    KeySchemaElement,
    KeyType,
    TableDescription,
)

ORDERS = TableDescription(
    table_name="orders",
    key_schema=[
        KeySchemaElement(attribute_name="customer", key_type=KeyType.HASH),
        KeySchemaElement(attribute_name="placed_at", key_type=KeyType.RANGE),
    ],
    attribute_definitions=[
        AttributeDefinition(attribute_name="customer", attribute_type=AttributeType.STRING),
        AttributeDefinition(attribute_name="placed_at", attribute_type=AttributeType.NUMBER),
    ],
    global_secondary_indexes=[
        IndexDescriptor(
            index_name="by-status",
            key_schema=[KeySchemaElement(attribute_name="status", key_type=KeyType.HASH)],
        )
    ],
)

USERS = TableDescription(
    table_name="users",
    key_schema=[KeySchemaElement(attribute_name="id", key_type=KeyType.HASH)],
)


class TestTableHandlers(unittest.TestCase):
    """Test cases for the table handlers."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_app = MagicMock(spec=APIGatewayHttpResolver)
        self.mock_app.current_event = MagicMock(query_string_parameters={})
        self.mock_dynamodb_client = MagicMock(spec=DynamoDBClient)
        self.mock_logger = MagicMock()

        self.repo_patch = patch("src.handlers.tables.DynamoDBTableRepository")
        self.mock_repo_class = self.repo_patch.start()
        self.mock_repo = MagicMock()
        self.mock_repo_class.return_value = self.mock_repo
        self.mock_repo.describe_table.return_value = ORDERS

    def tearDown(self):
        """Tear down test fixtures."""
        self.repo_patch.stop()

    def lookup(self, table_name="orders", **params):
        self.mock_app.current_event.query_string_parameters = params
        return handle_key_lookup(
            self.mock_app, self.mock_dynamodb_client, self.mock_logger, table_name
        )

    def test_list_tables(self):
        self.mock_repo.list_tables.return_value = ["orders", "users"]

        result = handle_list_tables(self.mock_dynamodb_client, self.mock_logger)

        self.assertEqual(["orders", "users"], result.tables)

    def test_describe_table(self):
        """Test that the description carries keys, indexes and operators."""
        result = handle_describe_table(
            self.mock_dynamodb_client, self.mock_logger, "orders"
        )

        self.assertEqual("orders", result.table_name)
        self.assertEqual(
            ["customer", "placed_at"],
            [attribute.attribute_name for attribute in result.key_schema],
        )
        self.assertEqual("N", result.key_schema[1].attribute_type)
        self.assertEqual(["by-status"], [index.index_name for index in result.indexes])
        self.assertEqual("≠", result.operators["<>"])

    def test_describe_missing_table(self):
        self.mock_repo.describe_table.side_effect = TableNotFoundError("ghost")

        with self.assertRaises(TableNotFoundError):
            handle_describe_table(self.mock_dynamodb_client, self.mock_logger, "ghost")

    def test_lookup_form(self):
        """Test that a lookup without values returns the key attributes."""
        result = self.lookup()

        self.assertIsInstance(result, TableKeysResponse)
        self.assertEqual("customer", result.hash_key.attribute_name)
        self.assertEqual("placed_at", result.range_key.attribute_name)
        self.assertEqual("N", result.range_key.attribute_type)

    def test_lookup_redirects_to_item(self):
        """Test that hash and range values redirect to the encoded item URL."""
        result = self.lookup(hash="a,b", range="17")

        self.assertEqual(302, result.status_code)
        self.assertEqual("/tables/orders/items/a%2Cb,17", result.headers["Location"])

    def test_lookup_escapes_table_name(self):
        self.mock_repo.describe_table.return_value = USERS

        result = self.lookup(table_name="my table", hash="7")

        self.assertEqual("/tables/my%20table/items/7", result.headers["Location"])

    def test_lookup_missing_range(self):
        with self.assertRaises(BadRequestError):
            self.lookup(hash="a")

    def test_lookup_unexpected_range(self):
        self.mock_repo.describe_table.return_value = USERS

        with self.assertRaises(BadRequestError):
            self.lookup(table_name="users", hash="1", range="2")


if __name__ == "__main__":
    unittest.main()
