"""Unit tests for the item browser service."""

import json
import unittest
from decimal import Decimal
from unittest.mock import MagicMock

from fakes import FakeScanStore

from src.config.app import AppConfig
from src.middleware.exceptions import (
    KeyFormatError,
    MissingKeyConditionError,
    NotFoundError,
)
from src.models.api import ItemsRequest
from src.models.domain import (
    AttributeDefinition,
    AttributeType,
    IndexDescriptor,
    KeySchemaElement,
    KeyType,
    OperationType,
    TableDescription,
)
from src.repositories.dynamodb_table import DynamoDBTableRepository
from src.services.item_browser import ItemBrowserService

USERS = TableDescription(
    table_name="users",
    key_schema=[KeySchemaElement(attribute_name="id", key_type=KeyType.HASH)],
    attribute_definitions=[
        AttributeDefinition(attribute_name="id", attribute_type=AttributeType.NUMBER)
    ],
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
        AttributeDefinition(attribute_name="status", attribute_type=AttributeType.STRING),
    ],
    global_secondary_indexes=[
        IndexDescriptor(
            index_name="by-status",
            key_schema=[KeySchemaElement(attribute_name="status", key_type=KeyType.HASH)],
        )
    ],
)


def user_items(count):
    return [{"id": Decimal(i), "name": f"user-{i}"} for i in range(count)]


def request(**params) -> ItemsRequest:
    if "filters" in params:
        params["filters"] = json.dumps(params["filters"])
    return ItemsRequest.model_validate(params)


class TestItemBrowserService(unittest.TestCase):
    """Test cases for ItemBrowserService."""

    def setUp(self):
        """Set up test fixtures."""
        self.repository = MagicMock(spec=DynamoDBTableRepository)
        self.repository.describe_table.return_value = USERS
        self.calls = []
        self.config = AppConfig(
            app_env="dev", version="test", commit_hash="abc1234", page_size=3
        )
        self.service = ItemBrowserService(self.repository, self.config, MagicMock())

    def use_store(self, store):
        def scan_or_query(params, operation_type):
            self.calls.append((params, operation_type))
            return store(params.get("ExclusiveStartKey"))

        self.repository.scan_or_query.side_effect = scan_or_query

    def test_first_page_of_scan(self):
        """Test a scan page with cursor, keys and normalized items."""
        self.use_store(FakeScanStore(user_items(7), ["id"], server_page_size=10))

        response = self.service.browse("users", request())

        self.assertEqual([0, 1, 2], [item["id"] for item in response.items])
        self.assertIsInstance(response.items[0]["id"], int)
        self.assertEqual(["0", "1", "2"], response.item_keys)
        self.assertEqual(["id", "name"], response.unique_keys)
        self.assertEqual("2", response.next_key)
        self.assertFalse(response.truncated)
        self.assertEqual(({"TableName": "users"}, OperationType.SCAN), self.calls[0])

    def test_next_page_resumes_after_cursor(self):
        """Test that startKey is parsed into ExclusiveStartKey."""
        self.use_store(FakeScanStore(user_items(7), ["id"], server_page_size=10))

        response = self.service.browse(
            "users", request(startKey="5", prevKey="2", pageNum="3")
        )

        self.assertEqual({"id": Decimal("5")}, self.calls[0][0]["ExclusiveStartKey"])
        self.assertEqual([6], [item["id"] for item in response.items])
        self.assertIsNone(response.next_key)
        self.assertEqual("5", response.start_key)
        self.assertEqual("2", response.prev_key)
        self.assertEqual(3, response.page_num)

    def test_scan_with_filters(self):
        """Test that scan filters all go to the filter expression."""
        self.use_store(FakeScanStore([], ["id"], server_page_size=10))

        self.service.browse(
            "users",
            request(filters={"id": {"value": "4", "type": "N", "operator": ">"}}),
        )

        params = self.calls[0][0]
        self.assertEqual("#id > :id", params["FilterExpression"])
        self.assertEqual({":id": Decimal("4")}, params["ExpressionAttributeValues"])
        self.assertNotIn("KeyConditionExpression", params)

    def test_query_without_key_condition(self):
        """Test that a query without a key condition never reaches the store."""
        with self.assertRaises(MissingKeyConditionError) as context:
            self.service.browse(
                "users",
                request(operationType="query", filters={"name": {"value": "x"}}),
            )

        self.assertEqual(400, context.exception.status_code)
        self.repository.scan_or_query.assert_not_called()

    def test_query_on_table(self):
        """Test that a query on the table key uses a key condition."""
        self.use_store(FakeScanStore(user_items(1), ["id"], server_page_size=10))

        self.service.browse(
            "users",
            request(operationType="query", filters={"id": {"value": "0", "type": "N"}}),
        )

        params, operation_type = self.calls[0]
        self.assertEqual(OperationType.QUERY, operation_type)
        self.assertEqual("#id = :id", params["KeyConditionExpression"])
        self.assertNotIn("IndexName", params)

    def test_query_on_index(self):
        """Test an index query: IndexName and a cursor carrying every key."""
        self.repository.describe_table.return_value = ORDERS
        items = [
            {"customer": f"c{i}", "placed_at": Decimal(i), "status": "shipped"}
            for i in range(5)
        ]
        self.use_store(
            FakeScanStore(items, ["status", "customer", "placed_at"], server_page_size=10)
        )

        response = self.service.browse(
            "orders",
            request(
                operationType="query",
                queryableSelection="by-status",
                filters={"status": {"value": "shipped"}, "customer": {"value": "c1"}},
            ),
        )

        params = self.calls[0][0]
        self.assertEqual("by-status", params["IndexName"])
        self.assertEqual("#status = :status", params["KeyConditionExpression"])
        self.assertEqual("#customer = :customer", params["FilterExpression"])
        self.assertEqual("c2,2,shipped", response.next_key)
        self.assertEqual(["c0,0", "c1,1", "c2,2"], response.item_keys)
        self.assertEqual(["customer", "placed_at", "status"], response.unique_keys)

    def test_index_cursor_round_trip(self):
        """Test that an index cursor resumes with the full start key."""
        self.repository.describe_table.return_value = ORDERS
        resumed = {"customer": "c2", "placed_at": Decimal(2), "status": "shipped"}
        self.use_store(FakeScanStore([resumed], ["customer"], server_page_size=10))

        self.service.browse(
            "orders",
            request(
                operationType="query",
                queryableSelection="by-status",
                filters={"status": {"value": "shipped"}},
                startKey="c2,2,shipped",
            ),
        )

        self.assertEqual(
            {"customer": "c2", "placed_at": Decimal("2"), "status": "shipped"},
            self.calls[0][0]["ExclusiveStartKey"],
        )

    def test_table_cursor_rejected_for_index(self):
        """Test that a cursor with the wrong number of parts is rejected."""
        self.repository.describe_table.return_value = ORDERS

        with self.assertRaises(KeyFormatError):
            self.service.browse(
                "orders", request(queryableSelection="by-status", startKey="c2,2")
            )

    def test_unknown_index(self):
        """Test that selecting a missing index raises NotFoundError."""
        with self.assertRaises(NotFoundError) as context:
            self.service.browse("users", request(queryableSelection="nope"))

        self.assertEqual("INDEX_NOT_FOUND", context.exception.code)
        self.assertEqual(404, context.exception.status_code)

    def test_call_limit_returns_truncated_page(self):
        """Test that the store token is handed back when the call limit is hit."""
        service = ItemBrowserService(
            self.repository,
            AppConfig(
                app_env="dev",
                version="test",
                commit_hash="abc1234",
                page_size=3,
                max_page_calls=2,
            ),
            MagicMock(),
        )
        self.use_store(
            FakeScanStore(
                user_items(10), ["id"], server_page_size=2, predicate=lambda i: i["id"] > 8
            )
        )

        response = service.browse("users", request())

        self.assertEqual(2, len(self.calls))
        self.assertEqual([], response.items)
        self.assertTrue(response.truncated)
        self.assertEqual("3", response.next_key)

    def test_unique_keys_puts_primary_key_first(self):
        items = [{"total": 1, "placed_at": 2, "customer": "c"}, {"note": "x"}]

        self.assertEqual(
            ["customer", "placed_at", "total", "note"],
            ItemBrowserService.unique_keys(ORDERS, items),
        )

    def test_table_meta(self):
        """Test that table meta uses a single scan call."""
        self.use_store(FakeScanStore(user_items(4), ["id"], server_page_size=3))

        response = self.service.table_meta("users")

        self.assertEqual(1, len(self.calls))
        self.assertEqual("users", response.table.table_name)
        self.assertEqual(3, response.count)
        self.assertTrue(response.has_more)


if __name__ == "__main__":
    unittest.main()
