"""Unit tests for the item browsing handlers."""

import unittest
from unittest.mock import MagicMock, patch

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from pydantic import ValidationError

from src.clients.dynamodb import DynamoDBClient
from src.config.app import AppConfig
from src.handlers.items import handle_get_items, handle_get_table_meta
from src.middleware.exceptions import MissingKeyConditionError
from src.models.api import ItemsPageResponse
from src.models.domain import OperationType


class TestItemsHandlers(unittest.TestCase):
    """Test cases for the item browsing handlers."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_app = MagicMock(spec=APIGatewayHttpResolver)
        self.mock_app.current_event = MagicMock(query_string_parameters={})
        self.mock_dynamodb_client = MagicMock(spec=DynamoDBClient)
        self.mock_logger = MagicMock()
        self.config = AppConfig(app_env="dev", version="test", commit_hash="abc1234")

        self.repo_patch = patch("src.handlers.items.DynamoDBTableRepository")
        self.browser_patch = patch("src.handlers.items.ItemBrowserService")
        self.mock_repo_class = self.repo_patch.start()
        self.mock_browser_class = self.browser_patch.start()
        self.mock_browser = MagicMock()
        self.mock_browser_class.return_value = self.mock_browser

    def tearDown(self):
        """Tear down test fixtures."""
        self.repo_patch.stop()
        self.browser_patch.stop()

    def get_items(self, **params):
        self.mock_app.current_event.query_string_parameters = params
        return handle_get_items(
            self.mock_app,
            self.config,
            self.mock_dynamodb_client,
            self.mock_logger,
            "orders",
        )

    def test_get_items(self):
        """Test that the parsed request is browsed and the page returned."""
        page = ItemsPageResponse(
            table_name="orders",
            page_num=2,
            items=[{"customer": "c1"}],
            item_keys=["c1,1"],
            unique_keys=["customer"],
            next_key="c1,1",
        )
        self.mock_browser.browse.return_value = page

        result = self.get_items(operationType="query", startKey="c0,1", pageNum="2")

        self.assertIs(page, result)
        self.mock_browser_class.assert_called_once_with(
            self.mock_repo_class.return_value, self.config, self.mock_logger
        )
        table_name, request = self.mock_browser.browse.call_args[0]
        self.assertEqual("orders", table_name)
        self.assertEqual(OperationType.QUERY, request.operation_type)
        self.assertEqual("c0,1", request.start_key)
        self.assertEqual(2, request.page_num)

    def test_invalid_query_parameters(self):
        """Test that invalid parameters fail before any browsing."""
        with self.assertRaises(ValidationError):
            self.get_items(pageNum="0")

        self.mock_browser.browse.assert_not_called()

    def test_browse_errors_propagate(self):
        self.mock_browser.browse.side_effect = MissingKeyConditionError()

        with self.assertRaises(MissingKeyConditionError):
            self.get_items(operationType="query")

    def test_get_table_meta(self):
        meta = MagicMock()
        self.mock_browser.table_meta.return_value = meta

        result = handle_get_table_meta(
            self.config, self.mock_dynamodb_client, self.mock_logger, "orders"
        )

        self.assertIs(meta, result)
        self.mock_browser.table_meta.assert_called_once_with("orders")


if __name__ == "__main__":
    unittest.main()
