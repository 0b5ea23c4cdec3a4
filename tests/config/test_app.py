"""Unit tests for application configuration."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from src.config.app import AppConfig


class TestAppConfig(unittest.TestCase):
    """Test cases for AppConfig.from_env."""

    @patch.dict(
        os.environ,
        {
            "APP_ENV": "prod",
            "VERSION": "1.2.0",
            "COMMIT_HASH": "deadbeef",
            "AWS_REGION": "eu-central-1",
            "PAGE_SIZE": "50",
            "MAX_PAGE_CALLS": "4",
            "DYNAMODB_ENDPOINT_URL": "",
        },
        clear=True,
    )
    def test_from_env(self):
        config = AppConfig.from_env()

        self.assertEqual("prod", config.app_env)
        self.assertEqual("1.2.0", config.version)
        self.assertEqual("eu-central-1", config.aws_region)
        self.assertEqual(50, config.page_size)
        self.assertEqual(4, config.max_page_calls)
        self.assertIsNone(config.dynamodb_endpoint_url)
        self.assertEqual("*", config.cors_allow_origin)

    @patch("src.config.app.load_dotenv")
    @patch.dict(os.environ, {}, clear=True)
    def test_local_loads_dotenv(self, mock_load_dotenv):
        config = AppConfig.from_env()

        self.assertEqual("local", config.app_env)
        mock_load_dotenv.assert_called_once()

    @patch.dict(os.environ, {"APP_ENV": "staging"}, clear=True)
    def test_unknown_environment(self):
        with self.assertRaises(ValueError):
            AppConfig.from_env()

    @patch.dict(os.environ, {"APP_ENV": "dev", "PAGE_SIZE": "0"}, clear=True)
    def test_page_size_must_be_positive(self):
        with self.assertRaises(ValidationError):
            AppConfig.from_env()

    def test_immutable(self):
        config = AppConfig(app_env="dev", version="1", commit_hash="abc")

        with self.assertRaises(ValidationError):
            config.page_size = 10


if __name__ == "__main__":
    unittest.main()
