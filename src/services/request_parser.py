"""Request parsing service for query strings and JSON item bodies."""

import base64
import binascii
import json
from decimal import Decimal
from typing import Any, Dict

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.logging import Logger

from ..middleware.exceptions import BadRequestError
from ..models.api import ItemsRequest, KeyLookupRequest
from ..utils.serialization import convert_to_dynamodb_type

MAX_ITEM_BODY_BYTES = 500 * 1024


class RequestParsingService:
    """Service for parsing HTTP request data."""

    def __init__(self, app: APIGatewayHttpResolver, logger: Logger):
        """Initialize request parsing service.

        Args:
            app: The API Gateway resolver instance
            logger: Logger instance
        """
        self.app = app
        self.logger = logger

    def _query_parameters(self) -> Dict[str, str]:
        """Query string parameters with empty values dropped."""
        params = self.app.current_event.query_string_parameters or {}
        return {name: value for name, value in params.items() if value}

    def parse_items_request(self) -> ItemsRequest:
        """Parse the query string of an items request.

        Returns:
            Validated ItemsRequest

        Raises:
            pydantic.ValidationError: If a parameter is invalid, including
                malformed filters
        """
        params = self._query_parameters()
        self.logger.debug("Parsing items request", extra={"params": params})
        return ItemsRequest.model_validate(params)

    def parse_key_lookup(self) -> KeyLookupRequest:
        return KeyLookupRequest.model_validate(self._query_parameters())

    def parse_item_body(self) -> Dict[str, Any]:
        """Parse a JSON object body into a DynamoDB compatible item.

        Numbers are read as Decimal, the only numeric type boto3 accepts.

        Returns:
            The item

        Raises:
            BadRequestError: If the body is missing, too large, not JSON or not an object
        """
        body = self.app.current_event.body
        if not body:
            raise BadRequestError("Request body is required")

        if self.app.current_event.is_base64_encoded:
            try:
                body = base64.b64decode(body).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as e:
                self.logger.error(f"Error decoding base64 body: {e}", exc_info=True)
                raise BadRequestError("Invalid base64 encoding in request body")

        if len(body.encode("utf-8")) > MAX_ITEM_BODY_BYTES:
            raise BadRequestError(
                "Request body is too large",
                details={"max_bytes": MAX_ITEM_BODY_BYTES},
            )

        try:
            item = json.loads(body, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise BadRequestError(f"Request body is not valid JSON: {e.msg}")

        if not isinstance(item, dict):
            raise BadRequestError("Request body must be a JSON object")

        return convert_to_dynamodb_type(item)
