"""Conversion between DynamoDB values and JSON-compatible values."""

import base64
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import Binary


def normalize_dynamodb_types(data: Any) -> Any:
    """Convert DynamoDB specific types to standard Python types.

    Args:
        data: Data returned from DynamoDB that may contain Decimal, Binary or set values

    Returns:
        Data with Decimal converted to int or float, binary values to base64
        strings and sets to lists
    """
    if isinstance(data, bool):
        return data
    if isinstance(data, Decimal):
        # Whole numbers stay integers
        if data == data.to_integral_value():
            return int(data)
        return float(data)
    if isinstance(data, Binary):
        data = data.value
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(bytes(data)).decode("ascii")
    if isinstance(data, (set, frozenset)):
        return [normalize_dynamodb_types(item) for item in sorted(data, key=str)]
    if isinstance(data, (list, tuple)):
        return [normalize_dynamodb_types(item) for item in data]
    if isinstance(data, dict):
        return {k: normalize_dynamodb_types(v) for k, v in data.items()}
    return data


def convert_to_dynamodb_type(value: Any) -> Any:
    """Convert Python values to DynamoDB compatible types.

    Note:
        - Converts floats to Decimals (boto3 rejects floats)
        - Converts lists/dicts recursively
        - Handles tuples (converting to lists)
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, (list, tuple)):
        return [convert_to_dynamodb_type(item) for item in value]
    if isinstance(value, dict):
        return {k: convert_to_dynamodb_type(v) for k, v in value.items()}
    return value
