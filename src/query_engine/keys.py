"""Composite primary key extraction, encoding and parsing.

Keys travel through URLs as a comma-separated list of components (hash key
first, then range key, then any index key attributes a cursor needs), each
component percent-encoded on its own so a comma inside a value can never be
mistaken for the delimiter.
"""

import base64
import binascii
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote, unquote

from boto3.dynamodb.types import Binary

from ..middleware.exceptions import (
    KeyFormatError,
    KeyTypeError,
    MissingKeyAttributeError,
)
from ..models.domain import (
    AttributeType,
    CompositeKey,
    IndexDescriptor,
    Item,
    KeySchemaElement,
    TableDescription,
    order_key_schema,
)

KEY_DELIMITER = ","


def extract_key(item: Item, key_schema: List[KeySchemaElement]) -> CompositeKey:
    """Select the key attributes of an item, HASH first.

    Args:
        item: The item to take the key from
        key_schema: Key schema naming the attributes to select

    Returns:
        Mapping of key attribute name to value

    Raises:
        MissingKeyAttributeError: If the item lacks one of the key attributes
    """
    key: CompositeKey = {}
    for element in order_key_schema(key_schema):
        if element.attribute_name not in item:
            raise MissingKeyAttributeError(element.attribute_name)
        key[element.attribute_name] = item[element.attribute_name]
    return key


def _component_to_text(value: Any) -> str:
    if isinstance(value, Binary):
        value = value.value
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return str(value)


def encode_key(key: CompositeKey) -> str:
    """Encode a key, in its attribute order, into a URL-safe string."""
    return KEY_DELIMITER.join(
        quote(_component_to_text(value), safe="") for value in key.values()
    )


def _coerce_component(text: str, attribute_type: AttributeType, name: str) -> Any:
    if attribute_type == AttributeType.NUMBER:
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise KeyTypeError(
                f"Key attribute '{name}' must be a number, got '{text}'",
                details={"attribute_name": name, "value": text},
            )
        if not number.is_finite():
            raise KeyTypeError(
                f"Key attribute '{name}' must be a finite number, got '{text}'",
                details={"attribute_name": name, "value": text},
            )
        return number
    if attribute_type == AttributeType.BINARY:
        try:
            return base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError):
            raise KeyTypeError(
                f"Key attribute '{name}' must be base64 encoded binary",
                details={"attribute_name": name, "value": text},
            )
    return text


def cursor_key_schema(
    table: TableDescription, index: Optional[IndexDescriptor] = None
) -> List[KeySchemaElement]:
    """Key schema identifying a position in a scan or query.

    For the table itself this is the primary key. For a secondary index the
    store needs both the index key and the table key to resume, so the index
    key attributes that are not part of the primary key are appended.
    """
    schema = order_key_schema(table.key_schema)
    if index is None or index.index_name is None:
        return schema
    names = {element.attribute_name for element in schema}
    extra = [
        element
        for element in order_key_schema(index.key_schema)
        if element.attribute_name not in names
    ]
    return [*schema, *extra]


def parse_key(
    encoded: str,
    table: TableDescription,
    index: Optional[IndexDescriptor] = None,
) -> CompositeKey:
    """Decode a string produced by encode_key back into a typed key.

    Args:
        encoded: The encoded key
        table: Description of the table the key belongs to
        index: Secondary index the key positions a cursor in, if any

    Returns:
        Key with each component coerced to its declared attribute type

    Raises:
        KeyFormatError: If the component count does not match the key schema
        KeyTypeError: If a component cannot be coerced to its declared type
    """
    schema = cursor_key_schema(table, index)
    components = encoded.split(KEY_DELIMITER) if encoded else []
    if len(components) != len(schema):
        raise KeyFormatError(
            f"Expected {len(schema)} key component(s), got {len(components)}",
            details={
                "key": encoded,
                "attributes": [element.attribute_name for element in schema],
            },
        )

    key: CompositeKey = {}
    for element, component in zip(schema, components):
        name = element.attribute_name
        key[name] = _coerce_component(
            unquote(component), table.attribute_type(name), name
        )
    return key


def extract_keys_for_items(items: Iterable[Item]) -> List[str]:
    """Names of every attribute seen across items, in first-seen order."""
    seen: Dict[str, None] = {}
    for item in items:
        for name in item:
            seen.setdefault(name, None)
    return list(seen)
