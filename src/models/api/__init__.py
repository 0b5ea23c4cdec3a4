"""API models for request/response handling."""

from .requests import ItemsRequest, KeyLookupRequest
from .responses import (
    IndexSummary,
    ItemKeyResponse,
    ItemsPageResponse,
    KeyAttribute,
    TableKeysResponse,
    TableListResponse,
    TableMetaResponse,
    TableResponse,
    VersionResponse,
)

__all__ = [
    # Requests
    'ItemsRequest',
    'KeyLookupRequest',

    # Responses
    'IndexSummary',
    'ItemKeyResponse',
    'ItemsPageResponse',
    'KeyAttribute',
    'TableKeysResponse',
    'TableListResponse',
    'TableMetaResponse',
    'TableResponse',
    'VersionResponse',
]
