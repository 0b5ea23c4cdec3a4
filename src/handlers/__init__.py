# Reexport all handlers

from .item import (
    handle_create_item,
    handle_delete_item,
    handle_get_item,
    handle_new_item_template,
    handle_replace_item,
)
from .items import handle_get_items, handle_get_table_meta
from .tables import handle_describe_table, handle_key_lookup, handle_list_tables

__all__ = [
    "handle_create_item",
    "handle_delete_item",
    "handle_describe_table",
    "handle_get_item",
    "handle_get_items",
    "handle_get_table_meta",
    "handle_key_lookup",
    "handle_list_tables",
    "handle_new_item_template",
    "handle_replace_item",
]
