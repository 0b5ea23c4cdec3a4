"""Assemble fixed-size pages out of server-paginated results."""

from typing import List, Optional

from aws_lambda_powertools.logging import Logger

from ..models.domain import CompositeKey, Item, KeySchemaElement, Page
from .keys import extract_key
from .paginator import DEFAULT_MAX_CALLS, IssueCall, paginate

logger = Logger()


def get_page(
    issue_call: IssueCall,
    key_schema: List[KeySchemaElement],
    page_size: int,
    start_key: Optional[CompositeKey] = None,
    max_calls: int = DEFAULT_MAX_CALLS,
) -> Page:
    """Collect one page of page_size items and the key to resume after it.

    The walk collects one item more than the page holds: that is the only way
    to tell a table that ends exactly at the page boundary from one with more
    items after it.

    Args:
        issue_call: Performs one scan or query starting after the given key
        key_schema: Schema of the key used to resume, see cursor_key_schema
        page_size: Number of items per page
        start_key: Key to resume after, None for the first page
        max_calls: Upper bound on underlying calls

    Returns:
        Page with the items and next_key. next_key is the key of the last item
        on the page, since the store resumes strictly after a start key.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    def should_stop(items: List[Item], last_key: Optional[CompositeKey]) -> bool:
        return len(items) > page_size or not last_key

    result = paginate(issue_call, start_key, should_stop, max_calls)
    items = result.items

    if len(items) > page_size:
        items = items[:page_size]
        return Page(items=items, next_key=extract_key(items[-1], key_schema))

    if result.capped:
        logger.info(
            "Returning a short page, more items may follow",
            extra={"items": len(items), "calls": result.calls},
        )
        return Page(items=items, next_key=result.last_evaluated_key, truncated=True)

    return Page(items=items)
