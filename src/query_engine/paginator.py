"""Drive repeated scan or query calls across server-side pages."""

from typing import Callable, List, Optional

from aws_lambda_powertools.logging import Logger

from ..models.domain import CompositeKey, Item, PaginationResult, ScanPage

logger = Logger()

DEFAULT_MAX_CALLS = 10

IssueCall = Callable[[Optional[CompositeKey]], ScanPage]
StopPredicate = Callable[[List[Item], Optional[CompositeKey]], bool]


def paginate(
    issue_call: IssueCall,
    start_key: Optional[CompositeKey],
    should_stop: StopPredicate,
    max_calls: int = DEFAULT_MAX_CALLS,
) -> PaginationResult:
    """Call the store until the predicate is satisfied or the store is exhausted.

    Calls are issued one after another, each resuming from the token returned
    by the previous one. Errors raised by issue_call propagate unchanged.

    Args:
        issue_call: Performs one scan or query starting after the given key
        start_key: Key to resume after, None to start from the beginning
        should_stop: Called after every call with all items accumulated so far
            and the token that call returned
        max_calls: Upper bound on calls per invocation

    Returns:
        PaginationResult with every accumulated item. capped is set when the
        call bound ended the walk while the store still had more to read.
    """
    if max_calls < 1:
        raise ValueError(f"max_calls must be at least 1, got {max_calls}")

    items: List[Item] = []
    last_key = start_key
    calls = 0

    while True:
        page = issue_call(last_key)
        calls += 1
        items.extend(page.items)
        last_key = page.last_evaluated_key

        if should_stop(items, last_key) or not last_key:
            return PaginationResult(items=items, last_evaluated_key=last_key, calls=calls)

        if calls >= max_calls:
            logger.warning(
                "Call limit reached before the page was filled",
                extra={"calls": calls, "items": len(items)},
            )
            return PaginationResult(
                items=items, last_evaluated_key=last_key, calls=calls, capped=True
            )
