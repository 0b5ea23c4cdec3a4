"""Result pages produced while walking a table."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

Item = Dict[str, Any]
CompositeKey = Dict[str, Any]


@dataclass(frozen=True)
class ScanPage:
    """Result of one underlying scan or query call."""

    items: List[Item] = field(default_factory=list)
    last_evaluated_key: Optional[CompositeKey] = None


@dataclass(frozen=True)
class PaginationResult:
    """Items accumulated over consecutive scan or query calls.

    Attributes:
        items: Every item returned, in store order
        last_evaluated_key: Continuation token of the last call, None when exhausted
        calls: Number of underlying calls issued
        capped: True when the call cap stopped the walk before it was satisfied
    """

    items: List[Item]
    last_evaluated_key: Optional[CompositeKey]
    calls: int
    capped: bool = False


@dataclass(frozen=True)
class Page:
    """One page of a requested size.

    Attributes:
        items: At most page_size items
        next_key: Key to resume after, None when the table is exhausted
        truncated: True when the call cap ended the page early; more items may follow
    """

    items: List[Item]
    next_key: Optional[CompositeKey] = None
    truncated: bool = False
