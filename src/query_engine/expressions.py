"""Build scan and query expressions from caller supplied filters.

Every filter on an attribute that belongs to the active index's key schema
becomes part of the key condition; the store only narrows reads by key when
the condition is expressed that way. Every other filter becomes part of the
filter expression, applied by the store after the key range is read.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from ..models.domain import FilterSpec, IndexDescriptor

_PLACEHOLDER_SAFE = re.compile(r"^[A-Za-z0-9_]+$")


@dataclass(frozen=True)
class ExpressionFragments:
    """Expression parameters for one scan or query call.

    Attributes:
        attribute_names: `#alias -> attribute name`
        attribute_values: `:alias -> value`
        filter_expression: Conditions applied after the read, None when empty
        key_condition_expression: Conditions on the index key, None when empty
    """

    attribute_names: Dict[str, str] = field(default_factory=dict)
    attribute_values: Dict[str, Any] = field(default_factory=dict)
    filter_expression: Optional[str] = None
    key_condition_expression: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        """boto3 keyword arguments, leaving out every empty part."""
        params = {
            "ExpressionAttributeNames": self.attribute_names,
            "ExpressionAttributeValues": self.attribute_values,
            "FilterExpression": self.filter_expression,
            "KeyConditionExpression": self.key_condition_expression,
        }
        return {name: value for name, value in params.items() if value}


def _alias(attribute_name: str, position: int, taken: Set[str]) -> str:
    if _PLACEHOLDER_SAFE.match(attribute_name) and attribute_name not in taken:
        return attribute_name
    while f"attr{position}" in taken:
        position += 1
    return f"attr{position}"


def build_expressions(
    filters: FilterSpec, active_index: Optional[IndexDescriptor] = None
) -> ExpressionFragments:
    """Turn filters into key condition and filter expression fragments.

    Args:
        filters: Conditions by attribute name, in the order they should appear
        active_index: Index being queried; None for a scan, where nothing can
            be a key condition

    Returns:
        ExpressionFragments for the call
    """
    names: Dict[str, str] = {}
    values: Dict[str, Any] = {}
    key_conditions: List[str] = []
    filter_conditions: List[str] = []
    taken: Set[str] = set()

    for position, (attribute_name, condition) in enumerate(filters.items()):
        alias = _alias(attribute_name, position, taken)
        taken.add(alias)
        names[f"#{alias}"] = attribute_name
        values[f":{alias}"] = condition.value
        clause = f"#{alias} {condition.operator.value} :{alias}"

        if active_index is not None and active_index.has_key_attribute(
            attribute_name
        ):
            key_conditions.append(clause)
        else:
            filter_conditions.append(clause)

    return ExpressionFragments(
        attribute_names=names,
        attribute_values=values,
        filter_expression=" AND ".join(filter_conditions) or None,
        key_condition_expression=" AND ".join(key_conditions) or None,
    )
