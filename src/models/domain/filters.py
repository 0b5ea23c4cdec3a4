"""Filter conditions supplied by callers when browsing a table."""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import AttributeType, ComparisonOperator

FilterValue = Union[Decimal, str]


class FilterCondition(BaseModel):
    """A single `attribute <operator> value` condition.

    The value is resolved once, at validation time, according to the declared
    type: NUMBER values become Decimal (the only numeric type boto3 accepts),
    everything else stays a string.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    operator: ComparisonOperator = Field(ComparisonOperator.EQ)
    value: FilterValue = Field(...)
    type: AttributeType = Field(AttributeType.STRING)

    @model_validator(mode="before")
    @classmethod
    def coerce_value(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "value" not in data:
            return data
        declared = data.get("type", AttributeType.STRING.value)
        value = data["value"]
        if declared in (AttributeType.NUMBER, AttributeType.NUMBER.value):
            try:
                number = Decimal(str(value).strip())
            except InvalidOperation:
                raise ValueError(f"'{value}' is not a number")
            if not number.is_finite():
                raise ValueError(f"'{value}' is not a finite number")
            return {**data, "value": number}
        return {**data, "value": str(value)}


FilterSpec = Dict[str, FilterCondition]
