"""Domain enums for the table admin service."""

from enum import Enum


class KeyType(str, Enum):
    """Role an attribute plays in a key schema.

    Inherits from str to ensure JSON serialization works correctly.
    """

    HASH = "HASH"
    RANGE = "RANGE"


class AttributeType(str, Enum):
    """Scalar attribute types a key attribute can be declared with."""

    STRING = "S"
    NUMBER = "N"
    BINARY = "B"

    @property
    def label(self) -> str:
        labels = {
            AttributeType.STRING: "String",
            AttributeType.NUMBER: "Number",
            AttributeType.BINARY: "Binary",
        }
        return labels[self]


class ComparisonOperator(str, Enum):
    """Comparison operators accepted in key and filter conditions."""

    EQ = "="
    NE = "<>"
    GE = ">="
    LE = "<="
    GT = ">"
    LT = "<"

    @property
    def label(self) -> str:
        return "≠" if self is ComparisonOperator.NE else self.value


class OperationType(str, Enum):
    """Read operation used to browse a table."""

    SCAN = "scan"
    QUERY = "query"
