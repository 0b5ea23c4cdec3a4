"""Table schema domain models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import AttributeType, KeyType


class KeySchemaElement(BaseModel):
    """One attribute of a key schema and the role it plays."""

    model_config = ConfigDict(frozen=True)

    attribute_name: str = Field(..., description="Name of the key attribute")
    key_type: KeyType = Field(..., description="HASH or RANGE")


class AttributeDefinition(BaseModel):
    """Declared scalar type of a key attribute."""

    model_config = ConfigDict(frozen=True)

    attribute_name: str = Field(..., description="Name of the attribute")
    attribute_type: AttributeType = Field(..., description="S, N or B")


def order_key_schema(key_schema: List[KeySchemaElement]) -> List[KeySchemaElement]:
    """Return the key schema with the HASH element first."""
    return sorted(key_schema, key=lambda element: element.key_type != KeyType.HASH)


class IndexDescriptor(BaseModel):
    """Key schema a read runs against: the table itself or a secondary index.

    Attributes:
        index_name: Name of the secondary index, None for the table itself
        key_schema: Ordered key schema, HASH first
        projection_type: Attribute projection the index exposes
    """

    model_config = ConfigDict(frozen=True)

    index_name: Optional[str] = Field(None, description="Secondary index name")
    key_schema: List[KeySchemaElement] = Field(..., min_length=1, max_length=2)
    projection_type: str = Field("ALL", description="ALL, KEYS_ONLY or INCLUDE")

    def has_key_attribute(self, attribute_name: str) -> bool:
        return any(
            element.attribute_name == attribute_name for element in self.key_schema
        )

    @property
    def key_attribute_names(self) -> List[str]:
        return [element.attribute_name for element in self.key_schema]


class TableDescription(BaseModel):
    """Metadata of a table as reported by the store.

    Attributes:
        table_name: Name of the table
        key_schema: Primary key schema, HASH first
        attribute_definitions: Types of every key attribute of the table and its indexes
        global_secondary_indexes: Global secondary indexes
        local_secondary_indexes: Local secondary indexes
        item_count: Approximate number of items
        table_size_bytes: Approximate table size
        table_status: Table status (ACTIVE, CREATING, ...)
    """

    model_config = ConfigDict(frozen=True)

    table_name: str
    key_schema: List[KeySchemaElement] = Field(..., min_length=1, max_length=2)
    attribute_definitions: List[AttributeDefinition] = Field(default_factory=list)
    global_secondary_indexes: List[IndexDescriptor] = Field(default_factory=list)
    local_secondary_indexes: List[IndexDescriptor] = Field(default_factory=list)
    item_count: Optional[int] = None
    table_size_bytes: Optional[int] = None
    table_status: Optional[str] = None

    def _key_element(self, key_type: KeyType) -> Optional[KeySchemaElement]:
        return next(
            (element for element in self.key_schema if element.key_type == key_type),
            None,
        )

    @property
    def hash_key(self) -> KeySchemaElement:
        element = self._key_element(KeyType.HASH)
        if element is None:
            raise ValueError(f"Table {self.table_name} has no HASH key")
        return element

    @property
    def range_key(self) -> Optional[KeySchemaElement]:
        return self._key_element(KeyType.RANGE)

    @property
    def key_attribute_names(self) -> List[str]:
        return [element.attribute_name for element in self.key_schema]

    @property
    def secondary_indexes(self) -> List[IndexDescriptor]:
        return [*self.global_secondary_indexes, *self.local_secondary_indexes]

    def attribute_type(self, attribute_name: str) -> AttributeType:
        """Declared type of a key attribute; STRING when undeclared."""
        for definition in self.attribute_definitions:
            if definition.attribute_name == attribute_name:
                return definition.attribute_type
        return AttributeType.STRING

    def as_index(self) -> IndexDescriptor:
        return IndexDescriptor(index_name=None, key_schema=self.key_schema)

    def find_index(self, index_name: str) -> Optional[IndexDescriptor]:
        return next(
            (
                index
                for index in self.secondary_indexes
                if index.index_name == index_name
            ),
            None,
        )

    def empty_item(self) -> Dict[str, Any]:
        """Template item holding only the key attributes with blank values."""
        return {
            element.attribute_name: ""
            if self.attribute_type(element.attribute_name) != AttributeType.NUMBER
            else 0
            for element in self.key_schema
        }
