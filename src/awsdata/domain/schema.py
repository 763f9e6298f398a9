"""Declarative schema for data source attributes."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ValueType(str, Enum):
    """Attribute value types understood by the attribute store."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    LIST = "list"

    def zero_value(self) -> Any:
        """Value reported for an attribute that was never set."""
        return {
            ValueType.STRING: "",
            ValueType.INT: 0,
            ValueType.FLOAT: 0.0,
            ValueType.BOOL: False,
            ValueType.LIST: [],
        }[self]

    def accepts(self, value: Any) -> bool:
        """Check a scalar value against this type."""
        # bool is a subclass of int, keep them apart
        if self is ValueType.STRING:
            return isinstance(value, str)
        if self is ValueType.INT:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is ValueType.FLOAT:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if self is ValueType.BOOL:
            return isinstance(value, bool)
        return isinstance(value, (list, tuple))


@dataclass(frozen=True)
class SchemaField:
    """
    Describe one attribute of a data source.

    A field is either required, optional, computed, or optional and computed.
    Optional+computed fields may be supplied by the caller and are
    overwritten with the resolved value after a read. Computed-only fields are
    outputs and must not be configured.
    """

    type: ValueType
    required: bool = False
    optional: bool = False
    computed: bool = False
    elem: Optional[ValueType] = None
    description: str = ""

    def __post_init__(self) -> None:
        if self.required and (self.optional or self.computed):
            raise ValueError("A required field cannot be optional or computed")
        if not (self.required or self.optional or self.computed):
            raise ValueError("A field must be required, optional or computed")
        if self.type is ValueType.LIST and self.elem is None:
            raise ValueError("List fields must declare an element type")

    @property
    def configurable(self) -> bool:
        return self.required or self.optional

    def check(self, value: Any) -> bool:
        """Return True when value is acceptable for this field."""
        if not self.type.accepts(value):
            return False
        if self.type is ValueType.LIST:
            return all(self.elem.accepts(item) for item in value)
        return True


Schema = dict[str, SchemaField]
