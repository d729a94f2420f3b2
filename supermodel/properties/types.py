"""Property value types."""

from enum import Enum
from typing import Any, Union


class PropertyType(str, Enum):
    """Storage type hint for a property value."""

    BIN = "bin"
    BOOLEAN = "boolean"
    COMPLEX = "complex"
    DATE = "date"
    NULL = "null"
    NUMBER = "number"
    STRING = "string"

    @classmethod
    def coerce(cls, value: Any) -> Union["PropertyType", Any]:
        """Return the matching member, or the value unchanged for custom types."""
        if isinstance(value, cls):
            return value
        return cls._value2member_map_.get(value, value)
