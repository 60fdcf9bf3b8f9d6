"""Type definitions for jsontree."""

from enum import Enum
from typing import Any, Dict, List, TypedDict, Union

# Plain Python data accepted by from_python / produced by to_python
PyPrimitive = Union[str, int, float, bool, None]
PyObject = Dict[str, Any]
PyArray = List[Any]
PyValue = Union[PyPrimitive, PyArray, PyObject]


class ValueType(Enum):
    """Variant tag of a Value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class SerializeOptions(TypedDict, total=False):
    """Options for serialization.

    Attributes:
        indent: Number of spaces per indentation level, 0 for compact output (default: 0)
    """

    indent: int


class ResolvedSerializeOptions:
    """Resolved serialization options with defaults applied."""

    def __init__(self, indent: int = 0) -> None:
        self.indent = indent

    @property
    def pretty(self) -> bool:
        return self.indent > 0


# Depth type for tracking indentation level
Depth = int
