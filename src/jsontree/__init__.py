"""
jsontree - typed JSON value trees for Python

Parses JSON text into an ordered tree of typed values (Null, Boolean, Number,
String, Array, Object) and serializes trees back to compact or indented text.
"""

from .decoder import Parser, parse
from .encoder import serialize
from .errors import (
    ExpectedToken,
    IndexOutOfRange,
    JsonTreeError,
    NestingTooDeep,
    NumericConversionFailure,
    OwnershipError,
    ParseError,
    TrailingCharacters,
    TreeTooDeep,
    TypeMismatch,
    UnexpectedEndOfInput,
    UnrecognizedLiteral,
)
from .normalize import from_python, to_python
from .types import SerializeOptions, ValueType
from .values import Array, Boolean, Null, Number, Object, String, Value

__version__ = "0.1.0"
__all__ = [
    "parse",
    "serialize",
    "from_python",
    "to_python",
    "Parser",
    "SerializeOptions",
    "ValueType",
    "Value",
    "Null",
    "Boolean",
    "Number",
    "String",
    "Array",
    "Object",
    "JsonTreeError",
    "TypeMismatch",
    "IndexOutOfRange",
    "OwnershipError",
    "ParseError",
    "UnexpectedEndOfInput",
    "ExpectedToken",
    "UnrecognizedLiteral",
    "NumericConversionFailure",
    "TrailingCharacters",
    "NestingTooDeep",
    "TreeTooDeep",
]
