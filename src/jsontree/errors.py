"""Exceptions raised by jsontree."""

from typing import Optional


class JsonTreeError(Exception):
    """Base class for every error raised by this package."""


class TypeMismatch(JsonTreeError, TypeError):
    """A value was read or built as a variant it is not."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class IndexOutOfRange(JsonTreeError, IndexError):
    """An array index is outside the stored elements."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of range for array of length {length}")
        self.index = index
        self.length = length


class OwnershipError(JsonTreeError, ValueError):
    """A value cannot be attached without aliasing or creating a cycle."""


class ParseError(JsonTreeError, ValueError):
    """Parsing failed at a specific position of the input.

    Attributes:
        msg: Unformatted error message
        doc: The text being parsed
        pos: Offset into ``doc`` where parsing failed
        lineno: Line corresponding to ``pos`` (1-based)
        colno: Column corresponding to ``pos`` (1-based)
        expected: The construct the parser was looking for, if any
    """

    def __init__(self, msg: str, doc: str = "", pos: int = 0, expected: Optional[str] = None) -> None:
        lineno = doc.count("\n", 0, pos) + 1
        colno = pos - doc.rfind("\n", 0, pos)
        super().__init__(f"{msg}: line {lineno} column {colno} (char {pos})")
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
        self.expected = expected

    def __reduce__(self):
        return self.__class__, (self.msg, self.doc, self.pos, self.expected)


class UnexpectedEndOfInput(ParseError):
    """The input ended while a token was still expected."""


class ExpectedToken(ParseError):
    """A specific token was required but something else was found."""


class UnrecognizedLiteral(ParseError):
    """A bare word is not one of ``true``, ``false`` or ``null``."""


class NumericConversionFailure(ParseError):
    """A number token cannot be converted to a finite double."""


class TrailingCharacters(ParseError):
    """Non-whitespace text follows the top-level value."""


class NestingTooDeep(ParseError):
    """Containers in the input are nested deeper than the parser allows."""


class TreeTooDeep(JsonTreeError, ValueError):
    """A value tree is nested too deeply to serialize."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Containers nested deeper than {limit} levels cannot be serialized")
        self.limit = limit

    def __reduce__(self):
        return self.__class__, (self.limit,)
