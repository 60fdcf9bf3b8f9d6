"""Recursive-descent parser producing value trees."""

import logging
import math
import re
from typing import List, NoReturn, Optional, Type

from .constants import (
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    COMMA,
    DOUBLE_QUOTE,
    ESCAPES,
    LITERALS,
    MAX_NESTING_DEPTH,
    NULL_LITERAL,
    NUMBER_CHARS,
    NUMBER_PATTERN,
    NUMBER_START,
    OPEN_BRACE,
    OPEN_BRACKET,
    TRUE_LITERAL,
    WHITESPACE,
)
from .errors import (
    ExpectedToken,
    NestingTooDeep,
    NumericConversionFailure,
    ParseError,
    TrailingCharacters,
    UnexpectedEndOfInput,
    UnrecognizedLiteral,
)
from .values import Array, Boolean, Null, Number, Object, String, Value

logger = logging.getLogger(__name__)

# Run of characters that need no unescaping inside a string
STRING_CHUNK = re.compile(r'[^"\\]*')
WORD = re.compile(r"\w*")


class Parser:
    """Single-use parser over an immutable text.

    The cursor ``pos`` only moves forward. Any grammar violation raises a
    ``ParseError`` subclass and no partial tree is returned. Containers may
    nest at most ``max_depth`` levels.
    """

    def __init__(self, text: str, max_depth: int = MAX_NESTING_DEPTH) -> None:
        self.text = text
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth
        self._done = False

    def parse(self) -> Value:
        """Parse the whole text as exactly one value surrounded by optional whitespace."""
        if self._done:
            raise RuntimeError("Parser instances are single-use")
        self._done = True

        value = self.parse_value()
        self.skip_whitespace()
        if self.pos < len(self.text):
            self._fail(TrailingCharacters, "Extra data after top-level value", "end of input")
        return value

    def skip_whitespace(self) -> None:
        text = self.text
        end = len(text)
        while self.pos < end and text[self.pos] in WHITESPACE:
            self.pos += 1

    def parse_value(self) -> Value:
        self.skip_whitespace()
        char = self._peek("value")
        if char == OPEN_BRACE or char == OPEN_BRACKET:
            self.depth += 1
            if self.depth > self.max_depth:
                self._fail(NestingTooDeep, f"Nesting exceeds {self.max_depth} levels", "shallower nesting")
            container = self.parse_object() if char == OPEN_BRACE else self.parse_array()
            self.depth -= 1
            return container
        if char == DOUBLE_QUOTE:
            return String(self.parse_string())
        if char in NUMBER_START:
            return self.parse_number()
        if char.isalpha():
            return self.parse_literal()
        self._fail(ExpectedToken, "Expecting value", "value")

    def parse_object(self) -> Object:
        self.pos += 1
        obj = Object()

        self.skip_whitespace()
        if self._peek(f"string key or {CLOSE_BRACE!r}") == CLOSE_BRACE:
            self.pos += 1
            return obj

        while True:
            self.skip_whitespace()
            if self._peek("string key") != DOUBLE_QUOTE:
                self._fail(ExpectedToken, "Expecting property name enclosed in double quotes", "string key")
            key = self.parse_string()
            self.expect(COLON)
            obj.add(key, self.parse_value())

            self.skip_whitespace()
            char = self._peek(f"{COMMA!r} or {CLOSE_BRACE!r}")
            if char == COMMA:
                self.pos += 1
            elif char == CLOSE_BRACE:
                self.pos += 1
                return obj
            else:
                self._fail(ExpectedToken, "Expecting ',' delimiter or '}'", f"{COMMA!r} or {CLOSE_BRACE!r}")

    def parse_array(self) -> Array:
        self.pos += 1
        arr = Array()

        self.skip_whitespace()
        if self._peek(f"value or {CLOSE_BRACKET!r}") == CLOSE_BRACKET:
            self.pos += 1
            return arr

        while True:
            arr.add(self.parse_value())

            self.skip_whitespace()
            char = self._peek(f"{COMMA!r} or {CLOSE_BRACKET!r}")
            if char == COMMA:
                self.pos += 1
            elif char == CLOSE_BRACKET:
                self.pos += 1
                return arr
            else:
                self._fail(ExpectedToken, "Expecting ',' delimiter or ']'", f"{COMMA!r} or {CLOSE_BRACKET!r}")

    def parse_string(self) -> str:
        """Read a quoted string starting at the cursor and return its decoded text.

        Named escapes map to their control characters; any other escaped
        character is kept as-is without the backslash.
        """
        text = self.text
        self.pos += 1
        chunks: List[str] = []
        while True:
            match = STRING_CHUNK.match(text, self.pos)
            chunks.append(match.group())
            self.pos = match.end()

            terminator = self._peek(f"closing {DOUBLE_QUOTE!r}")
            self.pos += 1
            if terminator == DOUBLE_QUOTE:
                return "".join(chunks)

            # terminator is a backslash
            escaped = self._peek("escaped character")
            chunks.append(ESCAPES.get(escaped, escaped))
            self.pos += 1

    def parse_number(self) -> Number:
        text = self.text
        start = self.pos
        end = len(text)
        while self.pos < end and text[self.pos] in NUMBER_CHARS:
            self.pos += 1
        token = text[start : self.pos]

        if NUMBER_PATTERN.fullmatch(token) is None:
            raise NumericConversionFailure(f"Malformed number {token!r}", text, start, "number")
        number = float(token)
        if not math.isfinite(number):
            raise NumericConversionFailure(f"Number {token!r} out of double range", text, start, "number")
        return Number(number)

    def parse_literal(self) -> Value:
        literal = LITERALS.get(self.text[self.pos])
        if literal is not None and self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            if literal == NULL_LITERAL:
                return Null()
            return Boolean(literal == TRUE_LITERAL)

        word = WORD.match(self.text, self.pos).group()
        self._fail(UnrecognizedLiteral, f"Unrecognized literal {word!r}", "true, false or null")

    def expect(self, token: str) -> None:
        """Consume ``token`` after optional whitespace."""
        self.skip_whitespace()
        if self._peek(repr(token)) != token:
            self._fail(ExpectedToken, f"Expecting {token!r}", repr(token))
        self.pos += 1

    def _peek(self, expected: str) -> str:
        if self.pos >= len(self.text):
            self._fail(UnexpectedEndOfInput, f"Unexpected end of input, expecting {expected}", expected)
        return self.text[self.pos]

    def _fail(self, error: Type[ParseError], msg: str, expected: Optional[str]) -> NoReturn:
        raise error(msg, self.text, self.pos, expected)


def parse(text: str) -> Value:
    """Parse text into a value tree.

    Args:
        text: Input text holding exactly one value

    Returns:
        The root of a freshly built value tree

    Raises:
        ParseError: A subclass naming the failure, with the cursor position
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")

    try:
        value = Parser(text).parse()
    except ParseError as exc:
        logger.debug("Parse failed with %s at char %d: %s", exc.__class__.__name__, exc.pos, exc.msg)
        raise
    logger.debug("Parsed %d chars into %s", len(text), value.type.value)
    return value
