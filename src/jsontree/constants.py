"""Constants shared by the parser and serializer."""

import re

# Structural characters
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
COLON = ":"
COMMA = ","
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"

# Literals
NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
LITERALS = {
    "n": NULL_LITERAL,
    "t": TRUE_LITERAL,
    "f": FALSE_LITERAL,
}

WHITESPACE = frozenset(" \t\r\n")

# Escape character -> decoded character
ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    '"': '"',
    "\\": "\\",
}

# Decoded character -> escape sequence, used on output
REVERSE_ESCAPES = {char: BACKSLASH + key for key, char in ESCAPES.items()}

NUMBER_START = frozenset("-+0123456789")
NUMBER_CHARS = frozenset("-+.0123456789eE")
NUMBER_PATTERN = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?")

# Largest magnitude below which every integer is exactly representable as a double
MAX_EXACT_INTEGER = 2**53

# Deepest container nesting accepted by the parser and the serializer
MAX_NESTING_DEPTH = 200
