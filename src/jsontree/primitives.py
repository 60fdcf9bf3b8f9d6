"""Text forms of scalar values and object keys."""

from decimal import Decimal

from .constants import DOUBLE_QUOTE, FALSE_LITERAL, MAX_EXACT_INTEGER, NULL_LITERAL, REVERSE_ESCAPES, TRUE_LITERAL
from .values import Boolean, Null, Number, String, Value


def encode_primitive(value: Value) -> str:
    """Encode a scalar value.

    Args:
        value: A Null, Boolean, Number or String

    Returns:
        Encoded text
    """
    if isinstance(value, Null):
        return NULL_LITERAL
    if isinstance(value, Boolean):
        return TRUE_LITERAL if value.value else FALSE_LITERAL
    if isinstance(value, Number):
        return encode_number(value.value)
    if isinstance(value, String):
        return encode_string(value.value)
    raise TypeError(f"Not a scalar value: {value!r}")


def encode_number(number: float) -> str:
    """Format a finite double so that it parses back to the same double.

    Integral values print without a fractional part; everything else uses the
    shortest repr, expanded to positional notation when repr picks an exponent.
    """
    if number.is_integer() and abs(number) < MAX_EXACT_INTEGER:
        return str(int(number))
    text = repr(number)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def encode_string(value: str) -> str:
    """Quote a string, escaping quotes, backslashes and the named control characters."""
    escaped = "".join(REVERSE_ESCAPES.get(char, char) for char in value)
    return f"{DOUBLE_QUOTE}{escaped}{DOUBLE_QUOTE}"


def encode_key(key: str) -> str:
    return encode_string(key)
