"""Encoders for different value types."""

from typing import List

from .constants import CLOSE_BRACE, CLOSE_BRACKET, COLON, COMMA, MAX_NESTING_DEPTH, OPEN_BRACE, OPEN_BRACKET
from .errors import TreeTooDeep
from .primitives import encode_key, encode_primitive
from .types import Depth, ResolvedSerializeOptions
from .values import Array, Object, Value


def encode_value(value: Value, options: ResolvedSerializeOptions, depth: Depth = 0) -> str:
    """Encode a value to text.

    Args:
        value: Value tree to encode
        options: Resolved serialization options
        depth: Current nesting depth

    Returns:
        Encoded text

    Raises:
        TreeTooDeep: If containers nest deeper than MAX_NESTING_DEPTH levels
    """
    if isinstance(value, (Array, Object)) and depth >= MAX_NESTING_DEPTH:
        raise TreeTooDeep(MAX_NESTING_DEPTH)
    if isinstance(value, Array):
        return encode_array(value, options, depth)
    if isinstance(value, Object):
        return encode_object(value, options, depth)
    return encode_primitive(value)


def encode_array(arr: Array, options: ResolvedSerializeOptions, depth: Depth) -> str:
    """Encode an array.

    Args:
        arr: Array to encode
        options: Resolved serialization options
        depth: Nesting depth of the array itself
    """
    members: List[str] = []
    for item in arr:
        members.append(encode_value(item, options, depth + 1))
    return _join_members(OPEN_BRACKET, members, CLOSE_BRACKET, options, depth)


def encode_object(obj: Object, options: ResolvedSerializeOptions, depth: Depth) -> str:
    """Encode an object, keys in insertion order.

    Args:
        obj: Object to encode
        options: Resolved serialization options
        depth: Nesting depth of the object itself
    """
    members: List[str] = []
    for key, value in obj.items():
        members.append(encode_key_value_pair(key, value, options, depth + 1))
    return _join_members(OPEN_BRACE, members, CLOSE_BRACE, options, depth)


def encode_key_value_pair(key: str, value: Value, options: ResolvedSerializeOptions, depth: Depth) -> str:
    separator = f"{COLON} " if options.pretty else COLON
    return f"{encode_key(key)}{separator}{encode_value(value, options, depth)}"


def _join_members(open_char: str, members: List[str], close_char: str, options: ResolvedSerializeOptions, depth: Depth) -> str:
    if not members:
        return f"{open_char}{close_char}"
    if not options.pretty:
        return f"{open_char}{COMMA.join(members)}{close_char}"

    inner = " " * (options.indent * (depth + 1))
    outer = " " * (options.indent * depth)
    body = f"{COMMA}\n".join(f"{inner}{member}" for member in members)
    return f"{open_char}\n{body}\n{outer}{close_char}"
