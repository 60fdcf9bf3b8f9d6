"""Core serialization functionality."""

from typing import Optional

from .encoders import encode_value
from .types import ResolvedSerializeOptions, SerializeOptions
from .values import Value


def serialize(value: Value, options: Optional[SerializeOptions] = None) -> str:
    """Serialize a value tree to text.

    Args:
        value: Root of the value tree
        options: Optional serialization options

    Returns:
        Compact text when indent is 0, otherwise one element per line
    """
    if not isinstance(value, Value):
        raise TypeError(f"serialize() expects a Value, got {type(value).__name__}; use from_python() first")
    resolved_options = resolve_options(options)
    return encode_value(value, resolved_options, 0)


def resolve_options(options: Optional[SerializeOptions]) -> ResolvedSerializeOptions:
    """Resolve serialization options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied

    Raises:
        ValueError: If indent is negative or not an integer
    """
    if options is None:
        return ResolvedSerializeOptions()

    indent = options.get("indent", 0)

    if isinstance(indent, bool) or not isinstance(indent, int):
        raise ValueError(f"indent must be an integer, got {indent!r}")
    if indent < 0:
        raise ValueError(f"indent must be >= 0, got {indent}")

    return ResolvedSerializeOptions(indent=indent)
