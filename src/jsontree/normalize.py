"""Conversion between value trees and plain Python data."""

from collections.abc import Mapping
from typing import Any, Optional, Set

from .errors import OwnershipError, TypeMismatch
from .types import PyValue
from .values import Array, Boolean, Null, Number, Object, String, Value


def _model_data(value: Any) -> Optional[Any]:
    """Return the field data of a Pydantic-style model, or None for anything else.

    Supports Pydantic v2 (model_dump) and v1 (dict with __fields__).
    """
    dump = getattr(value, "model_dump", None)
    if callable(dump) and hasattr(value, "model_fields"):
        return dump()
    if isinstance(getattr(value, "__fields__", None), dict) and callable(getattr(value, "dict", None)):
        return value.dict()
    return None


def from_python(value: Any) -> Value:
    """Build a detached value tree from plain Python data.

    Args:
        value: None, bool, int, float, str, a mapping with string keys, a
            list or tuple, a Pydantic-style model, or an existing Value

    Returns:
        Root of a new value tree

    Raises:
        TypeMismatch: For unsupported types and non-string mapping keys
        OwnershipError: If the data refers to itself
    """
    return _normalize(value, set())


def _normalize(value: Any, active: Set[int]) -> Value:
    if isinstance(value, Value):
        return value.copy()
    if value is None:
        return Null()
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Number(value)
    if isinstance(value, str):
        return String(value)

    model = _model_data(value)
    if model is not None:
        return _normalize(model, active)

    if not isinstance(value, (Mapping, list, tuple)):
        raise TypeMismatch("JSON-compatible data", type(value).__name__)

    marker = id(value)
    if marker in active:
        raise OwnershipError("Circular reference in Python data")
    active.add(marker)
    try:
        if isinstance(value, Mapping):
            obj = Object()
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeMismatch("string key", type(key).__name__)
                obj.add(key, _normalize(item, active))
            return obj
        return Array(_normalize(item, active) for item in value)
    finally:
        active.discard(marker)


def to_python(value: Value) -> PyValue:
    """Convert a value tree to plain Python data.

    Numbers come back as floats and objects as dicts in insertion order.
    """
    if isinstance(value, Object):
        return {key: to_python(item) for key, item in value.items()}
    if isinstance(value, Array):
        return [to_python(item) for item in value]
    if isinstance(value, Value):
        return value.value  # type: ignore[attr-defined]
    raise TypeMismatch("Value", type(value).__name__)
