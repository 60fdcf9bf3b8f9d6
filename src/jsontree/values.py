"""The value model: a closed set of six variants forming an ownership tree.

Every container exclusively owns its children. A value records the container
it belongs to, which lets ``Array.add`` and ``Object.add`` refuse values that
are already attached somewhere else and containers that would end up inside
themselves. Use ``copy()`` to place the same content in two locations.
"""

import math
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from .errors import IndexOutOfRange, NumericConversionFailure, OwnershipError, TypeMismatch
from .types import ValueType


def _type_name(obj: Any) -> str:
    if isinstance(obj, Value):
        return obj.type.value
    return type(obj).__name__


class Value:
    """Base class of every variant.

    Typed accessors raise ``TypeMismatch`` unless overridden by the matching
    variant; nothing is ever coerced.
    """

    type: ValueType

    def __init__(self) -> None:
        self._owner: Optional["Value"] = None

    @property
    def owner(self) -> Optional["Value"]:
        """The container holding this value, or None for a root."""
        return self._owner

    def is_null(self) -> bool:
        return False

    def as_string(self) -> str:
        raise TypeMismatch(ValueType.STRING.value, self.type.value)

    def as_number(self) -> float:
        raise TypeMismatch(ValueType.NUMBER.value, self.type.value)

    def as_boolean(self) -> bool:
        raise TypeMismatch(ValueType.BOOLEAN.value, self.type.value)

    def as_array(self) -> "Array":
        raise TypeMismatch(ValueType.ARRAY.value, self.type.value)

    def as_object(self) -> "Object":
        raise TypeMismatch(ValueType.OBJECT.value, self.type.value)

    def copy(self) -> "Value":
        """Return a detached deep copy."""
        raise NotImplementedError

    def serialize(self, indent: int = 0) -> str:
        """Serialize this value to text.

        Args:
            indent: Spaces per nesting level; 0 produces compact output

        Returns:
            The textual form of the value
        """
        from .encoder import serialize

        return serialize(self, {"indent": indent})

    def __str__(self) -> str:
        return self.serialize()


class _Scalar(Value):
    __match_args__ = ("value",)

    def __init__(self, value: Any) -> None:
        super().__init__()
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def copy(self) -> Value:
        return self.__class__(self._value)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class Null(_Scalar):
    type = ValueType.NULL
    __match_args__ = ()

    def __init__(self) -> None:
        super().__init__(None)

    def is_null(self) -> bool:
        return True

    def copy(self) -> Value:
        return Null()

    def __repr__(self) -> str:
        return "Null()"


class Boolean(_Scalar):
    type = ValueType.BOOLEAN

    def __init__(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeMismatch("bool", _type_name(value))
        super().__init__(value)

    def as_boolean(self) -> bool:
        return self._value


class Number(_Scalar):
    """A double precision number. NaN and infinities have no textual form and are refused."""

    type = ValueType.NUMBER

    def __init__(self, value: Union[int, float]) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeMismatch("int or float", _type_name(value))
        try:
            number = float(value)
        except OverflowError:
            raise NumericConversionFailure(
                f"Integer of {value.bit_length()} bits is out of double range", "", 0, "finite number"
            ) from None
        if not math.isfinite(number):
            raise NumericConversionFailure(f"Number must be finite, got {number!r}", "", 0, "finite number")
        super().__init__(number)

    def as_number(self) -> float:
        return self._value


class String(_Scalar):
    type = ValueType.STRING

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeMismatch("str", _type_name(value))
        super().__init__(value)

    def as_string(self) -> str:
        return self._value


class _Container(Value):
    __match_args__ = ()

    def _adopt(self, value: Value) -> None:
        if not isinstance(value, Value):
            raise TypeMismatch("Value", _type_name(value))
        if value._owner is not None:
            raise OwnershipError(f"{value.type.value} value already belongs to a container; add a copy() instead")
        node: Optional[Value] = self
        while node is not None:
            if node is value:
                raise OwnershipError("A container cannot be added to itself or its descendants")
            node = node._owner
        value._owner = self


class Array(_Container):
    """Ordered sequence of values."""

    type = ValueType.ARRAY

    def __init__(self, values: Iterable[Value] = ()) -> None:
        super().__init__()
        self._items: list = []
        for value in values:
            self.add(value)

    def add(self, value: Value) -> "Array":
        """Append ``value`` and return the array."""
        self._adopt(value)
        self._items.append(value)
        return self

    def get(self, index: int) -> Value:
        """Return the element stored at ``index``.

        Raises:
            IndexOutOfRange: If ``index`` is negative or not below the length
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeMismatch("int index", _type_name(index))
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRange(index, len(self._items))
        return self._items[index]

    def values(self) -> Tuple[Value, ...]:
        return tuple(self._items)

    def as_array(self) -> "Array":
        return self

    def copy(self) -> "Array":
        return Array(value.copy() for value in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Array({self._items!r})"


class Object(_Container):
    """Mapping from string keys to values, iterated in insertion order."""

    type = ValueType.OBJECT

    def __init__(self, items: Union[Mapping[str, Value], Iterable[Tuple[str, Value]], None] = None) -> None:
        super().__init__()
        self._values: Dict[str, Value] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: Value) -> "Object":
        """Insert ``key`` or overwrite its value in place, then return the object.

        An overwritten key keeps its original position; the replaced value is
        released and may be attached elsewhere.
        """
        if not isinstance(key, str):
            raise TypeMismatch("string key", _type_name(key))
        current = self._values.get(key)
        if current is value:
            return self
        self._adopt(value)
        if current is not None:
            current._owner = None
        self._values[key] = value
        return self

    def get(self, key: str) -> Optional[Value]:
        """Return the value stored under ``key``, or None when absent."""
        return self._values.get(key)

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._values)

    def values(self) -> Tuple[Value, ...]:
        return tuple(self._values.values())

    def items(self) -> Tuple[Tuple[str, Value], ...]:
        return tuple(self._values.items())

    def as_object(self) -> "Object":
        return self

    def copy(self) -> "Object":
        return Object((key, value.copy()) for key, value in self._values.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return list(self._values.items()) == list(other._values.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Object({self._values!r})"
