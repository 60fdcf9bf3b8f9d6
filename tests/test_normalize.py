import pytest

from jsontree import Array, Boolean, Null, Number, Object, OwnershipError, String, TypeMismatch, from_python, to_python


class _V2Model:
    """Stand-in exposing the Pydantic v2 model surface."""

    model_fields = {"name": None, "size": None}

    def __init__(self, name, size):
        self.name = name
        self.size = size

    def model_dump(self):
        return {"name": self.name, "size": self.size}


class _V1Model:
    __fields__ = {"label": None}

    def __init__(self, label):
        self.label = label

    def dict(self):
        return {"label": self.label}


def test_from_python_builds_typed_tree() -> None:
    tree = from_python({"a": [1, 2.5, True, None, "x"], "b": {}})
    expected = Object(
        [
            ("a", Array([Number(1), Number(2.5), Boolean(True), Null(), String("x")])),
            ("b", Object()),
        ]
    )
    assert tree == expected


def test_bool_is_not_a_number() -> None:
    assert from_python(True) == Boolean(True)
    assert from_python(1) == Number(1)


def test_tuples_become_arrays() -> None:
    assert from_python((1, "a")) == Array([Number(1), String("a")])


def test_models_are_dumped() -> None:
    assert to_python(from_python(_V2Model("bolt", 3))) == {"name": "bolt", "size": 3.0}
    assert to_python(from_python([_V1Model("nut")])) == [{"label": "nut"}]


def test_existing_values_are_copied() -> None:
    inner = String("s")
    Array().add(inner)
    tree = from_python({"s": inner})
    assert tree.as_object().get("s") == inner
    assert tree.as_object().get("s") is not inner


def test_unsupported_types() -> None:
    with pytest.raises(TypeMismatch):
        from_python({1: "non-string key"})
    with pytest.raises(TypeMismatch):
        from_python({"s": {1, 2}})


def test_circular_python_data() -> None:
    data: list = []
    data.append(data)
    with pytest.raises(OwnershipError):
        from_python(data)


def test_shared_python_data_is_not_circular() -> None:
    shared = [1]
    tree = from_python([shared, shared])
    assert tree == Array([Array([Number(1)]), Array([Number(1)])])


def test_to_python_round_trip() -> None:
    data = {"z": [1, {"k": None}], "a": "text", "flag": False}
    result = to_python(from_python(data))
    assert result == data
    assert list(result) == ["z", "a", "flag"]
    assert isinstance(result["z"][0], float)


def test_to_python_rejects_plain_data() -> None:
    with pytest.raises(TypeMismatch):
        to_python({"a": 1})
