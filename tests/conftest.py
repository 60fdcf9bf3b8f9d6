from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT, ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


import pytest

from jsontree import Array, Boolean, Null, Number, Object, String


@pytest.fixture
def sample_tree() -> Object:
    return Object(
        [
            ("name", String("widget")),
            ("count", Number(3)),
            ("ratio", Number(0.25)),
            ("active", Boolean(True)),
            ("owner", Null()),
            ("tags", Array([String("a"), String("b")])),
            ("empty", Object()),
        ]
    )
