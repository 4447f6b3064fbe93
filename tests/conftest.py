"""Shared test fixtures for SafeDict toolkit tests."""

import pytest
import yaml

from safedict import SafeDict

# Keys that clash with member names of SafeDict or of generic objects
COLLIDING_KEYS = [
    "",
    "0",
    "-1",
    "toString",
    "constructor",
    "__proto__",
    "hasOwnProperty",
    "valueOf",
    "get",
    "set",
    "has",
    "delete",
    "keys",
    "values",
    "items",
    "_store",
    "__class__",
    "__dict__",
    "__slots__",
    "__getattr__",
    "__init__",
    ":toString",
    "key with spaces",
    "ключ",
]


@pytest.fixture
def colliding_keys():
    """Keys that would clash with members of a naive attribute-backed store."""
    return list(COLLIDING_KEYS)


@pytest.fixture
def safe_dict():
    """A SafeDict with a few entries, including falsy values."""
    return SafeDict({"a": 1, "b": None, "c": 0, "toString": "str"})


@pytest.fixture
def write_seed(tmp_path):
    """Write a seed file and return its path."""

    def _write(data, name="seed.yaml"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data)
        else:
            with open(path, "w") as f:
                yaml.safe_dump(data, f)
        return path

    return _write
