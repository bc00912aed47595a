import math

import pytest

from jsoncompact import decode, encode, measure

VALUES = [
    {"name": "test", "nested": {"arr": [1, "two", True]}, "special": "Hello 🌍!"},
    {"users": [{"id": 1, "name": "John Doe", "roles": ["admin", "user"]}], "settings": {"theme": "dark"}},
    {"emptyObj": {}, "emptyArr": [], "mixed": {"nested": {}}},
    {"quote": 'He said "hello"', "escape": "line\nbreak", "tab": "\t", "slash": "a\\b"},
    {"greeting": "Hällö Wörld 🎉", "symbols": "©®™€", "mixed": "Test_123-äöüßñç"},
    {"floats": [1.0, -0.5, 2.5e-10, 1e21], "ints": [0, -1, 10**20]},
    [[1, 2], [], [{"a": None}], "x y"],
    {"empty": "", "space": " ", "email": "alice@example.com"},
]


@pytest.mark.parametrize("value", VALUES)
def test_decode_reverses_encode(value):
    assert decode(encode(value)) == value


def test_numeric_strings_become_numbers():
    assert decode(encode({"version": "1.0", "count": "3"})) == {"version": 1.0, "count": 3}


def test_literal_strings_become_literals():
    decoded = decode(encode({"a": "null", "b": "true", "c": "false", "d": "Infinity", "e": "-Infinity"}))
    assert decoded == {"a": None, "b": True, "c": False, "d": float("inf"), "e": float("-inf")}
    assert math.isnan(decode(encode({"n": "NaN"}))["n"])


def test_measure_reports_savings():
    stats = measure({"name": "test", "version": "1.0"})
    assert stats == {"jsonLength": 31, "compactLength": 23, "savings": 25.8}


def test_measure_empty_object():
    assert measure({}) == {"jsonLength": 2, "compactLength": 2, "savings": 0.0}
