import pytest

from jsoncompact.cache import StringCache
from jsoncompact.errors import InvalidInputError
from jsoncompact.primitives import (
    canonical_key,
    encode_key,
    encode_primitive,
    encode_string,
    format_number,
    is_bare_key,
    is_bare_string,
    is_valid_json_text,
)


@pytest.mark.parametrize("value", ["hello", "1.2.3", "2023-10-01", "snake_case", "Grüße", "日本語", "©®™€"])
def test_bare_strings(value):
    assert is_bare_string(value)


@pytest.mark.parametrize("value", ["", "hello world", "a\tb", "line\n", "a:b", "x{y", "🎉", "say \"hi\""])
def test_strings_needing_quotes(value):
    assert not is_bare_string(value)


def test_keys_are_narrower_than_values():
    assert is_bare_key("nested-obj")
    assert is_bare_key("2.5")
    assert not is_bare_key("snake_case")
    assert not is_bare_key("Grüße")
    assert is_bare_string("snake_case")
    assert is_bare_string("Grüße")


def test_valid_json_text_rejects_constants():
    assert is_valid_json_text('{"key": "value"}')
    assert is_valid_json_text(" 1 ")
    assert not is_valid_json_text("NaN")
    assert not is_valid_json_text("[Infinity]")
    assert not is_valid_json_text("file://test/path")


def test_format_number():
    assert format_number(42) == "42"
    assert format_number(3.14) == "3.14"
    assert format_number(1.0) == "1.0"
    assert format_number(float("nan")) == "NaN"
    assert format_number(float("inf")) == "Infinity"
    assert format_number(float("-inf")) == "-Infinity"


def test_numeric_keys_are_canonicalized_before_quoting():
    assert encode_key(3) == "3"
    assert encode_key(2.5) == "2.5"
    assert encode_key(1e21) == '"1e+21"'
    assert encode_key(True) == "true"
    assert encode_key(None) == "null"


def test_key_quoting():
    assert encode_key("key:with:colon") == '"key:with:colon"'
    assert encode_key("snake_case") == '"snake_case"'
    assert encode_key("") == '""'


def test_unsupported_key_type():
    with pytest.raises(InvalidInputError) as ei:
        canonical_key(("a", "b"))
    assert "tuple" in str(ei.value)


def test_encode_string_variants():
    assert encode_string("hello") == "hello"
    assert encode_string("hello world") == '"hello world"'
    assert encode_string("") == '""'
    assert encode_string("line\nbreak") == '"line\\nbreak"'
    assert encode_string("🎉") == '"🎉"'


def test_json_text_is_quoted_without_escaping():
    assert encode_string('{"key": "value"}') == '"{"key": "value"}"'
    assert encode_string("[1, 2]") == '"[1, 2]"'
    assert encode_string('"quoted"') == '""quoted""'


def test_encode_string_uses_cache():
    cache = StringCache()
    assert encode_string("hello world", cache) == '"hello world"'
    assert "hello world" in cache
    assert encode_string("hello world", cache) == '"hello world"'
    assert cache.hits == 1
    assert cache.misses == 1


def test_encode_primitive():
    assert encode_primitive(None) == "null"
    assert encode_primitive(True) == "true"
    assert encode_primitive(False) == "false"
    assert encode_primitive(0) == "0"
    assert encode_primitive("ok") == "ok"
    with pytest.raises(InvalidInputError):
        encode_primitive(object())
