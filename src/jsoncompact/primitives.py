"""Classification and encoding of atoms and object keys."""

import json
import math
import re
from typing import Any, Optional

from .cache import StringCache
from .constants import FALSE_LITERAL, INFINITY_LITERAL, NAN_LITERAL, NEG_INFINITY_LITERAL, NULL_LITERAL, QUOTE, TRUE_LITERAL
from .errors import InvalidInputError

# Values may also carry underscores and anything in U+0080..U+FFFF.
_BARE_STRING_RE = re.compile(r"[A-Za-z0-9\-._\u0080-\uFFFF]+")
# Keys are restricted to ASCII letters, digits, hyphen and period.
_BARE_KEY_RE = re.compile(r"[A-Za-z0-9\-.]+")


def is_bare_string(value: str) -> bool:
    """Check if a string value can be written without quotes.

    Args:
        value: String value

    Returns:
        True if the value may appear as a bare atom
    """
    return _BARE_STRING_RE.fullmatch(value) is not None


def is_bare_key(key: str) -> bool:
    """Check if an object key can be written without quotes.

    Args:
        key: Canonical key text

    Returns:
        True if the key may appear bare
    """
    return _BARE_KEY_RE.fullmatch(key) is not None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def is_valid_json_text(value: str) -> bool:
    """Check if a string is, by itself, a complete JSON document."""
    try:
        json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def format_number(value: float) -> str:
    """Format an int or float as a number atom.

    Args:
        value: Numeric value (bool is not accepted)

    Returns:
        Decimal text, or NaN / Infinity / -Infinity for non-finite floats
    """
    if isinstance(value, float):
        if math.isnan(value):
            return NAN_LITERAL
        if math.isinf(value):
            return INFINITY_LITERAL if value > 0 else NEG_INFINITY_LITERAL
        return repr(value)
    return str(int(value))


def canonical_key(key: Any) -> str:
    """Convert a mapping key to the text it is written as.

    Args:
        key: Mapping key (str, int, float, bool or None)

    Returns:
        Key text before quoting
    """
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return TRUE_LITERAL if key else FALSE_LITERAL
    if isinstance(key, (int, float)):
        return format_number(key)
    if key is None:
        return NULL_LITERAL
    raise InvalidInputError(f"Keys must be str, int, float, bool or None, not {type(key).__name__}")


def encode_key(key: Any) -> str:
    """Encode an object key.

    Args:
        key: Mapping key

    Returns:
        Bare key text, or a JSON string literal
    """
    text = canonical_key(key)
    if is_bare_key(text):
        return text
    return json.dumps(text, ensure_ascii=False)


def encode_string(value: str, cache: Optional[StringCache] = None) -> str:
    """Encode a string value.

    A string that is itself a JSON document is wrapped in quotes without
    escaping its content, e.g. ``'{"a": 1}'`` becomes ``"{"a": 1}"``.

    Args:
        value: String value
        cache: Optional cache of previously encoded strings

    Returns:
        Encoded string atom
    """
    if cache is not None:
        cached = cache.get(value)
        if cached is not None:
            return cached

    if is_bare_string(value):
        encoded = value
    elif is_valid_json_text(value):
        encoded = f"{QUOTE}{value}{QUOTE}"
    else:
        encoded = json.dumps(value, ensure_ascii=False)

    if cache is not None:
        cache.put(value, encoded)
    return encoded


def encode_primitive(value: Any, cache: Optional[StringCache] = None) -> str:
    """Encode a primitive value.

    Args:
        value: None, bool, int, float or str
        cache: Optional string cache

    Returns:
        Encoded atom
    """
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return encode_string(value, cache)
    raise InvalidInputError(f"Object of type {type(value).__name__} is not a primitive")
