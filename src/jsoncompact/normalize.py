"""Normalization of Python values into the JSON data model."""

from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from .errors import InvalidInputError
from .types import JsonValue


def is_json_primitive(value: Any) -> bool:
    """Check if value is a JSON primitive (null, bool, number, string)."""
    return value is None or isinstance(value, (str, int, float, bool))


def is_json_object(value: Any) -> bool:
    """Check if value is a JSON object."""
    return isinstance(value, dict)


def is_json_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def normalize_value(value: Any) -> JsonValue:
    """Convert one node to a JSON-compatible value.

    Only the node itself is converted; children are normalized as the encoder
    reaches them. ``dict`` and ``list`` are returned unchanged so that their
    identity can be tracked for cycle detection.

    Args:
        value: Any Python value

    Returns:
        A primitive, dict or list
    """
    if is_json_primitive(value) or is_json_container(value):
        return value

    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (tuple, set, frozenset)):
        return list(value)

    # Pydantic v2, then v1
    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump) and hasattr(value, "model_fields"):
        return model_dump()
    if hasattr(value, "__fields__") and callable(getattr(value, "dict", None)):
        return value.dict()

    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, Enum):
        return normalize_value(value.value)

    raise InvalidInputError(f"Object of type {type(value).__name__} is not compact serializable")
