"""Size comparison between minified JSON and compact text."""

import json
from typing import Any, Optional

from .encoder import encode
from .types import CompactStats, EncodeOptions


def measure(value: Any, options: Optional[EncodeOptions] = None) -> CompactStats:
    """Compare the length of minified JSON with the compact encoding.

    Args:
        value: Object or array to encode
        options: Optional encoding options

    Returns:
        Both lengths and the percentage saved, rounded to one decimal
    """
    compact = encode(value, options)
    json_text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    json_length = len(json_text)
    savings = round((json_length - len(compact)) / json_length * 100, 1) if json_length else 0.0
    return {
        "jsonLength": json_length,
        "compactLength": len(compact),
        "savings": savings,
    }
