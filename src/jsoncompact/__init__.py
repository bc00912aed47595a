"""
jsoncompact - Compact, reversible text encoding of JSON data for LLMs

Objects and arrays are written without commas or colons and strings are
left unquoted wherever that is unambiguous, e.g. ``{name test tags[a b]}``.
"""

from .cache import StringCache
from .decoder import decode
from .encoder import encode
from .errors import CircularReferenceError, CompactError, InvalidInputError, MaxDepthExceededError
from .stats import measure
from .types import CompactStats, DecodeOptions, EncodeOptions, JsonValue

__version__ = "0.1.0"
__all__ = [
    "encode",
    "decode",
    "measure",
    "StringCache",
    "CompactError",
    "InvalidInputError",
    "CircularReferenceError",
    "MaxDepthExceededError",
    "EncodeOptions",
    "DecodeOptions",
    "CompactStats",
    "JsonValue",
]
