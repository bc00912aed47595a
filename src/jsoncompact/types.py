"""Type definitions for jsoncompact."""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, TypedDict, Union

from .constants import DEFAULT_MAX_DEPTH

if TYPE_CHECKING:
    from .cache import StringCache

# JSON-compatible types
JsonPrimitive = Union[str, int, float, bool, None]
JsonObject = Dict[str, Any]
JsonArray = List[Any]
JsonValue = Union[JsonPrimitive, JsonArray, JsonObject]

# Lexical token produced by the scanner
Token = str


class EncodeOptions(TypedDict, total=False):
    """Options for compact encoding.

    Attributes:
        maxDepth: Deepest container nesting allowed below the root (default: 100)
        cache: Optional string cache shared between encode calls
    """

    maxDepth: int
    cache: "StringCache"


class DecodeOptions(TypedDict, total=False):
    """Options for compact decoding.

    Attributes:
        unquoteKeys: Decode quoted object keys like quoted values (default: False)
    """

    unquoteKeys: bool


class CompactStats(TypedDict):
    """Size comparison between minified JSON and compact text."""

    jsonLength: int
    compactLength: int
    savings: float


class ResolvedEncodeOptions:
    """Resolved encoding options with defaults applied."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, cache: Optional["StringCache"] = None) -> None:
        self.maxDepth = max_depth
        self.cache = cache


class ResolvedDecodeOptions:
    """Resolved decoding options with defaults applied."""

    def __init__(self, unquote_keys: bool = False) -> None:
        self.unquoteKeys = unquote_keys


# Depth type for tracking container nesting
Depth = int
