"""Core compact encoding functionality."""

import logging
from typing import Any, Optional, Set

from .cache import StringCache
from .constants import DEFAULT_MAX_DEPTH
from .encoders import encode_value
from .errors import InvalidInputError
from .normalize import is_json_container, normalize_value
from .types import EncodeOptions, ResolvedEncodeOptions

logger = logging.getLogger(__name__)


def encode(value: Any, options: Optional[EncodeOptions] = None) -> str:
    """Encode an object or array into compact text.

    Args:
        value: The value to encode; the root must be an object or array
        options: Optional encoding options

    Returns:
        Compact string representation

    Raises:
        InvalidInputError: If the root is not a container or holds an unsupported value
        CircularReferenceError: If a container contains itself
        MaxDepthExceededError: If nesting goes past ``maxDepth``
    """
    root = None if value is None else normalize_value(value)
    if not is_json_container(root):
        raise InvalidInputError("Input must be a non-null object")

    resolved_options = resolve_options(options)
    visiting: Set[int] = set()
    text = encode_value(root, resolved_options, 0, visiting)
    logger.debug("Encoded %s into %d characters", type(value).__name__, len(text))
    return text


def resolve_options(options: Optional[EncodeOptions]) -> ResolvedEncodeOptions:
    """Resolve encoding options with defaults.

    A fresh ``StringCache`` is created for the call unless one is supplied.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied
    """
    if options is None:
        return ResolvedEncodeOptions(cache=StringCache())

    max_depth = options.get("maxDepth", DEFAULT_MAX_DEPTH)
    cache = options.get("cache")
    if cache is None:
        cache = StringCache()

    return ResolvedEncodeOptions(max_depth=max_depth, cache=cache)
