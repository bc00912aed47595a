"""Encoders for different value types."""

from typing import Iterator, List, Optional, Set, Tuple

from .constants import CLOSE_BRACE, CLOSE_BRACKET, OPEN_BRACE, OPEN_BRACKET, SPACE
from .errors import CircularReferenceError, MaxDepthExceededError
from .normalize import is_json_container, is_json_object, normalize_value
from .primitives import encode_key, encode_primitive
from .types import Depth, JsonValue, ResolvedEncodeOptions


class ContainerFrame:
    """An object or array whose entries are still being encoded.

    Nesting is tracked on an explicit stack of frames, so the depth of the
    input never touches the Python call stack.
    """

    def __init__(self, container: JsonValue, depth: Depth) -> None:
        self.depth = depth
        self.marker = id(container)
        self.parts: List[str] = []
        self.key: Optional[str] = None
        self.entries: Iterator[Tuple[Optional[str], JsonValue]]
        if is_json_object(container):
            self.opener, self.closer = OPEN_BRACE, CLOSE_BRACE
            self.entries = ((encode_key(key), item) for key, item in container.items())
        else:
            self.opener, self.closer = OPEN_BRACKET, CLOSE_BRACKET
            self.entries = ((None, item) for item in container)

    def add(self, encoded: str) -> None:
        """Append an encoded entry under the pending key, if any."""
        if self.key is None:
            self.parts.append(encoded)
        elif _attaches(encoded):
            self.parts.append(f"{self.key}{encoded}")
        else:
            self.parts.append(f"{self.key}{SPACE}{encoded}")
        self.key = None

    def close(self) -> str:
        return f"{self.opener}{SPACE.join(self.parts)}{self.closer}"


def _attaches(encoded: str) -> bool:
    """Containers follow their key with no separating space."""
    return encoded.startswith(OPEN_BRACE) or encoded.startswith(OPEN_BRACKET)


def open_container(container: JsonValue, options: ResolvedEncodeOptions, depth: Depth, visiting: Set[int]) -> ContainerFrame:
    """Start encoding a container, enforcing the depth and cycle guards.

    Args:
        container: Dictionary object or list array
        options: Resolved encoding options
        depth: Nesting depth of the container, the root being 0
        visiting: ids of the containers on the current path

    Returns:
        Frame for the container
    """
    if depth > options.maxDepth:
        raise MaxDepthExceededError(options.maxDepth)
    frame = ContainerFrame(container, depth)
    if frame.marker in visiting:
        raise CircularReferenceError()
    visiting.add(frame.marker)
    return frame


def encode_value(value: JsonValue, options: ResolvedEncodeOptions, depth: Depth, visiting: Set[int]) -> str:
    """Encode a value to compact text.

    Objects become ``{key value key{...} ...}`` and arrays ``[item item ...]``.

    Args:
        value: Value to encode
        options: Resolved encoding options
        depth: Nesting depth of the value, the root container being 0
        visiting: ids of the containers on the current path

    Returns:
        Compact text for the value
    """
    value = normalize_value(value)
    if not is_json_container(value):
        return encode_primitive(value, options.cache)

    stack = [open_container(value, options, depth, visiting)]
    try:
        while True:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                stack.pop()
                visiting.discard(frame.marker)
                encoded = frame.close()
                if not stack:
                    return encoded
                stack[-1].add(encoded)
                continue

            frame.key, item = entry
            item = normalize_value(item)
            if is_json_container(item):
                stack.append(open_container(item, options, frame.depth + 1, visiting))
            else:
                frame.add(encode_primitive(item, options.cache))
    finally:
        for frame in stack:
            visiting.discard(frame.marker)
