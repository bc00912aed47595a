"""Exceptions raised by the compact codec."""


class CompactError(Exception):
    """Base class for every error raised by jsoncompact."""


class InvalidInputError(CompactError, TypeError):
    """Raised when a value cannot be encoded or decoded at all."""


class CircularReferenceError(CompactError, ValueError):
    """Raised when a container is reachable from itself while encoding."""

    def __init__(self, message: str = "Circular reference detected") -> None:
        super().__init__(message)


class MaxDepthExceededError(CompactError, ValueError):
    """Raised when container nesting goes past the configured maxDepth."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Maximum recursion depth exceeded (maxDepth={max_depth})")
        self.max_depth = max_depth
